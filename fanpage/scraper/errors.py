"""Exceptions raised by the scraper pipeline."""

from __future__ import annotations


class ScraperError(Exception):
    """Base class for every extraction-level failure."""


class FetchError(ScraperError):
    """A source address could not be retrieved."""

    def __init__(self, url: str, cause: BaseException) -> None:
        super().__init__(f"Failed to fetch {url}: {cause}")
        self.url = url
        self.cause = cause


class NotFoundError(ScraperError):
    """An expected structural element is absent from the parsed markup."""

    def __init__(self, element: str) -> None:
        super().__init__(f"Missing <{element}> in the node tree")
        self.element = element


class ParseError(ScraperError):
    """Markup could not be parsed, or a row layout could not be expanded."""
