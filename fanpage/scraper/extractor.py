"""Selector-based extraction: repeated groups in, raw field mappings out."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping

from bs4 import BeautifulSoup, ParserRejectedMarkup, Tag

from fanpage.scraper.errors import ParseError


@dataclass(frozen=True)
class FieldSelector:
    """A CSS selector scoped to one group match.

    With ``attr`` set the value is that attribute of the first match;
    otherwise it is the concatenated text of every match.
    """

    css: str
    attr: str | None = None


def parse_document(html: str) -> BeautifulSoup:
    """Parse *html* into a document tree.

    Raises:
        ParseError: If the parser rejects the markup outright.
    """
    try:
        return BeautifulSoup(html, "html.parser")
    except ParserRejectedMarkup as exc:
        raise ParseError(f"Markup rejected by parser: {exc}") from exc


def read_field(group: Tag, selector: FieldSelector) -> str:
    """Resolve *selector* within *group*; a missing match reads as ``""``."""
    if selector.attr is not None:
        match = group.select_one(selector.css)
        if match is None:
            return ""
        value = match.get(selector.attr, "")
        if isinstance(value, list):
            value = " ".join(value)
        return value.strip()
    return "".join(m.get_text() for m in group.select(selector.css)).strip()


def extract_all(
    document: Tag,
    group_selector: str,
    field_selectors: Mapping[str, FieldSelector],
) -> List[Dict[str, str]]:
    """Return one ``{name: value}`` mapping per *group_selector* match, in document order."""
    return [
        {name: read_field(group, selector) for name, selector in field_selectors.items()}
        for group in document.select(group_selector)
    ]


def extract_paragraphs(document: Tag, container_selector: str) -> List[Tag]:
    """Return the ``<p>`` elements of the first *container_selector* match.

    An absent container yields ``[]``.
    """
    container = document.select_one(container_selector)
    if container is None:
        return []
    return list(container.find_all("p"))
