"""Scraper package — fetch, navigate, extract and normalise source pages."""

from fanpage.scraper.errors import FetchError, NotFoundError, ParseError, ScraperError
from fanpage.scraper.extractor import FieldSelector, extract_all, parse_document
from fanpage.scraper.fetcher import fetch_url
from fanpage.scraper.models import PlayerRecord, PostRecord, RawPage, TeamSummary
from fanpage.scraper.navigator import find_first, find_first_tag, render_children

__all__ = [
    "fetch_url",
    "parse_document",
    "extract_all",
    "find_first",
    "find_first_tag",
    "render_children",
    "FieldSelector",
    "RawPage",
    "PostRecord",
    "PlayerRecord",
    "TeamSummary",
    "ScraperError",
    "FetchError",
    "NotFoundError",
    "ParseError",
]
