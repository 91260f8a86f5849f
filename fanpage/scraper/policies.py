"""Selector policy table for every scraped source.

The selectors are tied to the current markup of each site.  When a layout
drifts, change the data here rather than the extraction code.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple, Union
from urllib.parse import urlsplit

from fanpage.scraper.extractor import FieldSelector

# ---------------------------------------------------------------------------
# Discussion listings (old.reddit.com)
# ---------------------------------------------------------------------------
REDDIT_BASE = "https://old.reddit.com"

# Front page of /r/soccer opens with two daily pinned posts.
PINNED_POSTS_URL = "https://old.reddit.com/r/soccer/"
PINNED_POST_COUNT = 2

MAX_POSTS = 10
TITLE_LIMIT = 50
ELLIPSIS = "..."


@dataclass(frozen=True)
class GroupPolicy:
    """A group selector plus the field selectors resolved inside each group."""

    name: str
    group: str
    fields: Mapping[str, FieldSelector]


_TITLE_LINK = 'a[data-event-action="title"]'

LISTING_POLICY = GroupPolicy(
    name="listing",
    group=".top-matter",
    fields=MappingProxyType({
        "url": FieldSelector(_TITLE_LINK, attr="href"),
        "title": FieldSelector(_TITLE_LINK),
    }),
)

SEARCH_POLICY = GroupPolicy(
    name="search",
    group=".search-result-header",
    fields=MappingProxyType({
        "url": FieldSelector("a", attr="href"),
        "title": FieldSelector("a"),
    }),
)

LISTING_POLICIES: Mapping[str, GroupPolicy] = MappingProxyType(
    {p.name: p for p in (LISTING_POLICY, SEARCH_POLICY)}
)


def listing_policy_for(url: str) -> GroupPolicy:
    """Pick the listing policy matching the page variant behind *url*."""
    if "/search" in urlsplit(url).path:
        return SEARCH_POLICY
    return LISTING_POLICY


# ---------------------------------------------------------------------------
# Schedule (bleacherreport.com)
# ---------------------------------------------------------------------------
SCHEDULE_ELEMENT = "tbody"


# ---------------------------------------------------------------------------
# Roster and summary statistics (fbref.com)
# ---------------------------------------------------------------------------
ROSTER_POLICY = GroupPolicy(
    name="roster",
    group='table[id="stats_player"] tr',
    fields=MappingProxyType({
        "name": FieldSelector('th[data-stat="player"]'),
        "nation": FieldSelector('td[data-stat="nationality"]'),
        "position": FieldSelector('td[data-stat="position"]'),
        "age": FieldSelector('td[data-stat="age"]'),
    }),
)
ROSTER_HEADER_ROWS = 2
ROSTER_FOOTER_ROWS = 1

SUMMARY_CONTAINER = 'div[data-template="Partials/Teams/Summary"]'


class SummaryLine(Enum):
    """Role of one paragraph in the team summary block."""

    COUNTRY = "country-line"
    RECORD = "record-line"
    HOME = "home-line"
    GOALS = "goals-line"


# Paragraph order as laid out on the page.
SUMMARY_LINES: Tuple[SummaryLine, ...] = (
    SummaryLine.COUNTRY,
    SummaryLine.RECORD,
    SummaryLine.HOME,
    SummaryLine.GOALS,
)


@dataclass(frozen=True)
class SplitRule:
    """Chain of ``text.split(delimiter)[index]`` steps, then trim and strip."""

    line: SummaryLine
    steps: Tuple[Tuple[str, int], ...]
    strip: str = ""


@dataclass(frozen=True)
class ChildTextRule:
    """Text of a child element of the paragraph."""

    line: SummaryLine
    selector: FieldSelector


SummaryRule = Union[SplitRule, ChildTextRule]

SUMMARY_RULES: Mapping[str, SummaryRule] = MappingProxyType({
    "country": SplitRule(SummaryLine.COUNTRY, ((" ", 2),)),
    "record": SplitRule(SummaryLine.RECORD, ((",", 0), (":", 1))),
    "points": SplitRule(SummaryLine.RECORD, ((",", 1), ("points", 0))),
    "position": SplitRule(SummaryLine.RECORD, ((",", 2), ("in", 0))),
    "league": ChildTextRule(SummaryLine.RECORD, FieldSelector("a")),
    "home": SplitRule(SummaryLine.HOME, ((" ", 7),), strip="()"),
    "goals": SplitRule(SummaryLine.GOALS, ((",", 0), (" ", 1))),
    "diff": SplitRule(SummaryLine.GOALS, ((",", 2), (" ", 1))),
})
