"""Field normalisation: deterministic text clean-up applied after extraction."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Sequence, TypeVar
from urllib.parse import urlsplit

from bs4 import Tag

from fanpage.scraper.extractor import read_field
from fanpage.scraper.models import PlayerRecord, PostRecord, TeamSummary
from fanpage.scraper.policies import (
    ELLIPSIS,
    MAX_POSTS,
    PINNED_POST_COUNT,
    PINNED_POSTS_URL,
    REDDIT_BASE,
    ROSTER_FOOTER_ROWS,
    ROSTER_HEADER_ROWS,
    SUMMARY_LINES,
    SUMMARY_RULES,
    TITLE_LIMIT,
    ChildTextRule,
    SplitRule,
    SummaryLine,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Text transforms
# ---------------------------------------------------------------------------

def absolutize_link(href: str, base: str = REDDIT_BASE) -> str:
    """Prefix *href* with *base* when it carries no URL scheme."""
    if urlsplit(href).scheme:
        return href
    if href.startswith("//"):
        return "https:" + href
    return base + href


def truncate(text: str, limit: int = TITLE_LIMIT, marker: str = ELLIPSIS) -> str:
    """Cut *text* so that, marker included, it is at most *limit* characters."""
    if len(text) <= limit:
        return text
    return text[: limit - len(marker)] + marker


def split_segment(text: str, rule: SplitRule) -> str:
    """Apply the split chain of *rule* to *text*, then drop every post-strip character.

    Raises:
        IndexError: If a step asks for a segment the text does not have.
    """
    for delimiter, index in rule.steps:
        text = text.split(delimiter)[index]
    if rule.strip:
        text = text.translate(str.maketrans("", "", rule.strip))
    return text.strip()


def short_nation(raw: str) -> str:
    """Reduce a nationality cell such as ``"ENG England"`` to its code.

    The site prefixes the code with a lower-case flag label (``"eng ENG"``),
    so the first all-caps token wins over the first token.
    """
    tokens = raw.split()
    if not tokens:
        return ""
    for token in tokens:
        if token.isupper():
            return token
    return tokens[0]


def drop_fixed_rows(rows: Sequence[T], head: int, tail: int) -> List[T]:
    """Discard *head* leading and *tail* trailing rows."""
    if len(rows) <= head + tail:
        return []
    return list(rows[head : len(rows) - tail])


# ---------------------------------------------------------------------------
# Per-source normalisation
# ---------------------------------------------------------------------------

def normalize_posts(rows: Iterable[Dict[str, str]], source_url: str) -> List[PostRecord]:
    """Turn raw ``{url, title}`` mappings into at most ``MAX_POSTS`` records."""
    posts = [
        PostRecord(url=absolutize_link(row.get("url", "")), title=truncate(row.get("title", "")))
        for row in rows
    ]
    if source_url == PINNED_POSTS_URL:
        posts = posts[PINNED_POST_COUNT:]
    return posts[:MAX_POSTS]


def normalize_players(rows: Sequence[Dict[str, str]]) -> List[PlayerRecord]:
    """Drop the header and totals rows, then build one record per player row."""
    body = drop_fixed_rows(rows, ROSTER_HEADER_ROWS, ROSTER_FOOTER_ROWS)
    return [
        PlayerRecord(
            name=row.get("name", ""),
            nation=short_nation(row.get("nation", "")),
            position=row.get("position", ""),
            age=row.get("age", ""),
        )
        for row in body
    ]


def summarize(paragraphs: Sequence[Tag]) -> TeamSummary:
    """Build a :class:`TeamSummary` from the summary block's paragraphs.

    Each field is parsed on its own; a field whose rule does not fit the text
    stays empty without affecting the others.
    """
    lines: Dict[SummaryLine, Tag] = dict(zip(SUMMARY_LINES, paragraphs))
    values: Dict[str, str] = {}
    for field_name, rule in SUMMARY_RULES.items():
        paragraph = lines.get(rule.line)
        if paragraph is None:
            continue
        if isinstance(rule, ChildTextRule):
            values[field_name] = read_field(paragraph, rule.selector)
            continue
        try:
            values[field_name] = split_segment(paragraph.get_text(), rule)
        except IndexError:
            logger.debug("Summary %s line has no %s field", rule.line.value, field_name)
    return TeamSummary(**values)
