"""Per-source extraction calls.

Every ``get_*`` function fetches one page and returns a ready-to-embed
:class:`~fanpage.rendering.Fragment` (or a :class:`TeamSummary`).  The
matching ``parse_*`` function does the same work on markup already in hand.
Errors from fetching or parsing propagate to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import List

from fanpage.rendering import Fragment, render_players, render_posts
from fanpage.scraper.extractor import extract_all, extract_paragraphs, parse_document
from fanpage.scraper.fetcher import fetch_url
from fanpage.scraper.models import PlayerRecord, PostRecord, TeamSummary
from fanpage.scraper.navigator import find_first_tag, render_children
from fanpage.scraper.normalizer import normalize_players, normalize_posts, summarize
from fanpage.scraper.policies import (
    ROSTER_POLICY,
    SCHEDULE_ELEMENT,
    SUMMARY_CONTAINER,
    GroupPolicy,
    listing_policy_for,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Source addresses
# ---------------------------------------------------------------------------
# [/r/soccer, /r/soccer top results for the team, team sub-reddit top]
REDDIT_SITES = (
    "https://old.reddit.com/r/soccer/",
    "https://old.reddit.com/r/soccer/search?q=juventus&restrict_sr=on&sort=top&t=day",
    "https://old.reddit.com/r/Juve/top/",
)
SCHEDULE_SITE = "https://bleacherreport.com/juventus/schedule"
SOCCER_REF_SITE = "https://fbref.com/en/squads/e0652b02/Juventus"

# Linked from the page only, never fetched.
SOCIAL_SITES = {
    "twitter": "https://twitter.com/juventusfcen",
    "instagram": "https://www.instagram.com/juventus/?hl=en",
    "espn": "http://www.espn.com/soccer/team/_/id/111/",
    "team": "https://www.juventus.com/en/",
    "who": "https://www.whoscored.com/Teams/87/Show/Italy-Juventus",
}


# ---------------------------------------------------------------------------
# Discussion listings
# ---------------------------------------------------------------------------

def parse_reddit(html: str, url: str, policy: GroupPolicy | None = None) -> List[PostRecord]:
    """Extract the post records of a listing page fetched from *url*."""
    policy = policy or listing_policy_for(url)
    rows = extract_all(parse_document(html), policy.group, policy.fields)
    return normalize_posts(rows, url)


def get_reddit(url: str, policy: GroupPolicy | None = None) -> Fragment:
    raw = fetch_url(url)
    posts = parse_reddit(raw.html, url, policy)
    logger.info("Extracted %d post(s) from %s", len(posts), url)
    return render_posts(posts)


# ---------------------------------------------------------------------------
# Schedule
# ---------------------------------------------------------------------------

def parse_schedule(html: str) -> Fragment:
    """Return the rows of the page's first table body as a fragment.

    Raises:
        NotFoundError: If the page has no table body.
    """
    body = find_first_tag(parse_document(html), SCHEDULE_ELEMENT)
    return Fragment(render_children(body))


def get_schedule(url: str = SCHEDULE_SITE) -> Fragment:
    raw = fetch_url(url)
    fragment = parse_schedule(raw.html)
    logger.info("Extracted %d schedule row(s) from %s", fragment.count("<tr"), url)
    return fragment


# ---------------------------------------------------------------------------
# Roster and summary statistics
# ---------------------------------------------------------------------------

def parse_roster(html: str) -> List[PlayerRecord]:
    rows = extract_all(parse_document(html), ROSTER_POLICY.group, ROSTER_POLICY.fields)
    return normalize_players(rows)


def get_roster(url: str = SOCCER_REF_SITE) -> Fragment:
    raw = fetch_url(url)
    players = parse_roster(raw.html)
    logger.info("Extracted %d player(s) from %s", len(players), url)
    return render_players(players)


def parse_stats(html: str) -> TeamSummary:
    paragraphs = extract_paragraphs(parse_document(html), SUMMARY_CONTAINER)
    return summarize(paragraphs)


def get_stats(url: str = SOCCER_REF_SITE) -> TeamSummary:
    raw = fetch_url(url)
    summary = parse_stats(raw.html)
    populated = sum(1 for value in asdict(summary).values() if value)
    logger.info("Extracted %d summary field(s) from %s", populated, url)
    return summary
