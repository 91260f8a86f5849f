"""Data models for the scraper pipeline.

All records are transient: produced by one extraction call and consumed by
one rendering call.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    html: str
    status_code: int


@dataclass(frozen=True)
class PostRecord:
    """One discussion post: absolute link plus (possibly truncated) title."""

    url: str
    title: str


@dataclass(frozen=True)
class PlayerRecord:
    name: str = ""
    nation: str = ""
    position: str = ""
    age: str = ""


@dataclass
class TeamSummary:
    """Headline team statistics; every field is independently optional."""

    country: str = ""
    league: str = ""
    record: str = ""
    home: str = ""
    points: str = ""
    goals: str = ""
    position: str = ""
    diff: str = ""
