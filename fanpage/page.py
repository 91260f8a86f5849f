"""Page assembly: gather every source and fill the page layout.

Sources are independent.  A failing source is logged and rendered empty so
the rest of the page still appears.
"""

from __future__ import annotations

import html
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import asdict, dataclass, field
from string import Template
from typing import Callable, Dict, TypeVar

from fanpage import sources
from fanpage.config import Settings, settings as default_settings
from fanpage.rendering import EMPTY_FRAGMENT, Fragment
from fanpage.scraper.errors import ScraperError
from fanpage.scraper.models import TeamSummary

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Tables:
    soccer: Fragment = EMPTY_FRAGMENT
    soccer_top: Fragment = EMPTY_FRAGMENT
    team: Fragment = EMPTY_FRAGMENT
    schedule: Fragment = EMPTY_FRAGMENT
    roster: Fragment = EMPTY_FRAGMENT


@dataclass
class Socials:
    twitter: str = sources.SOCIAL_SITES["twitter"]
    instagram: str = sources.SOCIAL_SITES["instagram"]
    team: str = sources.SOCIAL_SITES["team"]
    espn: str = sources.SOCIAL_SITES["espn"]
    who: str = sources.SOCIAL_SITES["who"]


@dataclass
class PageContext:
    tables: Tables = field(default_factory=Tables)
    stats: TeamSummary = field(default_factory=TeamSummary)
    sites: Socials = field(default_factory=Socials)


def _guarded(name: str, call: Callable[[], T], fallback: T) -> T:
    try:
        return call()
    except ScraperError as exc:
        logger.warning("Source %r failed, rendering it empty: %s", name, exc)
        return fallback


def build_page_context(config: Settings | None = None) -> PageContext:
    """Run every source (concurrently, bounded by the settings) and collect the results."""
    config = config or default_settings
    soccer_url, soccer_top_url, team_url = sources.REDDIT_SITES

    jobs: Dict[str, Callable[[], object]] = {
        "soccer": lambda: sources.get_reddit(soccer_url),
        "soccer_top": lambda: sources.get_reddit(soccer_top_url),
        "team": lambda: sources.get_reddit(team_url),
        "schedule": lambda: sources.get_schedule(sources.SCHEDULE_SITE),
        "roster": lambda: sources.get_roster(sources.SOCCER_REF_SITE),
        "stats": lambda: sources.get_stats(sources.SOCCER_REF_SITE),
    }

    with ThreadPoolExecutor(max_workers=max(1, config.max_concurrent_fetches)) as pool:
        futures = {
            name: pool.submit(
                _guarded, name, call, TeamSummary() if name == "stats" else EMPTY_FRAGMENT
            )
            for name, call in jobs.items()
        }
        results = {name: future.result() for name, future in futures.items()}

    stats = results.pop("stats")
    return PageContext(tables=Tables(**results), stats=stats)  # type: ignore[arg-type]


def render_page(context: PageContext, config: Settings | None = None) -> str:
    """Substitute *context* into the page layout.

    Table fragments are inserted verbatim; statistics and links are escaped.
    """
    config = config or default_settings
    layout = Template((config.web_dir / "index.html").read_text(encoding="utf-8"))

    values: Dict[str, str] = {f"table_{k}": str(v) for k, v in asdict(context.tables).items()}
    values.update({f"stat_{k}": html.escape(v) for k, v in asdict(context.stats).items()})
    values.update({f"site_{k}": html.escape(v) for k, v in asdict(context.sites).items()})
    return layout.substitute(values)
