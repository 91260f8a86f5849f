"""HTTP fetcher: one blocking GET per source address, no retry."""

from __future__ import annotations

import logging

import httpx

from fanpage.config import settings
from fanpage.scraper.errors import FetchError
from fanpage.scraper.models import RawPage

logger = logging.getLogger(__name__)


def fetch_url(url: str) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    Raises:
        FetchError: On an invalid address, any transport failure or a
            4xx/5xx status code.  The underlying ``httpx`` exception is chained as ``__cause__``.
    """
    logger.debug("Fetching %s", url)
    try:
        with httpx.Client(
            headers={"User-Agent": settings.user_agent},
            timeout=settings.request_timeout,
            follow_redirects=True,
        ) as client:
            response = client.get(url)
            response.raise_for_status()
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise FetchError(url, exc) from exc

    return RawPage(url=url, html=response.text, status_code=response.status_code)
