"""Page endpoints.

Routes
------
GET /            → build_page_context + render_page
GET /api/stats   → get_stats
"""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from fanpage.page import build_page_context, render_page
from fanpage.scraper.errors import ScraperError
from fanpage.sources import SOCCER_REF_SITE, get_stats

router = APIRouter()


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class StatsResponse(BaseModel):
    country: str
    league: str
    record: str
    home: str
    points: str
    goals: str
    position: str
    diff: str


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.get("/", response_class=HTMLResponse)
def index() -> str:
    """Fetch every source and return the assembled page.

    Individual source failures render as empty sections.
    """
    return render_page(build_page_context())


@router.get("/api/stats", response_model=StatsResponse)
def stats() -> dict[str, str]:
    try:
        summary = get_stats(SOCCER_REF_SITE)
    except ScraperError as exc:
        raise HTTPException(status_code=502, detail=f"Stats unavailable: {exc}") from exc
    return asdict(summary)
