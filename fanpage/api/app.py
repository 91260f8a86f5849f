"""FastAPI application factory.

Routes
------
    /            — the assembled fan page (HTML)
    /api/stats   — headline team statistics (JSON)
    /static      — stylesheet and other static assets
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from fanpage import __version__
from fanpage.api.routers import page as page_router
from fanpage.config import settings


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title="fanpage",
        description="Serves one page assembled from scraped team sources.",
        version=__version__,
    )

    app.include_router(page_router.router, tags=["page"])
    app.mount("/static", StaticFiles(directory=settings.web_dir), name="static")

    return app


# Module-level instance used by uvicorn:
#   uvicorn fanpage.api.app:app --reload
app = create_app()
