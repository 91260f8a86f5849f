"""fanpage CLI — entry-point for serving and scraping.

Usage:
    python cli/main.py --help

Commands:
    serve     → run the local page server (and open it in a browser)
    scrape    → run one source and print what it extracts
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from fanpage.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
import threading
import webbrowser
from dataclasses import asdict
from typing import Optional

import typer

from fanpage import sources
from fanpage.config import settings
from fanpage.scraper.errors import ScraperError

app = typer.Typer(
    name="fanpage",
    help="fanpage CLI.",
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override LOG_LEVEL."),
) -> None:
    """Configure logging for every sub-command."""
    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


# ---------------------------------------------------------------------------
# Server
# ---------------------------------------------------------------------------
@app.command("serve")
def serve(
    host: str = typer.Option(settings.host, help="Interface to bind."),
    port: int = typer.Option(settings.port, help="Port to listen on."),
    browser: bool = typer.Option(
        settings.open_browser, "--browser/--no-browser", help="Open the page in the default browser."
    ),
) -> None:
    """Serve the fan page locally."""
    import uvicorn

    url = f"http://{host}:{port}"
    if browser:
        # Give uvicorn a moment to bind before the browser asks for the page.
        threading.Timer(1.0, webbrowser.open, args=(url,)).start()
    typer.echo(f"[serve] Listening on {url}")
    uvicorn.run("fanpage.api.app:app", host=host, port=port)


# ---------------------------------------------------------------------------
# Scrape commands
# ---------------------------------------------------------------------------
scrape_app = typer.Typer(help="Run a single source.", no_args_is_help=True)
app.add_typer(scrape_app, name="scrape")


def _fail(exc: ScraperError) -> None:
    typer.echo(f"Error: {exc}")
    raise typer.Exit(code=1)


@scrape_app.command("reddit")
def scrape_reddit(
    url: str = typer.Argument(sources.REDDIT_SITES[0], help="Listing or search page URL."),
) -> None:
    """Print the post rows extracted from a discussion listing."""
    try:
        typer.echo(sources.get_reddit(url), nl=False)
    except ScraperError as exc:
        _fail(exc)


@scrape_app.command("schedule")
def scrape_schedule(
    url: str = typer.Option(sources.SCHEDULE_SITE, help="Schedule page URL."),
) -> None:
    """Print the schedule table rows."""
    try:
        typer.echo(sources.get_schedule(url))
    except ScraperError as exc:
        _fail(exc)


@scrape_app.command("roster")
def scrape_roster(
    url: str = typer.Option(sources.SOCCER_REF_SITE, help="Squad page URL."),
) -> None:
    """Print the roster table rows."""
    try:
        typer.echo(sources.get_roster(url), nl=False)
    except ScraperError as exc:
        _fail(exc)


@scrape_app.command("stats")
def scrape_stats(
    url: str = typer.Option(sources.SOCCER_REF_SITE, help="Squad page URL."),
) -> None:
    """Print the team summary statistics."""
    try:
        summary = sources.get_stats(url)
    except ScraperError as exc:
        _fail(exc)
        return
    for key, value in asdict(summary).items():
        typer.echo(f"  {key:<9}: {value or '(none)'}")


if __name__ == "__main__":
    app()
