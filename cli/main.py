"""Link crawler CLI.

Usage:
    python cli/main.py https://example.com/
    python cli/main.py --log-level debug https://example.com/

Prints every valid link reachable from the seed URL, indented by depth.
Diagnostics (failed fetches, malformed markup) go to stderr.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from crawler.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from typing import Optional

import typer

from crawler.config import settings
from crawler.traversal import crawl

_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")

app = typer.Typer(
    name="link-crawler",
    help="Discover links reachable from a seed URL.",
    add_completion=False,
)


def _configure_logging(level: str) -> None:
    """Send diagnostics to stderr at *level*."""
    if level.lower() not in _LOG_LEVELS:
        raise typer.BadParameter(
            f"{level!r} is not one of: {' | '.join(_LOG_LEVELS)}",
            param_hint="--log-level",
        )
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - crawler - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@app.command()
def main(
    url: str = typer.Argument(..., help="Seed URL to start crawling from."),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Diagnostic verbosity: debug | info | warning | error."
    ),
) -> None:
    """Crawl URL and print each discovered link as `text (depth) - url`."""
    _configure_logging(log_level or settings.log_level)
    logging.getLogger(__name__).debug("Seed %s, max depth %d", url, settings.max_depth)
    crawl(url, 0, max_depth=settings.max_depth, emit=typer.echo)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
