"""Centralised settings for the link crawler.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------
    max_depth: int = field(
        default_factory=lambda: int(os.environ.get("CRAWLER_MAX_DEPTH", "2"))
    )

    # ------------------------------------------------------------------
    # Fetcher
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("CRAWLER_REQUEST_TIMEOUT", "30.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "CRAWLER_USER_AGENT", "Mozilla/5.0 (compatible; LinkCrawler/1.0)"
        )
    )

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("CRAWLER_LOG_LEVEL", "info")
    )


# Module-level singleton, import this everywhere:
#   from crawler.config import settings
settings = Settings()
