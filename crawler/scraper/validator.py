"""Link filtering rules."""

from __future__ import annotations

from crawler.scraper.models import Link


def is_valid(link: Link, max_depth: int) -> bool:
    """Return ``True`` if *link* is worth emitting and following.

    A link is rejected when it was found at or beyond *max_depth*, when its
    anchor text is blank, or when its URL is blank or mentions
    ``javascript`` in any letter case.
    """
    if link.depth >= max_depth:
        return False

    if not link.text.strip():
        return False

    url = link.url.strip()
    if not url or "javascript" in url.lower():
        return False
    return True
