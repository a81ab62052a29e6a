"""Depth-first, depth-bounded traversal of discovered links.

Each call to :func:`crawl` is one traversal frame: fetch the page, extract
its valid links, emit each one and descend into it before moving on to the
next sibling.  A failed fetch ends only its own frame.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

import httpx

from crawler.config import settings
from crawler.scraper.extractor import extract_links
from crawler.scraper.fetcher import build_client, fetch
from crawler.scraper.tokenizer import tokenize

logger = logging.getLogger(__name__)


def crawl(
    url: str,
    depth: int = 0,
    *,
    max_depth: Optional[int] = None,
    client: Optional[httpx.Client] = None,
    emit: Callable[[str], None] = print,
) -> None:
    """Crawl *url* and everything reachable from it below *max_depth*.

    Args:
        url: Page to fetch for this frame.
        depth: Depth assigned to links found on *url* (0 for the seed).
        max_depth: Exclusive depth bound.  Defaults to ``settings.max_depth``
            and is read once, then passed down unchanged.
        client: Shared HTTP client.  When omitted one is built for the whole
            crawl and closed when the top-level call returns.
        emit: Receives one formatted line per valid link, at discovery time.
    """
    if max_depth is None:
        max_depth = settings.max_depth

    if client is None:
        with build_client() as owned:
            _visit(url, depth, max_depth, owned, emit)
        return

    _visit(url, depth, max_depth, client, emit)


def _visit(
    url: str,
    depth: int,
    max_depth: int,
    client: httpx.Client,
    emit: Callable[[str], None],
) -> None:
    if depth >= max_depth:
        return

    logger.debug("Downloading %s", url)
    result = fetch(url, client)
    if not result.ok:
        logger.error(result.error.describe())
        return

    with result.page as page:
        links = extract_links(tokenize(page.iter_text()), depth, max_depth)

    for link in links:
        emit(str(link))
        if depth + 1 < max_depth:
            _visit(link.url, depth + 1, max_depth, client, emit)
