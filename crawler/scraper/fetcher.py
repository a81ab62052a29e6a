"""HTTP fetcher: one GET per URL, outcome classified as a :class:`FetchResult`."""

from __future__ import annotations

from typing import Optional

import httpx

from crawler.config import settings
from crawler.errors import HttpStatusFailure, TransportFailure
from crawler.scraper.models import FetchResult, Page

# Statuses above this are failures; redirects are followed by the client.
_MAX_OK_STATUS = 299


def build_client(timeout: Optional[float] = None) -> httpx.Client:
    """Return an :class:`httpx.Client` configured for crawling.

    Args:
        timeout: Per-request timeout in seconds.  Defaults to
            ``settings.request_timeout``.
    """
    return httpx.Client(
        headers={"User-Agent": settings.user_agent},
        timeout=settings.request_timeout if timeout is None else timeout,
        follow_redirects=True,
    )


def fetch(url: str, client: Optional[httpx.Client] = None) -> FetchResult:
    """GET *url* once and classify the outcome.

    The URL is not validated up front; malformed or scheme-less URLs come
    back as a :class:`TransportFailure`.  On success the body is left
    unread so it can be tokenized as it streams in.

    Args:
        url: Absolute URL to fetch.
        client: Shared client.  When omitted a private one is built and
            closed together with the returned page.

    Returns:
        ``FetchResult.success(page)`` for status <= 299, otherwise
        ``FetchResult.failure(...)`` carrying a :class:`TransportFailure` or
        :class:`HttpStatusFailure`.
    """
    owned = client is None
    if owned:
        client = build_client()

    try:
        request = client.build_request("GET", url)
        response = client.send(request, stream=True)
    except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as exc:
        # UnicodeError: hosts that fail IDNA encoding, e.g. http://xn--a.com/
        if owned:
            client.close()
        return FetchResult.failure(TransportFailure(url, str(exc) or type(exc).__name__))

    if response.status_code > _MAX_OK_STATUS:
        response.close()
        if owned:
            client.close()
        return FetchResult.failure(HttpStatusFailure(response.status_code, url))

    page = Page(
        url=url,
        status_code=response.status_code,
        response=response,
        owned_client=client if owned else None,
    )
    return FetchResult.success(page)
