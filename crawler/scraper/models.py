"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

import httpx

from crawler.errors import BodyReadError, FetchError


@dataclass(frozen=True)
class Link:
    """One anchor discovered on a page at a given traversal depth."""

    url: str
    text: str
    depth: int

    def __str__(self) -> str:
        spacer = "\t" * self.depth
        return f"{spacer}{self.text} ({self.depth}) - {self.url}"


@dataclass
class Page:
    """A successful fetch whose body has not been read yet.

    The underlying response is opened in streaming mode; callers consume it
    with :meth:`iter_text` and must :meth:`close` it (or use the page as a
    context manager).
    """

    url: str
    status_code: int
    response: httpx.Response = field(repr=False)
    owned_client: Optional[httpx.Client] = field(default=None, repr=False)

    def iter_text(self) -> Iterator[str]:
        """Yield decoded body chunks as they arrive from the network.

        Raises:
            BodyReadError: If the connection fails mid-body.
        """
        try:
            yield from self.response.iter_text()
        except httpx.HTTPError as exc:
            raise BodyReadError(f"{exc} ({self.url})") from exc

    def close(self) -> None:
        self.response.close()
        if self.owned_client is not None:
            self.owned_client.close()

    def __enter__(self) -> Page:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


@dataclass
class FetchResult:
    """Outcome of one fetch: exactly one of ``page`` or ``error`` is set."""

    page: Optional[Page] = None
    error: Optional[FetchError] = None

    def __post_init__(self) -> None:
        if (self.page is None) == (self.error is None):
            raise ValueError("FetchResult needs exactly one of page or error")

    @classmethod
    def success(cls, page: Page) -> FetchResult:
        return cls(page=page)

    @classmethod
    def failure(cls, error: FetchError) -> FetchResult:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.page is not None
