"""Failure types raised or returned by the crawler.

Fetch failures are not raised to the traversal caller; they travel inside a
:class:`~crawler.scraper.models.FetchResult` and are logged by the engine.
"""

from __future__ import annotations


class CrawlError(Exception):
    """Base class for every crawler failure."""

    def describe(self) -> str:
        return str(self)


class FetchError(CrawlError):
    """A single fetch attempt failed; the traversal frame is abandoned."""


class TransportFailure(FetchError):
    """Network-level failure: DNS, refused connection, timeout, bad URL."""

    def __init__(self, url: str, description: str) -> None:
        super().__init__(description)
        self.url = url
        self.description = description

    def describe(self) -> str:
        return self.description


class HttpStatusFailure(FetchError):
    """The server answered with a status code above 299."""

    def __init__(self, status_code: int, url: str) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(self.describe())

    def describe(self) -> str:
        return f"Error ({self.status_code}): {self.url}"


class BodyReadError(CrawlError):
    """The connection failed while the page body was being streamed."""
