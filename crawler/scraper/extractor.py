"""Anchor extraction: turns a stream of markup tokens into :class:`Link` records."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from crawler.scraper.models import Link
from crawler.scraper.tokenizer import Token, TokenType, tokenize
from crawler.scraper.validator import is_valid

logger = logging.getLogger(__name__)

_ANCHOR = "a"


def new_link(tag: Token, text: str, depth: int) -> Link:
    """Build a :class:`Link` from an anchor's open tag and its collected text."""
    href = tag.attr("href") or ""
    return Link(url=href.strip(), text=text.strip(), depth=depth)


class LinkExtractor:
    """Single-pass state machine over markup tokens.

    Tracks whether an anchor is open and accumulates the text seen inside
    it.  A second ``<a>`` before ``</a>`` replaces the first one; a
    ``</a>`` with nothing open is logged and skipped.  Only links accepted
    by :func:`is_valid` are kept, in the order their closing tags appear.
    """

    def __init__(self, depth: int, max_depth: int) -> None:
        self.depth = depth
        self.max_depth = max_depth
        self.links: List[Link] = []
        self.anchor_open = False
        self.pending_text = ""
        self._start: Optional[Token] = None

    def feed(self, token: Token) -> bool:
        """Apply one token.  Returns ``False`` once scanning must stop."""
        if token.type is TokenType.ERROR:
            logger.debug("Stopped reading page: %s", token.data)
            return False

        if token.type is TokenType.TEXT:
            if self.anchor_open:
                self.pending_text += token.data
            return True

        if token.data != _ANCHOR:
            return True

        if token.type is TokenType.START_TAG:
            if token.attrs:
                self._start = token
                self.pending_text = ""
                self.anchor_open = True
        elif token.type is TokenType.END_TAG:
            self._close_anchor()
        return True

    def _close_anchor(self) -> None:
        if not self.anchor_open or self._start is None:
            logger.warning("Link end found without start: %s", self.pending_text)
            return

        link = new_link(self._start, self.pending_text, self.depth)
        if is_valid(link, self.max_depth):
            self.links.append(link)
            logger.debug("Link found: %s", link)

        self._start = None
        self.anchor_open = False
        self.pending_text = ""


def extract_links(tokens: Iterable[Token], depth: int, max_depth: int) -> List[Link]:
    """Return the valid links found in *tokens*, in document order."""
    extractor = LinkExtractor(depth, max_depth)
    for token in tokens:
        if not extractor.feed(token):
            break
    return extractor.links


def extract_links_from_html(html: str, depth: int, max_depth: int) -> List[Link]:
    """Convenience wrapper for markup that is already fully in memory."""
    return extract_links(tokenize([html]), depth, max_depth)
