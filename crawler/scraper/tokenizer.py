"""Incremental HTML tokenizer.

Wraps the standard library's :class:`html.parser.HTMLParser`, which accepts
markup in arbitrary chunks, and turns its callbacks into a pull-based stream
of :class:`Token` objects.  Tokens are yielded as soon as the chunk that
completes them has been fed, so a page never has to be held in memory whole.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from html.parser import HTMLParser
from typing import Iterable, Iterator, Optional

from crawler.errors import BodyReadError

_PARSE_ERRORS = (AssertionError, ValueError)


class TokenType(enum.Enum):
    START_TAG = "start_tag"
    END_TAG = "end_tag"
    TEXT = "text"
    ERROR = "error"


@dataclass(frozen=True)
class Token:
    type: TokenType
    data: str
    attrs: tuple[tuple[str, str], ...] = ()

    def attr(self, name: str) -> Optional[str]:
        """Return the first value of attribute *name*, or ``None``."""
        for key, value in self.attrs:
            if key == name:
                return value
        return None


class _TokenCollector(HTMLParser):
    """Buffers parser callbacks as tokens until the caller drains them."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.pending: list[Token] = []

    # <a href="/x"/> reaches here through HTMLParser.handle_startendtag, so it
    # becomes a start plus an end token; the empty anchor is later rejected.
    def handle_starttag(self, tag, attrs):
        normalised = tuple((key, value or "") for key, value in attrs)
        self.pending.append(Token(TokenType.START_TAG, tag, normalised))

    def handle_endtag(self, tag):
        self.pending.append(Token(TokenType.END_TAG, tag))

    def handle_data(self, data):
        self.pending.append(Token(TokenType.TEXT, data))

    def drain(self) -> list[Token]:
        tokens, self.pending = self.pending, []
        return tokens


def tokenize(chunks: Iterable[str]) -> Iterator[Token]:
    """Yield markup tokens from *chunks* of HTML text.

    Tag names come back lower-cased.  A self-closing tag yields a start token
    followed by an end token.  If the chunk source raises
    :class:`BodyReadError`, or the parser gives up on the markup, the stream
    ends with a single ``ERROR`` token after whatever was parsed before it.
    """
    parser = _TokenCollector()
    try:
        for chunk in chunks:
            parser.feed(chunk)
            yield from parser.drain()
        parser.close()
    except BodyReadError as exc:
        yield from parser.drain()
        yield Token(TokenType.ERROR, exc.describe())
        return
    except _PARSE_ERRORS as exc:
        # _markupbase raises AssertionError on bad declarations like <![foo[
        yield from parser.drain()
        yield Token(TokenType.ERROR, f"unparseable markup: {exc}")
        return

    yield from parser.drain()
