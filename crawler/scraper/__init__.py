"""Scraper package: fetch, tokenize, extract and validate links."""

from crawler.scraper.extractor import extract_links, extract_links_from_html
from crawler.scraper.fetcher import build_client, fetch
from crawler.scraper.models import FetchResult, Link, Page
from crawler.scraper.tokenizer import Token, TokenType, tokenize
from crawler.scraper.validator import is_valid

__all__ = [
    "fetch",
    "build_client",
    "tokenize",
    "extract_links",
    "extract_links_from_html",
    "is_valid",
    "Link",
    "Page",
    "FetchResult",
    "Token",
    "TokenType",
]
