"""Fetching and decoding real-time quotes."""

from __future__ import annotations

import logging
import urllib.request
from typing import Callable, Iterable

from stockshow.encoding import decode_quotes
from stockshow.parser import StockParser
from stockshow.urls import realtime_url

log = logging.getLogger(__name__)

Opener = Callable[[str], bytes]

_INDEX_CODES = ("sh000001", "sz399001")


class QuoteFetchError(OSError):
    """The quote service could not be reached or answered with an error."""


def INDEX_CODES() -> tuple[str, ...]:  # noqa: N802
    """Codes of the two market indices always fetched first."""
    return _INDEX_CODES


def quote_url(codes: Iterable[str]) -> str:
    """URL for the market indices followed by the given codes."""
    return realtime_url([*INDEX_CODES(), *codes])


def parse_quotes(data: bytes) -> StockParser | None:
    """Decode and parse a GBK quote response; None if it holds nothing."""
    text = decode_quotes(data)
    if not text:
        return None
    parser = StockParser()
    if not parser.parse(text):
        return None
    return parser


def _default_opener(url: str) -> bytes:
    with urllib.request.urlopen(url) as response:
        return response.read()


def fetch_quotes(codes: Iterable[str], opener: Opener | None = None) -> StockParser | None:
    """Download and parse quotes for the indices and the given codes.

    opener takes a URL and returns the response body; it defaults to a
    plain HTTP GET. Raises QuoteFetchError when the request fails.
    """
    url = quote_url(codes)
    log.debug("fetching quotes: %s", url)
    fetch = opener or _default_opener
    try:
        data = fetch(url)
    except OSError as exc:
        raise QuoteFetchError(f"failed to fetch quotes from {url}: {exc}") from exc
    return parse_quotes(data)