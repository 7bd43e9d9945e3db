"""Parsing of real-time quote responses into stock records."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator


class FieldIndex(IntEnum):
    """Positions of the fields in one '~'-separated quote record."""

    HEADER = 0
    NAME = 1
    CODE = 2
    PRICE = 3
    LASTCLOSE = 4
    OPEN = 5
    TOTALCOUNT = 6
    BUY = 7
    SALE = 8
    BUY1 = 9
    BUYVOLUME1 = 10
    BUY2 = 11
    BUYVOLUME2 = 12
    BUY3 = 13
    BUYVOLUME3 = 14
    BUY4 = 15
    BUYVOLUME4 = 16
    BUY5 = 17
    BUYVOLUME5 = 18
    SALE1 = 19
    SALEVOLUME1 = 20
    SALE2 = 21
    SALEVOLUME2 = 22
    SALE3 = 23
    SALEVOLUME3 = 24
    SALE4 = 25
    SALEVOLUME4 = 26
    SALE5 = 27
    SALEVOLUME5 = 28
    LASTDEAL = 29
    TIME = 30
    INCREASE = 31
    INCREASE_RATE = 32
    HIGHEST = 33
    LOWEST = 34
    PRICE_COUNT_MONEY = 35
    COUNT = 36
    MONEY = 37


FIELD_COUNT = 38
"""Minimum number of fields a quote record must carry."""

_MIN_RECORD_LENGTH = 11
_RECORD_PREFIX = "v_"
_SKIPPED_AFTER_SEPARATOR = " \n"

_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _leading_float(text: str) -> float:
    """Read the numeric prefix of text, giving 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return 0.0
    return float(match.group(1))


def _up_to_nul(text: str) -> str:
    return text.split("\0", 1)[0]


@dataclass(frozen=True)
class Stock:
    """One parsed quote: the exchange-prefixed code and its raw fields."""

    code: str
    increase: float
    last_close: float
    fields: tuple[str, ...]

    def field(self, index: int) -> str:
        """Return the raw text of the field at index."""
        return self.fields[index]


def split_fields(text: str, separator: str) -> list[str]:
    """Split text on separator.

    Spaces and newlines directly after a separator are dropped, empty
    pieces between two separators are kept, and a trailing empty piece
    is not returned.
    """
    parts: list[str] = []
    start = 0
    scan = 0
    while True:
        pos = text.find(separator, scan)
        if pos < 0:
            break
        parts.append(_up_to_nul(text[start:pos]))
        scan = pos + 1
        rest = text[scan:]
        start = scan + len(rest) - len(rest.lstrip(_SKIPPED_AFTER_SEPARATOR))
    remainder = text[start:]
    if remainder and not remainder.startswith("\0"):
        parts.append(_up_to_nul(remainder))
    return parts


def parse_stock(text: str) -> Stock | None:
    """Parse one quote record, or return None if it is not a valid one."""
    if len(text) < _MIN_RECORD_LENGTH:
        return None
    if not text.startswith(_RECORD_PREFIX):
        return None
    fields = split_fields(text, "~")
    if len(fields) < FIELD_COUNT:
        return None
    return Stock(
        code=fields[FieldIndex.HEADER][2:10],
        increase=_leading_float(fields[FieldIndex.INCREASE_RATE]),
        last_close=_leading_float(fields[FieldIndex.LASTCLOSE]),
        fields=tuple(fields),
    )


class StockParser:
    """Holds the stocks from the most recently parsed quote response."""

    def __init__(self) -> None:
        self._stocks: list[Stock] = []

    def parse(self, text: str) -> bool:
        """Parse a full response; return False if it held no records at all.

        Records that are not valid quotes are skipped.
        """
        records = split_fields(text, ";")
        self._stocks = [
            stock for stock in map(parse_stock, records) if stock is not None
        ]
        return bool(records)

    def __len__(self) -> int:
        return len(self._stocks)

    def __iter__(self) -> Iterator[Stock]:
        return iter(self._stocks)

    def stock(self, index: int) -> Stock | None:
        """Return the stock at index, or None when out of range."""
        if 0 <= index < len(self._stocks):
            return self._stocks[index]
        return None

    def find(self, code: str) -> Stock | None:
        """Return the first stock with the given prefixed code, if any."""
        return next((stock for stock in self._stocks if stock.code == code), None)