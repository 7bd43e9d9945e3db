"""The list of stock codes the user watches."""

from __future__ import annotations

from typing import Iterable, Iterator

from stockshow.parser import StockParser

CODE_LENGTH = 8
INDEX_STOCK_COUNT = 2


class InvalidCodeError(ValueError):
    """A stock code does not have the exchange-prefixed form."""


class DuplicateStockError(ValueError):
    """The stock is already on the watchlist."""


def validate_code(code: str) -> str:
    """Return code if it has the form of sh000001 or sz399001."""
    if len(code) != CODE_LENGTH:
        raise InvalidCodeError(
            f"invalid stock code {code!r}, expected e.g. sh000001 or sz399001"
        )
    return code


class Watchlist:
    """Ordered, duplicate-free collection of watched stock codes."""

    def __init__(self, codes: Iterable[str] = ()) -> None:
        self._codes: list[str] = list(codes)

    def add(self, code: str) -> None:
        """Append a code; raises InvalidCodeError or DuplicateStockError."""
        validate_code(code)
        if code in self._codes:
            raise DuplicateStockError(f"stock {code!r} is already on the watchlist")
        self._codes.append(code)

    def remove(self, code: str) -> bool:
        """Remove a code; return whether it was present."""
        try:
            self._codes.remove(code)
        except ValueError:
            return False
        return True

    def __contains__(self, code: object) -> bool:
        return code in self._codes

    def __iter__(self) -> Iterator[str]:
        return iter(self._codes)

    def __len__(self) -> int:
        return len(self._codes)

    def codes_to_save(self, parser: StockParser) -> list[str]:
        """Codes worth saving.

        When the parser holds stocks beyond the two market indices, those
        codes are used, since they are known to be valid; otherwise (for
        example without a network connection) the watchlist's own codes.
        """
        if len(parser) > INDEX_STOCK_COUNT:
            return [stock.code for stock in list(parser)[INDEX_STOCK_COUNT:]]
        return list(self._codes)