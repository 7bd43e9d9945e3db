"""Character set conversion for quote responses."""

from __future__ import annotations

QUOTE_CHARSET = "GBK"


def convert(data: bytes, from_charset: str, to_charset: str) -> bytes:
    """Re-encode data from one character set into another.

    Raises LookupError for an unknown character set and UnicodeError when
    the data cannot be converted.
    """
    return data.decode(from_charset).encode(to_charset)


def decode_quotes(data: bytes) -> str:
    """Decode a GBK quote response, giving an empty string if it is invalid."""
    try:
        return convert(data, QUOTE_CHARSET, "UTF-8").decode("UTF-8")
    except UnicodeError:
        return ""