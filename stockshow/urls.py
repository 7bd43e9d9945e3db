"""Addresses of the quote service and chart images."""

from __future__ import annotations

import time
from typing import Iterable

REALTIME_BASE = "https://qt.gtimg.cn/q="
MINUTE_CHART_BASE = "https://image.sinajs.cn/newchart/min/n/"
DAILY_CHART_BASE = "http://image.sinajs.cn/newchart/daily/n/"


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


def realtime_url(codes: Iterable[str] | str) -> str:
    """URL of the real-time quotes for the given prefixed codes."""
    if isinstance(codes, str):
        codes = [codes]
    return REALTIME_BASE + ",".join(codes)


def minute_chart_url(code: str, stamp: int | None = None) -> str:
    """URL of the intraday chart; stamp (ms) defeats caching, default now."""
    if stamp is None:
        stamp = _now_ms()
    return f"{MINUTE_CHART_BASE}{code}.gif?{stamp}"


def daily_chart_url(code: str, stamp: int | None = None) -> str:
    """URL of the daily candlestick chart; stamp (ms) defaults to now."""
    if stamp is None:
        stamp = _now_ms()
    return f"{DAILY_CHART_BASE}{code}.gif?{stamp}"