"""Downloading and caching of the intraday and daily chart images."""

from __future__ import annotations

import time
import urllib.request
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from stockshow.urls import daily_chart_url, minute_chart_url

REALTIME_INTERVAL = 60.0
"""Seconds after which a cached intraday chart is downloaded again."""

Opener = Callable[[str], bytes]


class ChartKind(str, Enum):
    """The two kinds of chart shown in the detail view."""

    REALTIME = "realtime"
    DAY = "day"


@dataclass(frozen=True)
class ChartRequest:
    """A chart image that needs to be downloaded."""

    kind: ChartKind
    code: str
    url: str


class ChartCache:
    """Chart images by stock code.

    Intraday charts expire after the interval; daily charts never do.
    """

    def __init__(
        self,
        interval: float = REALTIME_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._interval = interval
        self._clock = clock
        self._realtime: dict[str, tuple[bytes, float]] = {}
        self._day: dict[str, bytes] = {}

    def pending(self, code: str, stamp: int | None = None) -> list[ChartRequest]:
        """Charts of code that are missing or stale and must be fetched."""
        requests = []
        entry = self._realtime.get(code)
        if entry is None or self._clock() - entry[1] > self._interval:
            requests.append(
                ChartRequest(ChartKind.REALTIME, code, minute_chart_url(code, stamp))
            )
        if code not in self._day:
            requests.append(ChartRequest(ChartKind.DAY, code, daily_chart_url(code, stamp)))
        return requests

    def store(self, kind: ChartKind | str, code: str, data: bytes) -> None:
        """Remember a downloaded image; empty data is ignored."""
        kind = ChartKind(kind)
        if not data:
            return
        if kind is ChartKind.REALTIME:
            self._realtime[code] = (data, self._clock())
        else:
            self._day[code] = data

    def cached(self, kind: ChartKind | str, code: str) -> bytes | None:
        """The last stored image of this kind for code, if any."""
        kind = ChartKind(kind)
        if kind is ChartKind.REALTIME:
            entry = self._realtime.get(code)
            return entry[0] if entry is not None else None
        return self._day.get(code)


def _default_opener(url: str) -> bytes:
    with urllib.request.urlopen(url) as response:
        return response.read()


def fetch_chart(request: ChartRequest, opener: Opener | None = None) -> bytes:
    """Download the image of a chart request; network errors raise OSError."""
    fetch = opener or _default_opener
    return fetch(request.url)