"""The stock watcher: quotes, watchlist, detail view and saved state together."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Callable, Sequence

from stockshow.charts import ChartCache, fetch_chart
from stockshow.config import Config, PathLike, config_path, load_config, save_config
from stockshow.parser import Stock, StockParser
from stockshow.presentation import (
    DetailView,
    StockRow,
    detail_view,
    index_text,
    stock_row,
    style_sheet,
)
from stockshow.quotes import QuoteFetchError, fetch_quotes
from stockshow.watchlist import INDEX_STOCK_COUNT, Watchlist

log = logging.getLogger(__name__)

REFRESH_INTERVAL = 5.0
"""Seconds between two quote refreshes."""

_TITLE_MARGIN = 10
_STATUS_MARGIN = 10
_BOTTOM_MARGIN = 8
_DETAIL_GAP = 1

Opener = Callable[[str], bytes]


def detail_position(
    main_x: int, main_y: int, main_width: int, detail_width: int
) -> tuple[int, int]:
    """Place the detail window left of the main one, or right if there is no room."""
    x = main_x - detail_width - _DETAIL_GAP
    if x < 0:
        x = main_x + main_width + _DETAIL_GAP
    return x, main_y


def window_height(title_height: int, status_height: int, rows: int, row_height: int) -> int:
    """Height of the main window that fits the title, status bar and all rows."""
    return (
        title_height
        + _TITLE_MARGIN
        + status_height
        + _STATUS_MARGIN
        + rows * row_height
        + _BOTTOM_MARGIN
    )


class StockShowApp:
    """State of the stock watcher, independent of any display."""

    def __init__(
        self,
        config_file: PathLike,
        opener: Opener | None = None,
        chart_cache: ChartCache | None = None,
    ) -> None:
        self.config_file = Path(config_file)
        config = load_config(self.config_file)
        self.geometry = config.geometry
        self.watchlist = Watchlist(config.codes)
        self.parser = StockParser()
        self.rows: list[StockRow] = []
        self.indices: list[tuple[str, str]] = []
        self.selected_row: int | None = None
        self.current_code: str | None = None
        self.detail: DetailView | None = None
        self.charts = chart_cache if chart_cache is not None else ChartCache()
        self._opener = opener

    def refresh(self) -> bool:
        """Fetch fresh quotes; return whether new data was received."""
        try:
            parser = fetch_quotes(list(self.watchlist), self._opener)
        except QuoteFetchError as exc:
            log.warning("%s", exc)
            return False
        if parser is None:
            return False
        self.parser = parser
        self._update_view()
        if self.detail is not None and self.current_code is not None:
            stock = parser.find(self.current_code)
            if stock is not None:
                self._show(stock)
        return True

    def _update_view(self) -> None:
        stocks = list(self.parser)
        if len(stocks) < INDEX_STOCK_COUNT:
            self.indices = []
            self.rows = []
        else:
            self.indices = [
                (index_text(stock), style_sheet(stock.increase))
                for stock in stocks[:INDEX_STOCK_COUNT]
            ]
            self.rows = [stock_row(stock) for stock in stocks[INDEX_STOCK_COUNT:]]
        if self.selected_row is not None and not 0 <= self.selected_row < len(self.rows):
            self.selected_row = None

    def add_stock(self, code: str) -> None:
        """Watch another stock; raises InvalidCodeError or DuplicateStockError."""
        self.watchlist.add(code)

    def delete_selected(self) -> bool:
        """Stop watching the selected stock and refresh; return whether it was watched."""
        row = self.selected_row
        stock = (
            self.parser.stock(row + INDEX_STOCK_COUNT)
            if row is not None and row >= 0
            else None
        )
        if stock is None:
            raise LookupError("select a stock to delete")
        removed = self.watchlist.remove(stock.code)
        self.selected_row = None
        self.refresh()
        return removed

    def show_detail(self, row: int) -> DetailView:
        """Open the detail view for a table row, fetching its charts."""
        stock = self.parser.stock(row + INDEX_STOCK_COUNT) if row >= 0 else None
        if stock is None:
            raise IndexError(f"no stock in row {row}")
        self.selected_row = row
        self.current_code = stock.code
        self._show(stock)
        assert self.detail is not None
        return self.detail

    def close_detail(self) -> None:
        """Hide the detail view."""
        self.detail = None

    def _show(self, stock: Stock) -> None:
        self.detail = detail_view(stock)
        self._load_charts(stock.code)

    def _load_charts(self, code: str) -> None:
        for request in self.charts.pending(code):
            try:
                data = fetch_chart(request, self._opener)
            except OSError as exc:
                log.warning("failed to fetch chart %s: %s", request.url, exc)
                continue
            self.charts.store(request.kind, request.code, data)

    def quit(self) -> Config:
        """Save the window geometry and the watched codes; return what was saved."""
        config = Config(
            geometry=self.geometry,
            codes=self.watchlist.codes_to_save(self.parser),
        )
        save_config(self.config_file, config)
        return config


def _render(app: StockShowApp) -> str:
    lines = ["    ".join(text for text, _ in app.indices)]
    for row in app.rows:
        lines.append(f"{row.code:<8} {row.name}  {row.rate.text:>8} {row.price.text:>10}")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Show the watched stocks, refreshing them until interrupted."""
    arg_parser = argparse.ArgumentParser(
        prog="stockshow", description="Watch real-time stock quotes."
    )
    arg_parser.add_argument("--config", type=Path, default=None, help="configuration file")
    arg_parser.add_argument(
        "--add", action="append", default=[], metavar="CODE", help="watch a stock, e.g. sh600000"
    )
    arg_parser.add_argument(
        "--interval", type=float, default=REFRESH_INTERVAL, help="seconds between refreshes"
    )
    arg_parser.add_argument("--once", action="store_true", help="refresh once and exit")
    args = arg_parser.parse_args(argv)

    path = args.config if args.config is not None else config_path(sys.argv[0])
    app = StockShowApp(path)
    for code in args.add:
        try:
            app.add_stock(code)
        except ValueError as exc:
            print(exc, file=sys.stderr)

    try:
        while True:
            if app.refresh():
                print(_render(app), flush=True)
            if args.once:
                break
            time.sleep(args.interval)
    except KeyboardInterrupt:
        pass
    finally:
        app.quit()
    return 0