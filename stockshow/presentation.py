"""Display values for the stock list, the index labels and the detail view."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from stockshow.parser import FieldIndex, Stock

SUSPENDED_PRICE = "0.000"
PLACEHOLDER_TEXT = "-.--"
HUNDRED_MILLION = 100_000_000
MONEY_UNIT = "亿"
VOLUME_DIVISOR = 1_000_000
VOLUME_UNIT = "万"
LIMIT_UP_FACTOR = 1.1
LIMIT_DOWN_FACTOR = 0.9


class Trend(Enum):
    """Direction of a value against a reference, with its display colour."""

    UP = (255, 0, 0)
    DOWN = (85, 170, 0)
    FLAT = (0, 0, 0)

    @property
    def rgb(self) -> tuple[int, int, int]:
        """Colour used to draw values with this trend."""
        return self.value


@dataclass(frozen=True)
class Cell:
    """Text of one table cell and the trend that colours it, if any."""

    text: str
    trend: Trend | None = None
    align_right: bool = False


@dataclass(frozen=True)
class StockRow:
    """One row of the watched-stocks table."""

    code: str
    name: str
    rate: Cell
    price: Cell


@dataclass(frozen=True)
class DetailView:
    """Everything the detail window shows for one stock."""

    name: str
    sells: tuple[tuple[Cell, Cell], ...]
    buys: tuple[tuple[Cell, Cell], ...]
    price: Cell
    open: Cell
    highest: Cell
    lowest: Cell
    change: Cell
    increase: Cell
    limit_up: Cell
    limit_down: Cell
    money: str
    volume: str


def _to_float(text: str) -> float:
    """Numeric value of the whole text, 0.0 when it is not a number."""
    try:
        return float(text.strip())
    except ValueError:
        return 0.0


def trend(value1: float, value2: float = 0.0) -> Trend:
    """Trend of value1 relative to value2."""
    difference = value1 - value2
    if difference > 0:
        return Trend.UP
    if difference < 0:
        return Trend.DOWN
    return Trend.FLAT


def style_sheet(value: float) -> str:
    """Style sheet colouring a label by the sign of value."""
    if value < 0:
        return "color:green"
    if value > 0:
        return "color:red"
    return "color:black"


def index_text(stock: Stock) -> str:
    """Label text of a market index: its price and percentage change."""
    return f"{stock.field(FieldIndex.PRICE)}  {stock.increase:.2f}%"


def stock_row(stock: Stock) -> StockRow:
    """Table row for a watched stock; suspended stocks show placeholders."""
    price = stock.field(FieldIndex.PRICE)
    if price == SUSPENDED_PRICE:
        rate_cell = Cell(PLACEHOLDER_TEXT, align_right=True)
        price_cell_ = Cell(PLACEHOLDER_TEXT, align_right=True)
    else:
        direction = trend(stock.increase)
        price_cell_ = Cell(price[:-1], direction, align_right=True)
        rate_cell = Cell(f"{stock.increase:.2f}%", direction, align_right=True)
    return StockRow(
        code=stock.field(FieldIndex.CODE),
        name=stock.field(FieldIndex.NAME),
        rate=rate_cell,
        price=price_cell_,
    )


def price_cell(stock: Stock, index: int) -> Cell:
    """Cell with a raw price field, coloured against the last close."""
    text = stock.field(index)
    return Cell(text, trend(_to_float(text), stock.last_close))


def _plain_cell(stock: Stock, index: int) -> Cell:
    return Cell(stock.field(index))


def compare_cell(value1: float, value2: float = 0.0) -> Cell:
    """Cell showing value1 to two decimals, coloured against value2."""
    return Cell(f"{value1:.2f}", trend(value1, value2))


def format_money(text: str) -> str:
    """Turnover in units of a hundred million."""
    return f"{_to_float(text) / HUNDRED_MILLION:.2f}{MONEY_UNIT}"


def format_volume(text: str) -> str:
    """Traded volume scaled down for display."""
    return f"{_to_float(text) / VOLUME_DIVISOR:.2f}{VOLUME_UNIT}"


_SELL_LEVELS = (
    (FieldIndex.SALE5, FieldIndex.SALEVOLUME5),
    (FieldIndex.SALE4, FieldIndex.SALEVOLUME4),
    (FieldIndex.SALE3, FieldIndex.SALEVOLUME3),
    (FieldIndex.SALE2, FieldIndex.SALEVOLUME2),
    (FieldIndex.SALE1, FieldIndex.SALEVOLUME1),
)

_BUY_LEVELS = (
    (FieldIndex.BUY1, FieldIndex.BUYVOLUME1),
    (FieldIndex.BUY2, FieldIndex.BUYVOLUME2),
    (FieldIndex.BUY3, FieldIndex.BUYVOLUME3),
    (FieldIndex.BUY4, FieldIndex.BUYVOLUME4),
    (FieldIndex.BUY5, FieldIndex.BUYVOLUME5),
)


def detail_view(stock: Stock) -> DetailView:
    """Build the detail view: order book, prices, change and limits."""

    def levels(pairs: tuple[tuple[FieldIndex, FieldIndex], ...]) -> tuple[tuple[Cell, Cell], ...]:
        return tuple(
            (price_cell(stock, price), _plain_cell(stock, volume)) for price, volume in pairs
        )

    current = _to_float(stock.field(FieldIndex.PRICE))
    return DetailView(
        name=stock.field(FieldIndex.NAME),
        sells=levels(_SELL_LEVELS),
        buys=levels(_BUY_LEVELS),
        price=price_cell(stock, FieldIndex.PRICE),
        open=price_cell(stock, FieldIndex.OPEN),
        highest=price_cell(stock, FieldIndex.HIGHEST),
        lowest=price_cell(stock, FieldIndex.LOWEST),
        change=compare_cell(current - stock.last_close),
        increase=compare_cell(stock.increase),
        limit_up=compare_cell(stock.last_close * LIMIT_UP_FACTOR, stock.last_close),
        limit_down=compare_cell(stock.last_close * LIMIT_DOWN_FACTOR, stock.last_close),
        money=format_money(stock.field(FieldIndex.MONEY)),
        volume=format_volume(stock.field(FieldIndex.COUNT)),
    )