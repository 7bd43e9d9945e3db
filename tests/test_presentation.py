import pytest

from stockshow.parser import FIELD_COUNT, FieldIndex, parse_stock
from stockshow.presentation import (
    MONEY_UNIT,
    PLACEHOLDER_TEXT,
    VOLUME_UNIT,
    Cell,
    Trend,
    compare_cell,
    detail_view,
    format_money,
    format_volume,
    index_text,
    price_cell,
    stock_row,
    style_sheet,
    trend,
)


def make_stock(code="sh600000", price="10.550", last_close="10.400", rate="1.44", **fields):
    values = [str(i) for i in range(FIELD_COUNT)]
    values[FieldIndex.HEADER] = f'v_{code}="1'
    values[FieldIndex.NAME] = "Sample"
    values[FieldIndex.CODE] = code[2:]
    values[FieldIndex.PRICE] = price
    values[FieldIndex.LASTCLOSE] = last_close
    values[FieldIndex.INCREASE_RATE] = rate
    for name, value in fields.items():
        values[FieldIndex[name]] = value
    stock = parse_stock("~".join(values))
    assert stock is not None
    return stock


@pytest.mark.parametrize(
    "a, b, expected",
    [(2.0, 1.0, Trend.UP), (1.0, 2.0, Trend.DOWN), (1.0, 1.0, Trend.FLAT)],
)
def test_trend_against_reference(a, b, expected):
    assert trend(a, b) is expected


def test_trend_defaults_to_zero_reference():
    assert trend(-0.5) is Trend.DOWN
    assert trend(0.0) is Trend.FLAT


def test_trend_colours():
    assert trend(1.0, 2.0).rgb == (85, 170, 0)
    assert trend(1.0, 1.0).rgb == (0, 0, 0)
    assert compare_cell(-1.0).trend.rgb == (85, 170, 0)


@pytest.mark.parametrize(
    "value, expected",
    [(-1.0, "color:green"), (1.0, "color:red"), (0.0, "color:black")],
)
def test_style_sheet(value, expected):
    assert style_sheet(value) == expected


def test_index_text_shows_price_and_rate():
    stock = make_stock(code="sh000001", price="3250.12", rate="1.5")
    price_text, rate_text = index_text(stock).split("  ")
    assert price_text == "3250.12"
    assert rate_text == "1.50%"


def test_stock_row_for_suspended_stock():
    row = stock_row(make_stock(price="0.000"))
    assert row.price == Cell(PLACEHOLDER_TEXT, None, True)
    assert row.rate == Cell(PLACEHOLDER_TEXT, None, True)


def test_stock_row_for_rising_stock():
    price = "10.550"
    row = stock_row(make_stock(price=price, rate="1.44"))
    assert row.code == "600000"
    assert row.name == "Sample"
    assert row.price.text == price[:-1]
    assert row.price.trend is Trend.UP
    assert row.rate.trend is Trend.UP
    assert row.rate.text.endswith("%")
    assert row.price.align_right and row.rate.align_right


def test_stock_row_for_falling_stock():
    row = stock_row(make_stock(rate="-2.00"))
    assert row.price.trend is Trend.DOWN
    assert row.rate.text.startswith("-")


@pytest.mark.parametrize(
    "field_value, expected",
    [("11.000", Trend.UP), ("9.000", Trend.DOWN), ("10.400", Trend.FLAT)],
)
def test_price_cell_compares_with_last_close(field_value, expected):
    stock = make_stock(last_close="10.400", OPEN=field_value)
    cell = price_cell(stock, FieldIndex.OPEN)
    assert cell.text == field_value
    assert cell.trend is expected


def test_compare_cell_formats_first_value():
    cell = compare_cell(1.5, 1.0)
    assert cell.text == "1.50"
    assert cell.trend is Trend.UP
    assert compare_cell(-3.0).trend is Trend.DOWN


def test_format_money_round_trip():
    text = format_money("250000000")
    assert text.endswith(MONEY_UNIT)
    assert float(text[: -len(MONEY_UNIT)]) * 100_000_000 == pytest.approx(250_000_000)


def test_format_money_of_non_number_is_zero():
    assert float(format_money("abc")[: -len(MONEY_UNIT)]) == 0.0


def test_format_volume_round_trip():
    text = format_volume("3500000")
    assert text.endswith(VOLUME_UNIT)
    assert float(text[: -len(VOLUME_UNIT)]) * 1_000_000 == pytest.approx(3_500_000)


def test_detail_view_order_book_order():
    stock = make_stock(SALE5="10.600", SALE1="10.560", BUY1="10.550", BUY5="10.500")
    view = detail_view(stock)
    assert view.name == "Sample"
    assert len(view.sells) == 5 and len(view.buys) == 5
    assert view.sells[0][0].text == "10.600"
    assert view.sells[-1][0].text == "10.560"
    assert view.buys[0][0].text == "10.550"
    assert view.buys[-1][0].text == "10.500"
    assert view.sells[0][1].text == stock.field(FieldIndex.SALEVOLUME5)
    assert view.sells[0][1].trend is None


def test_detail_view_change_and_limits():
    stock = make_stock(price="11.000", last_close="10.000", rate="10.00")
    view = detail_view(stock)
    assert float(view.change.text) == pytest.approx(1.0)
    assert view.change.trend is Trend.UP
    assert view.increase == compare_cell(stock.increase)
    assert float(view.limit_up.text) == pytest.approx(stock.last_close * 1.1, abs=0.01)
    assert view.limit_up.trend is Trend.UP
    assert float(view.limit_down.text) == pytest.approx(stock.last_close * 0.9, abs=0.01)
    assert view.limit_down.trend is Trend.DOWN
    assert view.price.trend is Trend.UP


def test_detail_view_money_and_volume():
    stock = make_stock(MONEY="100000000", COUNT="2000000")
    view = detail_view(stock)
    assert view.money == format_money("100000000")
    assert view.volume == format_volume("2000000")