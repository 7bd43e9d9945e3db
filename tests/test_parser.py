import pytest

from stockshow.parser import (
    FIELD_COUNT,
    FieldIndex,
    StockParser,
    parse_stock,
    split_fields,
)


def make_record(code="sz300599", name="Alpha", last_close="12.000",
                rate="2.83", count=FIELD_COUNT):
    fields = [f"f{position}" for position in range(count)]
    fields[FieldIndex.HEADER] = f'v_{code}="51'
    fields[FieldIndex.NAME] = name
    fields[FieldIndex.CODE] = code[2:]
    fields[FieldIndex.PRICE] = "12.340"
    fields[FieldIndex.LASTCLOSE] = last_close
    fields[FieldIndex.INCREASE_RATE] = rate
    return "~".join(fields)


def test_split_basic():
    assert split_fields("a;b;c", ";") == ["a", "b", "c"]


def test_split_skips_whitespace_after_separator():
    assert split_fields("a; \n b;\nc", ";") == ["a", "b", "c"]


def test_split_keeps_inner_empty_and_leading_space():
    assert split_fields(" a;;b", ";") == [" a", "", "b"]


def test_split_drops_trailing_empty():
    assert split_fields("a;b;", ";") == ["a", "b"]
    assert split_fields("a;b;\n", ";") == ["a", "b"]


def test_split_empty_and_unsplit():
    assert split_fields("", ";") == []
    assert split_fields("abc", ";") == ["abc"]


def test_parse_stock_valid():
    stock = parse_stock(make_record())
    assert stock is not None
    assert stock.code == "sz300599"
    assert stock.increase == pytest.approx(2.83)
    assert stock.last_close == pytest.approx(12.0)
    assert stock.field(FieldIndex.NAME) == "Alpha"
    assert len(stock.fields) == FIELD_COUNT


def test_parse_stock_rejects_short_text():
    assert parse_stock("v_sz30059") is None


def test_parse_stock_rejects_wrong_prefix():
    record = make_record()
    assert parse_stock("x" + record[1:]) is None


def test_parse_stock_rejects_too_few_fields():
    assert parse_stock(make_record(count=FIELD_COUNT - 1)) is None
    assert parse_stock(make_record(count=FIELD_COUNT + 3)) is not None


def test_parse_stock_numeric_prefix_and_garbage():
    stock = parse_stock(make_record(rate="-1.5abc", last_close="n/a"))
    assert stock.increase == pytest.approx(-1.5)
    assert stock.last_close == 0.0


def test_field_out_of_range():
    stock = parse_stock(make_record())
    with pytest.raises(IndexError):
        stock.field(FIELD_COUNT)


def test_parser_empty_response():
    parser = StockParser()
    assert parser.parse("") is False
    assert len(parser) == 0


def test_parser_skips_invalid_records():
    parser = StockParser()
    assert parser.parse("junk;more junk") is True
    assert len(parser) == 0
    assert parser.stock(0) is None


def test_parser_keeps_order_and_finds():
    text = (
        make_record("sh000001", "Index")
        + ";\n"
        + make_record("sz300599", "Alpha")
        + ";\n"
    )
    parser = StockParser()
    assert parser.parse(text) is True
    assert len(parser) == 2
    assert [stock.code for stock in parser] == ["sh000001", "sz300599"]
    assert parser.stock(1).field(FieldIndex.NAME) == "Alpha"
    assert parser.stock(2) is None
    assert parser.stock(-1) is None
    assert parser.find("sz300599") is parser.stock(1)
    assert parser.find("sh600000") is None


def test_parser_replaces_previous_result():
    parser = StockParser()
    parser.parse(make_record("sh000001") + ";" + make_record("sz399001"))
    parser.parse(make_record("sz300599"))
    assert [stock.code for stock in parser] == ["sz300599"]