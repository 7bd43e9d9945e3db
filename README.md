# stockshow

A small watcher for quotes from the Shanghai and Shenzhen stock exchanges.
It keeps a watchlist of stock codes, polls the real-time quote service, and
prints each stock's price and percentage change. The two market indices
(`sh000001` and `sz399001`) are always fetched first and shown on the top
line.

## Installing

```
pip install .
```

## Running

```
stockshow
```

Options:

- `--config PATH` – the settings file to use. By default it sits next to the
  program, named after it with `.json` appended.
- `--add CODE` – add a stock to the watchlist (may be given several times).
  Invalid or duplicate codes are reported on standard error and skipped.
- `--interval SECONDS` – seconds between refreshes (default 5).
- `--once` – refresh once, print, and exit.

Each refresh that brings new data prints the two index lines' text (price
and percentage change) followed by one line per watched stock: code, name,
percentage change and price. A suspended stock (price `0.000`) shows `-.--`.
Stop the loop with Ctrl-C.

When the program exits, the settings file is written: the saved window
geometry and the watched codes. If the last refresh returned stocks beyond
the two indices, those stocks' codes are saved (so codes the service did not
recognise are dropped); otherwise the watchlist is saved as it is.

## Stock codes

A code has eight characters: the market prefix followed by six digits, for
example `sh600000` or `sz000001`. Codes of any other length are refused with
`InvalidCodeError`; adding a code already on the list raises
`DuplicateStockError`.

## Using it as a library

- `stockshow.parser` splits the quote service's response (records separated
  by `;`, fields by `~`, each record starting with `v_`) into `Stock`
  records: `StockParser`, `parse_stock`, `split_fields`, `FieldIndex`.
  A `Stock` has `code`, `increase`, `last_close`, `fields` and `field(index)`.
- `stockshow.encoding` turns the service's GBK bytes into text
  (`decode_quotes`, `convert`).
- `stockshow.urls` builds the quote and chart addresses (`realtime_url`,
  `minute_chart_url`, `daily_chart_url`).
- `stockshow.quotes` fetches and parses a batch of quotes (`fetch_quotes`,
  `parse_quotes`, `quote_url`, `INDEX_CODES`). A failed request raises
  `QuoteFetchError`; an empty or undecodable answer gives `None`.
- `stockshow.watchlist` keeps the list of codes (`Watchlist`,
  `validate_code`).
- `stockshow.config` reads and writes the settings file (`Config`,
  `Geometry`, `load_config`, `save_config`, `config_path`). A missing or
  invalid file gives the defaults.
- `stockshow.presentation` formats table rows and the detail view
  (`stock_row`, `detail_view`, `index_text`, `style_sheet`, `trend`,
  `price_cell`, `compare_cell`, `format_money`, `format_volume`). The detail
  view holds the five bid and ask levels, price, open, high, low, change,
  percentage change, limit-up and limit-down prices, turnover and volume.
- `stockshow.charts` caches the minute and daily chart images as bytes
  (`ChartCache`, `ChartRequest`, `ChartKind`, `fetch_chart`); minute charts
  are fetched again after 60 seconds, daily charts only once.
- `stockshow.app` ties these together in `StockShowApp` (`refresh`,
  `add_stock`, `delete_selected`, `show_detail`, `quit`) and provides
  `main`.

```python
from stockshow.quotes import fetch_quotes

parser = fetch_quotes(["sh600000"])
if parser is not None:
    for stock in parser:
        print(stock.code, stock.increase)
```

## What it does not do

There is no graphical window, tray icon or chart display. The command prints
to the terminal only, and the `stockshow` command does not open the detail
view or fetch charts; `StockShowApp.show_detail` builds the detail view and
downloads the chart images into the cache, leaving their display to the
caller.

## Tests

```
pip install .[test]
pytest
```