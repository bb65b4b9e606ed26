# zakupki

Tools for procurement notices published under 44-FZ. The package downloads a
notice's print form, keeps the raw HTML in MongoDB, and parses the page into a
structured tender record: notice number, purchase object, placing
organisation and contacts, procedure dates, the initial maximum contract
price, contract security amount, and the list of positions with each
position's characteristics.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
pytest
```

## Command line

```
zakupki-search-url
```

Prints the heading `Сформированный URL:` followed by an extended-search
results address on the public procurement portal, with a fixed query: 44-FZ
purchases, sorted by update date, page 1 with ten records per page, filtered
to the laptop KTRU code `26.20.11.110-00000001`. Query parameters are written
in sorted key order. The command takes no options besides `--help`.

The URL builder is available as `zakupki.cli.build_url(base_url, params)`: it
keeps any query already in `base_url`, replaces or adds the keys in `params`,
and encodes the result with keys sorted. The fixed query is
`zakupki.cli.SEARCH_PARAMS`.

## Parsing a print form

```python
from zakupki.parser import parse_tender

with open("notice.html", encoding="utf-8") as fh:
    tender = parse_tender(fh.read())

print(tender.notice_number, tender.contract.max_price)
for item in tender.items:
    print(item.name, item.quantity, item.total_price)
    for ch in item.characteristics:
        print("  ", ch.name, "=", ch.value, ch.unit)
```

`parse_tender` returns a `zakupki.models.Tender`. The lower-level pieces are
also public in `zakupki.parser`:

- `parse_parameters(soup)` collects `p.parameter` / `p.parameterValue` pairs
  and `p.caption` rows (valued by the next row's `p.parameter`), plus
  `title` and `subtitle`, into a dict.
- `parse_items_and_characteristics(soup)` reads the positions tables and
  attaches the characteristics tables to positions in document order.
- `parse_money(value)` reads the leading number of a money string (spaces
  and non-breaking spaces removed, comma as decimal separator), returning
  `0.0` when there is none.
- `normalize_whitespace(text)` collapses runs of whitespace to one space.

A position whose name cell has no second line (the identifier after `<br/>`)
raises `ValueError`.

## Fetching and storing notices

```python
from zakupki.fetch import fetch_html
from zakupki.pages import get_44fz
from zakupki.parser import parse_tender
from zakupki.storage import TenderStore, get_mongo_client

store = TenderStore(get_mongo_client("mongodb://localhost:55555"))
page = get_44fz("0000000000000000001", store, fetch_html)
tender = parse_tender(page.html)
store.save_tender(tender)
```

- `zakupki.pages.get_44fz` returns the stored page for a notice, or downloads
  it from the print-form address (`zakupki.pages.notice_url`), saves it and
  returns it. `download_44fz` only downloads and saves.
- `zakupki.storage.TenderStore` upserts pages and tenders by notice number in
  the `Tenders` database: pages in the `html` collection, tenders in the
  `tender` collection. `get_page` and `get_tender` return `None` when nothing
  is stored. Without a client it uses `get_mongo_client()`, which connects to
  `mongodb://localhost:55555`. Each operation runs under a 5-second timeout.
- `zakupki.fetch.fetch_html(url, session=None)` sends a GET with the
  `Mozilla/5.0 (compatible; ZakupkiBot/1.0)` user agent and a 15-second
  timeout through a shared `requests` session (`get_session()`). A transport
  failure or any status other than 200 raises `zakupki.fetch.FetchError`.
- `zakupki.models.to_document` and `from_document` convert the dataclasses
  to and from MongoDB documents; a tender's empty `id` is left out, and a
  stored `_id` is read back into `id`.

## Redis cache

`zakupki.cache.RedisCache` stores string values under string keys without
expiry. `save(key, value)` sets a key; `get(key)` returns its value or raises
`KeyError`. Without a client it uses `get_redis_client()`, which connects to
`localhost:6379`, database 0.

## What it does not do

- The command only prints a search address; nothing in the package downloads
  or reads search result pages, so finding notice numbers is left to you.
- Nothing ties the steps together: there is no command that fetches, parses
  and stores a notice. Use the library functions shown above.
- The parser fills only the fields listed above. The contract currency is
  always `RUB`; the security record gets only its amount. The models
  `AttachmentGroup`, `FinancingInfo`, `FinancingBreakdown`,
  `SpendingCodeEntry` and `WarrantyInfo` exist as records but are not filled
  by the parser.
- `RedisCache` is not used by the rest of the package.