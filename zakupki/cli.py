"""Command that prints the search address for laptop purchases under 44-FZ."""

import argparse
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

__all__ = ["build_url", "main", "SEARCH_URL", "SEARCH_PARAMS"]

SEARCH_URL = "https://zakupki.gov.ru/epz/order/extendedsearch/results.html"

_HEADING = "Сформированный URL:"

_LAPTOP_KTRU_CODE = "26.20.11.110-00000001"
_LAPTOP_KTRU_NAME = "Ноутбук"
_PURCHASE_TYPE_PROMPT = "Выберите тип закупки"

_SWITCHED_ON = ("morphology", "fz44", "af")
_EMPTY_SELECTIONS = (
    "priceContractAdvantages44IdNameHidden",
    "selectedSubjectsIdNameHidden",
    "koksIdsIdNameHidden",
)

_ORDERING = dict(sortBy="UPDATE_DATE", sortDirection="false")
_PAGING = dict(pageNumber="1", recordsPerPage="_10", ktruSelectedPageNum="1")
_FILTERS = dict(
    currencyIdGeneral="-1",
    showLotsInfoHidden="false",
    ktruCodeNameList=f"{_LAPTOP_KTRU_CODE}&&&{_LAPTOP_KTRU_NAME}",
    gws=_PURCHASE_TYPE_PROMPT,
)

SEARCH_PARAMS = {
    **dict.fromkeys(_SWITCHED_ON, "on"),
    **dict.fromkeys(_EMPTY_SELECTIONS, "{}"),
    **_ORDERING,
    **_PAGING,
    **_FILTERS,
}


def build_url(base_url, params):
    """Return ``base_url`` with ``params`` set in its query, keys sorted."""
    parts = urlsplit(base_url)
    query = {}
    for key, value in parse_qsl(parts.query, keep_blank_values=True):
        query.setdefault(key, []).append(value)
    query.update((key, [value]) for key, value in params.items())
    encoded = urlencode([(key, value) for key in sorted(query) for value in query[key]])
    return urlunsplit(parts._replace(query=encoded))


def main(argv=None):
    """Print the search address built from the fixed laptop query."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.parse_args(argv)
    print(_HEADING, build_url(SEARCH_URL, SEARCH_PARAMS), sep="\n")
    return 0