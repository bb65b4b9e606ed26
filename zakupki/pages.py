"""Retrieval of 44-FZ notice print forms, cached in the store."""

from .fetch import fetch_html
from .models import SavedPage
from .storage import TenderStore

__all__ = ["notice_url", "download_44fz", "get_44fz"]

PRINT_FORM_URL = "https://zakupki.gov.ru/epz/order/notice/printForm/view.html?regNumber="


def notice_url(notice_number):
    """Return the print form address of a notice."""
    return PRINT_FORM_URL + notice_number


def download_44fz(notice_number, store=None, fetch=None):
    """Download the print form of a notice and save it in the store."""
    store = TenderStore() if store is None else store
    fetch = fetch_html if fetch is None else fetch
    url = notice_url(notice_number)
    body = fetch(url)
    store.save_page(SavedPage(notice_number=notice_number, url=url, html=body))


def get_44fz(notice_number, store=None, fetch=None):
    """Return the saved page of a notice, downloading it when not yet stored."""
    store = TenderStore() if store is None else store
    page = store.get_page(notice_number)
    if page is not None:
        return page
    download_44fz(notice_number, store, fetch)
    page = store.get_page(notice_number)
    if page is None:
        raise LookupError(f"page {notice_number} not found after download")
    return page