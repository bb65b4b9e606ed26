import pytest

from zakupki.fetch import FetchError
from zakupki.models import SavedPage
from zakupki.pages import download_44fz, get_44fz, notice_url


class FakeStore:
    def __init__(self, persist=True):
        self.pages = {}
        self.persist = persist

    def save_page(self, page):
        if self.persist:
            self.pages[page.notice_number] = page

    def get_page(self, notice_number):
        return self.pages.get(notice_number)


class RecordingFetch:
    def __init__(self, body="<html></html>"):
        self.urls = []
        self.body = body

    def __call__(self, url):
        self.urls.append(url)
        return self.body


def test_notice_url():
    assert notice_url("0309600004925000003") == (
        "https://zakupki.gov.ru/epz/order/notice/printForm/view.html?regNumber=0309600004925000003"
    )


def test_download_saves_page():
    store = FakeStore()
    fetch = RecordingFetch("<p>form</p>")
    download_44fz("123", store, fetch)
    assert store.pages["123"] == SavedPage(notice_number="123", url=notice_url("123"), html="<p>form</p>")
    assert fetch.urls == [notice_url("123")]


def test_get_uses_stored_page_without_fetching():
    store = FakeStore()
    page = SavedPage(notice_number="5", url="u", html="cached")
    store.pages["5"] = page
    fetch = RecordingFetch()
    assert get_44fz("5", store, fetch) == page
    assert fetch.urls == []


def test_get_downloads_missing_page():
    store = FakeStore()
    fetch = RecordingFetch("fresh")
    page = get_44fz("9", store, fetch)
    assert page.html == "fresh"
    assert page.url == notice_url("9")
    assert len(fetch.urls) == 1


def test_fetch_error_propagates():
    def failing(url):
        raise FetchError("unexpected status: 500")

    store = FakeStore()
    with pytest.raises(FetchError):
        get_44fz("1", store, failing)
    assert store.pages == {}


def test_page_lost_after_download_raises():
    with pytest.raises(LookupError):
        get_44fz("1", FakeStore(persist=False), RecordingFetch())