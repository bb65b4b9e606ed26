import pytest
import requests
import responses

from zakupki.fetch import FetchError, fetch_html, get_session

URL = "https://zakupki.example.com/epz/page.html"


def test_fetch_returns_body():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body="<html>ok</html>", status=200)
        assert fetch_html(URL) == "<html>ok</html>"


def test_fetch_decodes_utf8_body():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body="Извещение".encode("utf-8"), status=200)
        assert fetch_html(URL) == "Извещение"


def test_fetch_sends_user_agent():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body="x", status=200)
        fetch_html(URL)
        assert rsps.calls[0].request.headers["User-Agent"] == "Mozilla/5.0 (compatible; ZakupkiBot/1.0)"


def test_fetch_with_explicit_session():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body="body", status=200)
        with requests.Session() as session:
            assert fetch_html(URL, session) == "body"


def test_fetch_with_shared_session():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body="shared", status=200)
        assert fetch_html(URL, get_session()) == "shared"


def test_fetch_rejects_non_ok_status():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body="missing", status=404)
        with pytest.raises(FetchError, match="404"):
            fetch_html(URL)


def test_fetch_wraps_connection_errors():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body=requests.ConnectionError("down"))
        with pytest.raises(FetchError):
            fetch_html(URL)


def test_fetch_rejects_malformed_url():
    with pytest.raises(FetchError):
        fetch_html("not a url")