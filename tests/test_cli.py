from urllib.parse import parse_qs, urlsplit

from zakupki.cli import SEARCH_PARAMS, SEARCH_URL, build_url, main


def test_build_url_sorts_keys():
    assert build_url("https://example.com/search", {"b": "2", "a": "1"}) == "https://example.com/search?a=1&b=2"


def test_build_url_overrides_existing_query():
    url = build_url("https://example.com/s?pageNumber=3&keep=yes", {"pageNumber": "1"})
    assert parse_qs(urlsplit(url).query) == {"keep": ["yes"], "pageNumber": ["1"]}


def test_build_url_encodes_spaces_as_plus():
    url = build_url("https://example.com/s", {"gws": "a b"})
    assert url.endswith("?gws=a+b")


def test_build_url_round_trips_special_values():
    url = build_url(SEARCH_URL, SEARCH_PARAMS)
    parts = urlsplit(url)
    assert f"{parts.scheme}://{parts.netloc}{parts.path}" == SEARCH_URL
    decoded = {key: values[0] for key, values in parse_qs(parts.query, keep_blank_values=True).items()}
    assert decoded == SEARCH_PARAMS


def test_build_url_keeps_fragment():
    url = build_url("https://example.com/s#top", {"x": "1"})
    assert url == "https://example.com/s?x=1#top"


def test_main_prints_url(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Сформированный URL:"
    assert lines[1] == build_url(SEARCH_URL, SEARCH_PARAMS)
    assert "fz44=on" in lines[1]