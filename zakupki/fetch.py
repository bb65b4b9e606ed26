"""Downloading of pages over HTTP."""

import functools

import requests

__all__ = ["FetchError", "get_session", "fetch_html", "USER_AGENT", "TIMEOUT"]

USER_AGENT = "Mozilla/5.0 (compatible; ZakupkiBot/1.0)"
TIMEOUT = 15.0


class FetchError(Exception):
    """Raised when a page cannot be downloaded."""


@functools.lru_cache(maxsize=None)
def get_session():
    """Return the shared HTTP session, creating it on first use."""
    return requests.Session()


def fetch_html(url, session=None):
    """Download ``url`` and return its body as text.

    Raises :class:`FetchError` when the request fails or the server answers
    with anything other than 200 OK.
    """
    if session is None:
        session = get_session()
    try:
        response = session.get(url, headers={"User-Agent": USER_AGENT}, timeout=TIMEOUT)
    except requests.RequestException as exc:
        raise FetchError(f"request failed: {exc}") from exc
    with response:
        if response.status_code != 200:
            raise FetchError(f"unexpected status: {response.status_code} {response.reason}")
        return response.content.decode("utf-8", errors="replace")