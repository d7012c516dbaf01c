"""Tests for the scraper layer (page fetch + link extraction).

Mocking strategy:
- ``respx`` patches ``httpx`` at the transport layer so no real network calls
  are made during ``fetch_url`` tests.
- The body-read failure test swaps in an ``httpx.MockTransport`` whose
  response stream breaks half-way, which ``respx`` cannot express directly.
"""

from __future__ import annotations

from unittest.mock import patch

import httpx
import pytest
import respx

from sitemapper.errors import BodyReadError, FetchError, TransportError
from sitemapper.scraper.extractor import extract_links
from sitemapper.scraper.fetcher import fetch_url
from sitemapper.scraper.models import RawPage


# ---------------------------------------------------------------------------
# Fixtures / constants
# ---------------------------------------------------------------------------

_SIMPLE_HTML = """\
<!DOCTYPE html>
<html>
<head><title>Test Page</title></head>
<body>
  <nav>
    <a class="nav" href="/about">About</a>
    <a href="https://example.com/blog">Blog</a>
    <a href="https://other.com/x" rel="nofollow">Elsewhere</a>
    <a href="#top">Top</a>
  </nav>
</body>
</html>
"""


class _BrokenStream(httpx.SyncByteStream):
    """Yields one chunk, then fails like a dropped connection."""

    def __iter__(self):
        yield b"<html><body>"
        raise httpx.ReadError("connection reset by peer")


# ---------------------------------------------------------------------------
# extract_links
# ---------------------------------------------------------------------------

class TestExtractLinks:
    def test_returns_every_href_in_source_order(self) -> None:
        assert extract_links(_SIMPLE_HTML) == [
            "/about",
            "https://example.com/blog",
            "https://other.com/x",
            "#top",
        ]

    def test_n_anchors_give_n_links(self) -> None:
        html = "".join(f'<a href="/p{i}">{i}</a>' for i in range(7))
        assert len(extract_links(html)) == 7

    def test_keeps_duplicates(self) -> None:
        html = '<a href="/a">x</a><a href="/a">y</a>'
        assert extract_links(html) == ["/a", "/a"]

    def test_ignores_unquoted_and_single_quoted_hrefs(self) -> None:
        html = "<a href=/bare>1</a><a href='/single'>2</a><a href=\"/ok\">3</a>"
        assert extract_links(html) == ["/ok"]

    def test_ignores_anchor_without_href(self) -> None:
        assert extract_links('<a name="top">anchor</a>') == []

    def test_non_greedy_value(self) -> None:
        html = '<a href="/one" title="two">x</a>'
        assert extract_links(html) == ["/one"]

    def test_empty_body_returns_empty(self) -> None:
        assert extract_links("") == []

    def test_malformed_body_does_not_raise(self) -> None:
        assert extract_links('<a href="/unterminated <<<>>>') == []


# ---------------------------------------------------------------------------
# fetch_url
# ---------------------------------------------------------------------------

class TestFetchUrl:
    def test_successful_fetch_returns_raw_page(self) -> None:
        with respx.mock:
            respx.get("https://example.com/").mock(
                return_value=httpx.Response(200, text=_SIMPLE_HTML)
            )
            raw = fetch_url("https://example.com/")

        assert isinstance(raw, RawPage)
        assert raw.url == "https://example.com/"
        assert raw.status_code == 200
        assert "<title>Test Page</title>" in raw.html

    def test_sends_user_agent(self) -> None:
        with respx.mock:
            route = respx.get("https://example.com/").mock(
                return_value=httpx.Response(200, text="")
            )
            fetch_url("https://example.com/")

        assert "sitemapper" in route.calls.last.request.headers["User-Agent"]

    def test_http_error_raises_transport_error(self) -> None:
        with respx.mock:
            respx.get("https://example.com/missing").mock(
                return_value=httpx.Response(404, text="Not Found")
            )
            with pytest.raises(TransportError, match="HTTP 404"):
                fetch_url("https://example.com/missing")

    def test_connection_failure_raises_transport_error(self) -> None:
        with respx.mock:
            respx.get("https://example.com/").mock(
                side_effect=httpx.ConnectError("name resolution failed")
            )
            with pytest.raises(TransportError) as info:
                fetch_url("https://example.com/")

        assert info.value.url == "https://example.com/"
        assert isinstance(info.value.__cause__, httpx.ConnectError)

    def test_timeout_raises_transport_error(self) -> None:
        with respx.mock:
            respx.get("https://example.com/slow").mock(
                side_effect=httpx.ReadTimeout("timed out")
            )
            with pytest.raises(TransportError):
                fetch_url("https://example.com/slow")

    def test_broken_body_raises_body_read_error(self) -> None:
        real_client = httpx.Client

        def _client(**kwargs):
            transport = httpx.MockTransport(
                lambda request: httpx.Response(200, stream=_BrokenStream())
            )
            return real_client(transport=transport, **kwargs)

        with patch("sitemapper.scraper.fetcher.httpx.Client", side_effect=_client):
            with pytest.raises(BodyReadError):
                fetch_url("https://example.com/")

    def test_fetch_errors_share_a_base_class(self) -> None:
        assert issubclass(TransportError, FetchError)
        assert issubclass(BodyReadError, FetchError)
