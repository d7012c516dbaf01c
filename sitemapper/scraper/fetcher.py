"""HTTP fetcher: the "fetch URL, return body or error" capability."""

from __future__ import annotations

import httpx

from sitemapper.config import settings
from sitemapper.errors import BodyReadError, TransportError
from sitemapper.scraper.models import RawPage


def _default_headers() -> dict[str, str]:
    return {
        "User-Agent": settings.user_agent,
        "Accept": "text/html,application/xhtml+xml;q=0.9,*/*;q=0.8",
    }


def fetch_url(url: str) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    The request always carries ``settings.request_timeout`` so a hung server
    cannot block a crawl forever.  Errors are split in two: anything that
    goes wrong before the status line arrives (or a 4xx/5xx status) is a
    :class:`TransportError`; anything that goes wrong while draining the body
    is a :class:`BodyReadError`.

    Raises:
        TransportError: Connection, TLS, timeout or HTTP status failure.
        BodyReadError: The body could not be fully read or decoded.
    """
    with httpx.Client(
        headers=_default_headers(),
        timeout=settings.request_timeout,
        follow_redirects=settings.follow_redirects,
    ) as client:
        try:
            with client.stream("GET", url) as response:
                try:
                    response.raise_for_status()
                except httpx.HTTPStatusError as exc:
                    raise TransportError(
                        url, f"HTTP {exc.response.status_code}"
                    ) from exc

                try:
                    response.read()
                    html = response.text
                except (httpx.HTTPError, UnicodeDecodeError, LookupError) as exc:
                    raise BodyReadError(url, f"couldn't read response body: {exc}") from exc

                status_code = response.status_code
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(url, f"request failed: {exc}") from exc

    return RawPage(url=url, html=html, status_code=status_code)
