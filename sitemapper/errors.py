"""Error kinds raised by the sitemapper library.

Library code raises; the CLI decides whether an error ends the run.
Every class derives from :class:`SitemapError` so callers can catch the
whole family in one place.
"""

from __future__ import annotations


class SitemapError(Exception):
    """Base class for every error raised by sitemapper."""


class ConfigError(SitemapError):
    """Invalid configuration: bad seed URL, out-of-range depth, etc."""


class URLParseError(SitemapError):
    """A seed or discovered URL is not syntactically valid."""


class FetchError(SitemapError):
    """A single page could not be fetched.

    Recoverable during deep traversal; fatal for the seed page.
    """

    def __init__(self, url: str, message: str) -> None:
        super().__init__(f"{url}: {message}")
        self.url = url
        self.message = message


class TransportError(FetchError):
    """The HTTP request failed or returned a 4xx/5xx status."""


class BodyReadError(FetchError):
    """The response body could not be read or decoded."""


class SerializationError(SitemapError):
    """The sitemap could not be converted to XML."""


class FileWriteError(SitemapError):
    """The output file could not be opened or written."""
