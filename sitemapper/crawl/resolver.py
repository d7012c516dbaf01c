"""URL resolution: decides which raw links belong to the crawled host.

A raw ``href`` is kept when it is either an absolute (or protocol-relative)
URL whose authority is exactly the target host, or a root-relative path,
which is rebuilt as ``https://<host><path>``.  Everything else, including
other hosts, ``mailto:``/``javascript:`` links, fragment-only anchors,
paths without a leading slash and links containing control characters, is
skipped by returning ``None``.
"""

from __future__ import annotations

import re
from typing import List, Optional
from urllib.parse import SplitResult, urlsplit, urlunsplit

from sitemapper.crawl.dedupe import dedupe
from sitemapper.errors import URLParseError
from sitemapper.scraper.extractor import extract_links

_WEB_SCHEMES = ("http", "https")

# Control characters are never valid in a URL and are not all legal in XML.
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def _split(url: str) -> SplitResult:
    """``urlsplit`` that also validates the port and reports :class:`URLParseError`."""
    try:
        parts = urlsplit(url)
        parts.port  # raises ValueError for a non-numeric or out-of-range port
    except ValueError as exc:
        raise URLParseError(f"couldn't parse the url {url!r}: {exc}") from exc
    return parts


def host_of(seed_url: str) -> str:
    """Return the authority (``host[:port]``) of *seed_url*.

    Raises:
        URLParseError: If *seed_url* is not an absolute http(s) URL.
    """
    parts = _split(seed_url.strip())
    if parts.scheme.lower() not in _WEB_SCHEMES or not parts.netloc:
        raise URLParseError(
            f"seed url must be an absolute http(s) url, got {seed_url!r}"
        )
    return parts.netloc.lower()


def seed_aliases(seed_url: str, host: str) -> List[str]:
    """Return the spellings under which the seed page can reappear as a link.

    Besides the seed as given this includes its normalised form (lower-cased
    host, empty path written as "/") and the ``https://<host><path>`` URL a
    root-relative link to the seed resolves to.
    """
    parts = _split(seed_url)
    path = parts.path or "/"
    query = f"?{parts.query}" if parts.query else ""
    return dedupe(
        [
            seed_url,
            urlunsplit((parts.scheme.lower(), host, path, parts.query, parts.fragment)),
            f"https://{host}{path}{query}",
        ]
    )


def belongs_to_host(url: str, host: str) -> bool:
    """Return ``True`` if the authority of *url* is exactly *host*."""
    try:
        netloc = urlsplit(url).netloc
    except ValueError:
        return False
    return netloc.lower() == host.lower()


def resolve_url(raw_link: str, host: str) -> Optional[str]:
    """Resolve *raw_link* against *host*.

    Returns the absolute URL when the link belongs to *host*, or ``None``
    when it should be skipped.  Skipping is not an error.

    Raises:
        URLParseError: If the link (or the URL built from it) is malformed.
    """
    link = raw_link.strip()
    if not link or _CONTROL_CHARS.search(link):
        return None

    parts = _split(link)

    if parts.netloc:
        if parts.scheme and parts.scheme.lower() not in _WEB_SCHEMES:
            return None
        if parts.netloc.lower() != host.lower():
            return None
        # Protocol-relative ``//host/path``
        if not parts.scheme:
            return f"https:{link}"
        return link

    if link.startswith("/"):
        absolute = f"https://{host}{link}"
        _split(absolute)
        return absolute

    return None


def collect_links(html: str, host: str) -> List[str]:
    """Extract, resolve and deduplicate the same-host links of one page.

    Raises:
        URLParseError: If any extracted link is malformed.
    """
    resolved: List[str] = []
    for raw in extract_links(html):
        url = resolve_url(raw, host)
        if url is not None:
            resolved.append(url)
    return dedupe(resolved)
