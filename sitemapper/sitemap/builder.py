"""Helpers that turn a list of crawled URLs into a :class:`Sitemap`."""

from __future__ import annotations

from typing import Iterable

from sitemapper.sitemap.models import SITEMAP_XMLNS, Sitemap, SitemapURL


def new_sitemap(minify: bool = False) -> Sitemap:
    """Return an empty sitemap tagged with the sitemaps.org namespace."""
    return Sitemap(xmlns=SITEMAP_XMLNS, urls=[], minify=minify)


def add_url(sitemap: Sitemap, loc: str) -> SitemapURL:
    """Append an entry with only ``loc`` set and return it."""
    entry = SitemapURL(loc=loc)
    sitemap.add_url(entry)
    return entry


def build_sitemap(urls: Iterable[str], minify: bool = False) -> Sitemap:
    """Build a sitemap holding one entry per URL, in the given order."""
    sitemap = new_sitemap(minify=minify)
    for loc in urls:
        add_url(sitemap, loc)
    return sitemap
