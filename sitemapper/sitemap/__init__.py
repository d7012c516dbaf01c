"""Sitemap package — builder, XML serialiser and file writer."""

from sitemapper.sitemap.builder import add_url, build_sitemap, new_sitemap
from sitemapper.sitemap.models import SITEMAP_XMLNS, ChangeFreq, Sitemap, SitemapURL
from sitemapper.sitemap.writer import to_xml, write_sitemap

__all__ = [
    "new_sitemap",
    "add_url",
    "build_sitemap",
    "to_xml",
    "write_sitemap",
    "Sitemap",
    "SitemapURL",
    "ChangeFreq",
    "SITEMAP_XMLNS",
]
