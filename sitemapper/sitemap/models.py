"""Data models for the sitemaps.org ``urlset`` document."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import List, Optional, Union

SITEMAP_XMLNS = "http://www.sitemaps.org/schemas/sitemap/0.9"


class ChangeFreq(str, Enum):
    """Allowed values of the ``<changefreq>`` element."""

    ALWAYS = "always"
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    NEVER = "never"


@dataclass(frozen=True)
class SitemapURL:
    """One ``<url>`` entry.  Only ``loc`` is mandatory."""

    loc: str
    lastmod: Optional[Union[datetime, date]] = None
    changefreq: Optional[ChangeFreq] = None
    priority: Optional[float] = None


@dataclass
class Sitemap:
    """A complete sitemap, ready to be serialised.

    Create instances with :func:`~sitemapper.sitemap.builder.new_sitemap` so
    the namespace is always set.  ``minify`` drops the indentation from the
    serialised output.
    """

    xmlns: str = SITEMAP_XMLNS
    urls: List[SitemapURL] = field(default_factory=list)
    minify: bool = False

    def add_url(self, url: SitemapURL) -> None:
        """Append *url*; entries are never modified once added."""
        self.urls.append(url)

    def __len__(self) -> int:
        return len(self.urls)
