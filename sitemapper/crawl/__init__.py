"""Crawl package — URL resolution, deduplication and depth-bounded traversal.

Public API::

    from sitemapper.crawl import run_crawl
    result = run_crawl("https://example.com/", depth=2)
"""

from sitemapper.crawl.dedupe import dedupe
from sitemapper.crawl.models import CrawlResult, SkippedPage, TraversalResult
from sitemapper.crawl.resolver import (
    collect_links,
    host_of,
    resolve_url,
    seed_aliases,
)
from sitemapper.crawl.runner import run_crawl
from sitemapper.crawl.traversal import traverse

__all__ = [
    "run_crawl",
    "traverse",
    "resolve_url",
    "collect_links",
    "host_of",
    "seed_aliases",
    "dedupe",
    "CrawlResult",
    "TraversalResult",
    "SkippedPage",
]
