"""High-level runner for a single crawl.

``run_crawl`` is the single public function in this module.  It parses the
seed URL, fetches the seed page, builds level 0 from its links and hands
over to :func:`~sitemapper.crawl.traversal.traverse`.  Progress is printed
to stdout by the traversal itself so the CLI can show it live.
"""

from __future__ import annotations

from typing import Optional

from sitemapper.config import settings
from sitemapper.crawl.models import CrawlResult
from sitemapper.crawl.resolver import collect_links, host_of, seed_aliases
from sitemapper.crawl.traversal import Fetcher, traverse
from sitemapper.errors import ConfigError
from sitemapper.scraper.fetcher import fetch_url


def run_crawl(
    seed_url: str,
    depth: Optional[int] = None,
    parallel: Optional[int] = None,
    *,
    fail_fast: bool = False,
    fetch: Optional[Fetcher] = None,
) -> CrawlResult:
    """Crawl the site behind *seed_url* and return every same-host URL found.

    Failures on the seed page are always fatal; failures on deeper pages are
    skipped and listed in ``CrawlResult.skipped`` unless *fail_fast* is set.

    Args:
        seed_url: Absolute http(s) URL the crawl starts from.
        depth: Maximum traversal depth, defaults to ``settings.depth``.
        parallel: Fetch workers per level, defaults to ``settings.parallel``.
        fail_fast: Abort on the first page failure during traversal.
        fetch: Page fetcher override, mainly for tests.

    Raises:
        ConfigError: If *depth* or *parallel* is out of range.
        URLParseError: If the seed URL, or a link on the seed page, is malformed.
        FetchError: If the seed page cannot be fetched.
    """
    depth = settings.depth if depth is None else depth
    parallel = settings.parallel if parallel is None else parallel
    if depth < 0:
        raise ConfigError(f"depth must be >= 0, got {depth}")
    if parallel < 1:
        raise ConfigError(f"parallel must be >= 1, got {parallel}")

    fetch = fetch or fetch_url
    seed_url = seed_url.strip()
    host = host_of(seed_url)

    print(f"[FETCH] {seed_url}")
    page = fetch(seed_url)
    seed_links = collect_links(page.html, host)
    print(f"[LEVEL 0] Found {len(seed_links)} link(s) on the seed page.")

    result = traverse(
        seed_links,
        host,
        depth,
        fetch=fetch,
        parallel=parallel,
        fail_fast=fail_fast,
        already_fetched=seed_aliases(seed_url, host),
    )

    if result.skipped:
        print(f"[DONE] {len(result.urls)} URL(s), {len(result.skipped)} page(s) skipped.")
    else:
        print(f"[DONE] {len(result.urls)} URL(s).")

    return CrawlResult(
        seed_url=seed_url,
        host=host,
        urls=result.urls,
        levels=result.levels,
        fetched=[seed_url] + result.fetched,
        skipped=result.skipped,
    )
