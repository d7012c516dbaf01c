"""Depth-bounded traversal over same-host links.

Level 0 is the link set of the seed page.  For every level ``i`` in
``1..depth`` each same-host URL of level ``i - 1`` that has not been fetched
yet in this run is fetched, and the links found on it form level ``i``.  The
levels are concatenated and deduplicated once at the end.  A ``depth`` of 1
or less performs no fetching at all.

A single ``fetched`` set is shared by every level, so a page is requested at
most once per run however often it is rediscovered.  With ``parallel > 1``
the pages of one level are fetched by a bounded ``ThreadPoolExecutor``; the
results are still merged in frontier order so the output does not depend on
completion order.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from itertools import chain
from typing import Callable, Generator, Iterable, List, Optional, Tuple

from sitemapper.crawl.dedupe import dedupe
from sitemapper.crawl.models import SkippedPage, TraversalResult
from sitemapper.crawl.resolver import belongs_to_host, collect_links
from sitemapper.errors import FetchError, URLParseError
from sitemapper.scraper.fetcher import fetch_url
from sitemapper.scraper.models import RawPage

Fetcher = Callable[[str], RawPage]

# Per-page failures that deep traversal can survive.
_RECOVERABLE = (FetchError, URLParseError)

_Outcomes = Generator[Tuple[str, Optional[List[str]], Optional[Exception]], None, None]


def _page_links(url: str, host: str, fetch: Fetcher) -> List[str]:
    print(f"[FETCH] {url}")
    page = fetch(url)
    return collect_links(page.html, host)


def _fetch_sequential(
    frontier: List[str], host: str, fetch: Fetcher
) -> _Outcomes:
    for url in frontier:
        try:
            yield url, _page_links(url, host, fetch), None
        except _RECOVERABLE as exc:
            yield url, None, exc


def _fetch_pooled(
    frontier: List[str], host: str, fetch: Fetcher, parallel: int
) -> _Outcomes:
    with ThreadPoolExecutor(max_workers=min(parallel, len(frontier))) as pool:
        futures = [pool.submit(_page_links, url, host, fetch) for url in frontier]
        try:
            for url, future in zip(frontier, futures):
                try:
                    yield url, future.result(), None
                except _RECOVERABLE as exc:
                    yield url, None, exc
        finally:
            # Consumer stopped early (fail-fast): drop queued work.
            for future in futures:
                future.cancel()


def traverse(
    seed_links: Iterable[str],
    host: str,
    depth: int,
    *,
    fetch: Optional[Fetcher] = None,
    parallel: int = 1,
    fail_fast: bool = False,
    already_fetched: Iterable[str] = (),
) -> TraversalResult:
    """Expand *seed_links* level by level up to *depth*.

    Args:
        seed_links: Resolved links found on the seed page (level 0).
        host: Authority that scopes which URLs are followed.
        depth: Maximum recursion depth; ``<= 1`` means no extra fetching.
        fetch: Page fetcher, defaults to :func:`~sitemapper.scraper.fetch_url`.
        parallel: Number of fetch workers per level.
        fail_fast: Re-raise the first page failure instead of skipping the page.
        already_fetched: URLs that must not be fetched again (the seed page).

    Returns:
        A :class:`TraversalResult` with the merged URL list, each level, the
        pages fetched and the pages skipped.

    Raises:
        FetchError: Only when *fail_fast* is set.
        URLParseError: Only when *fail_fast* is set.
    """
    fetch = fetch or fetch_url
    levels: List[List[str]] = [list(seed_links)]
    fetched = set(already_fetched)
    fetched_order: List[str] = []
    skipped: List[SkippedPage] = []

    if depth > 1:
        for i in range(1, depth + 1):
            frontier = [
                u for u in dedupe(levels[i - 1])
                if belongs_to_host(u, host) and u not in fetched
            ]
            if not frontier:
                print(f"[LEVEL {i}] Nothing new to fetch; stopping.")
                break

            print(f"[LEVEL {i}] Fetching {len(frontier)} page(s) …")
            fetched.update(frontier)

            if parallel > 1 and len(frontier) > 1:
                outcomes = _fetch_pooled(frontier, host, fetch, parallel)
            else:
                outcomes = _fetch_sequential(frontier, host, fetch)

            level: List[str] = []
            for url, links, exc in outcomes:
                fetched_order.append(url)
                if exc is not None:
                    if fail_fast:
                        outcomes.close()
                        raise exc
                    print(f"[SKIP] {url}: {exc}")
                    skipped.append(SkippedPage(url=url, reason=str(exc)))
                    continue
                level.extend(links or [])

            print(f"[LEVEL {i}] Found {len(level)} link(s).")
            levels.append(level)

    urls = dedupe(chain.from_iterable(levels))
    return TraversalResult(
        urls=urls, levels=levels, fetched=fetched_order, skipped=skipped
    )
