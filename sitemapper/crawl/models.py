"""Data models for the crawl pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class SkippedPage:
    """A page dropped during traversal because it could not be fetched or parsed."""

    url: str
    reason: str


@dataclass
class TraversalResult:
    """Outcome of a depth-bounded traversal.

    ``levels[0]`` is the seed page's link set; ``levels[i]`` holds the links
    found on the pages fetched at depth *i*.  ``urls`` is the deduplicated
    merge of every level in discovery order.
    """

    urls: List[str]
    levels: List[List[str]] = field(default_factory=list)
    fetched: List[str] = field(default_factory=list)
    skipped: List[SkippedPage] = field(default_factory=list)


@dataclass
class CrawlResult:
    """Everything a single crawl run produced, seed page included."""

    seed_url: str
    host: str
    urls: List[str]
    levels: List[List[str]] = field(default_factory=list)
    fetched: List[str] = field(default_factory=list)
    skipped: List[SkippedPage] = field(default_factory=list)
