"""Utilities for rendering crawl results in the CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from sitemapper.crawl.models import CrawlResult


def render_summary(result: CrawlResult) -> str:
    """Render a crawl result as a short per-level report.

    Args:
        result: The finished crawl.

    Returns:
        String with one line per traversal level followed by the list of
        skipped pages, if any.
    """
    lines: List[str] = [f"Host: {result.host}"]

    count = len(result.levels)
    for depth, level in enumerate(result.levels):
        connector = "└── " if depth == count - 1 else "├── "
        lines.append(f"{connector}level {depth}: {len(level)} link(s)")

    lines.append(f"Pages fetched : {len(result.fetched)}")
    lines.append(f"Unique URLs   : {len(result.urls)}")

    if result.skipped:
        lines.append(f"Skipped pages ({len(result.skipped)}):")
        for page in result.skipped:
            lines.append(f"  ✗ {page.url}  ({page.reason})")

    return "\n".join(lines)
