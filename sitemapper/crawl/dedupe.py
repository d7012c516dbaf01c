"""Order-preserving deduplication of URL strings."""

from __future__ import annotations

from typing import Iterable, List


def dedupe(urls: Iterable[str]) -> List[str]:
    """Return the first occurrence of each URL, in original order.

    Comparison is exact string equality: no trailing-slash, case or query
    normalisation is applied.
    """
    seen: set[str] = set()
    unique: List[str] = []
    for u in urls:
        if u not in seen:
            seen.add(u)
            unique.append(u)
    return unique
