"""Link extraction: pulls raw ``href`` targets out of an HTML body."""

from __future__ import annotations

import re
from typing import List

# Double-quoted href inside an opening <a ...> tag, non-greedy up to the
# closing quote.  Not an HTML parser: single-quoted or unquoted hrefs and
# attributes split across lines are not matched.
_LINK_TAG_RE = re.compile(r'<a[^>]+href="(.*?)"[^>]*>')


def extract_links(html: str) -> List[str]:
    """Return every ``href`` value found in ``<a>`` tags, in source order.

    Duplicates are kept; deduplication happens after resolution.  An empty
    or malformed body simply yields an empty list.
    """
    if not html:
        return []
    return [m.group(1) for m in _LINK_TAG_RE.finditer(html)]
