"""XML serialisation and file output for sitemaps."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Union

from sitemapper.errors import FileWriteError, SerializationError
from sitemapper.sitemap.models import Sitemap, SitemapURL

# Anything outside the XML 1.0 Char production; ElementTree writes it unescaped.
_INVALID_XML_CHARS = re.compile(r"[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _url_element(parent: ET.Element, entry: SitemapURL) -> None:
    if not isinstance(entry.loc, str) or not entry.loc:
        raise SerializationError(f"sitemap entry has no location: {entry!r}")
    if _INVALID_XML_CHARS.search(entry.loc):
        raise SerializationError(f"location contains characters not allowed in XML: {entry.loc!r}")

    url_el = ET.SubElement(parent, "url")
    ET.SubElement(url_el, "loc").text = entry.loc

    if entry.lastmod is not None:
        ET.SubElement(url_el, "lastmod").text = entry.lastmod.isoformat()
    if entry.changefreq is not None:
        ET.SubElement(url_el, "changefreq").text = entry.changefreq.value
    if entry.priority is not None:
        if not 0.0 <= entry.priority <= 1.0:
            raise SerializationError(
                f"priority must be between 0.0 and 1.0, got {entry.priority} for {entry.loc}"
            )
        ET.SubElement(url_el, "priority").text = f"{entry.priority:g}"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def to_xml(sitemap: Sitemap) -> bytes:
    """Serialise *sitemap* to a UTF-8 ``urlset`` document.

    The document starts with an XML declaration and ends with a newline so
    that several documents appended to one file stay line-separated.

    Raises:
        SerializationError: If an entry cannot be represented in XML.
    """
    root = ET.Element("urlset", {"xmlns": sitemap.xmlns})
    for entry in sitemap.urls:
        _url_element(root, entry)

    if not sitemap.minify:
        ET.indent(root, space="  ")

    try:
        data = ET.tostring(root, encoding="utf-8", xml_declaration=True)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"couldn't generate the xml from sitemap: {exc}") from exc
    return data + b"\n"


def write_sitemap(
    data: bytes,
    path: Union[str, Path],
    *,
    overwrite: bool = False,
) -> Path:
    """Write *data* to *path* and return the resolved path.

    The file is created if missing.  By default new data is appended, so two
    runs against the same path leave two documents in the file; pass
    ``overwrite=True`` to truncate first.

    Raises:
        FileWriteError: If the file cannot be opened or written.
    """
    target = Path(path)
    mode = "wb" if overwrite else "ab"
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open(mode) as fh:
            fh.write(data)
    except OSError as exc:
        raise FileWriteError(f"unable to write the sitemap to {target}: {exc}") from exc
    return target
