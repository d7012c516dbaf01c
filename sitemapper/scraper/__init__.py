"""Scraper package — page fetch & link extraction."""

from sitemapper.scraper.extractor import extract_links
from sitemapper.scraper.fetcher import fetch_url
from sitemapper.scraper.models import RawPage

__all__ = ["fetch_url", "extract_links", "RawPage"]
