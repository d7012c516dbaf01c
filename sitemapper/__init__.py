"""sitemapper — crawl a site and write a sitemaps.org sitemap.

The package itself imports nothing so that ``sitemapper.errors`` can be
loaded before the environment-backed settings are read.  Use the
subpackages directly::

    from sitemapper.crawl import run_crawl
    from sitemapper.sitemap import build_sitemap, to_xml, write_sitemap

    result = run_crawl("https://example.com/", depth=2)
    write_sitemap(to_xml(build_sitemap(result.urls)), "sitemap.xml")
"""
