"""Commands that crawl a site and write its sitemap.

Library modules are imported inside each command, so a malformed environment
value (read when ``sitemapper.config`` is first imported) is reported as a
``[sitemapper]`` error instead of a traceback.
"""

from __future__ import annotations

import sys
from contextlib import nullcontext, redirect_stdout
from pathlib import Path
from typing import Optional

import typer

from sitemapper.errors import SitemapError

from cli.rendering import render_summary


def crawl(
    url: str = typer.Argument(..., help="Seed URL the crawl starts from."),
    depth: Optional[int] = typer.Option(
        None, "--depth", help="Max depth of url navigation recursion. [default: SITEMAP_DEPTH or 1]"
    ),
    parallel: Optional[int] = typer.Option(
        None, "--parallel", help="Number of parallel fetch workers. [default: SITEMAP_PARALLEL or 1]"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", help="Output file path. [default: SITEMAP_OUTPUT or ./sitemap.xml]"
    ),
    overwrite: bool = typer.Option(
        False, "--overwrite", help="Truncate the output file instead of appending to it."
    ),
    fail_fast: bool = typer.Option(
        False, "--fail-fast", help="Abort on the first page that cannot be fetched."
    ),
    minify: bool = typer.Option(False, "--minify", help="Write compact XML."),
    print_xml: bool = typer.Option(
        False,
        "--print",
        help="Also print the generated XML to stdout. Progress and the summary go to stderr.",
    ),
) -> None:
    """Crawl URL and write a sitemap of every same-host page found."""
    try:
        from sitemapper.config import settings
        from sitemapper.crawl import run_crawl
        from sitemapper.sitemap import build_sitemap, to_xml, write_sitemap

        target = output if output is not None else settings.output_path
        settings.validate(depth=depth, parallel=parallel)
        # With --print, stdout carries the XML document only.
        progress = redirect_stdout(sys.stderr) if print_xml else nullcontext()
        with progress:
            result = run_crawl(url, depth=depth, parallel=parallel, fail_fast=fail_fast)
        data = to_xml(build_sitemap(result.urls, minify=minify))
        written = write_sitemap(data, target, overwrite=overwrite)
    except SitemapError as exc:
        typer.echo(f"[sitemapper] {exc}", err=True)
        raise typer.Exit(code=1)

    typer.echo("", err=print_xml)
    typer.echo(render_summary(result), err=print_xml)
    if print_xml:
        typer.echo(data.decode("utf-8"), nl=False)
    verb = "Wrote" if overwrite else "Appended"
    typer.echo(f"[crawl] {verb} {len(result.urls)} URL(s) to {written}", err=print_xml)


def links(
    url: str = typer.Argument(..., help="Page to extract links from."),
) -> None:
    """Print the same-host links found on a single page."""
    try:
        from sitemapper.crawl import collect_links, host_of
        from sitemapper.scraper import fetch_url

        host = host_of(url)
        typer.echo(f"[links] Fetching {url!r} …")
        page = fetch_url(url.strip())
        found = collect_links(page.html, host)
    except SitemapError as exc:
        typer.echo(f"[sitemapper] {exc}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"[links] HTTP {page.status_code} — {len(found)} same-host link(s)")
    for link in found:
        typer.echo(f"  {link}")
