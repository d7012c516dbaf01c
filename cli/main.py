"""sitemapper CLI — entry-point for crawling a site into a sitemap.

Usage:
    sitemapper crawl URL [--depth N] [--parallel N] [--output PATH] [--print]
    sitemapper links URL
    python cli/main.py --help

The seed URL is an argument of the `crawl` command; `sitemapper URL` on its
own is rejected as an unknown command.

Commands:
    crawl  → crawl a site and append (or write) its sitemap
    links  → print the same-host links found on one page
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from sitemapper.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import typer

from cli.commands.crawl import crawl, links

app = typer.Typer(
    name="sitemapper",
    help=(
        "Crawl a website and generate a sitemaps.org sitemap.\n\n"
        "Run `sitemapper crawl URL` to crawl from a seed URL."
    ),
    no_args_is_help=True,
)

app.command("crawl")(crawl)
app.command("links")(links)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
