"""
Command line entry point: scrape listing pages and print posts as JSON lines.
"""
from __future__ import annotations

import json
import logging
from typing import Iterable

import click

from hnscrape.errors import IncompleteScrape, ScraperError
from hnscrape.schemas.models import Page
from hnscrape.scraper import scrape_page, scrape_pages


def _echo_pages(pages: Iterable[Page]) -> None:
    for page in pages:
        for post in page.posts:
            payload = {"page": page.number, **post.model_dump(mode="json")}
            click.echo(json.dumps(payload, ensure_ascii=False))


@click.group()
@click.option("--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@cli.command()
@click.argument("number", type=int)
def page(number: int):
    """Scrape a single page (1 is the front page)."""
    try:
        result = scrape_page(number)
    except ScraperError as exc:
        raise click.ClickException(str(exc)) from exc
    _echo_pages([result])


@cli.command()
@click.argument("start", type=int)
@click.argument("end", type=int)
def pages(start: int, end: int):
    """Scrape pages START through END inclusive."""
    try:
        results = scrape_pages(start, end)
    except IncompleteScrape as exc:
        _echo_pages(exc.pages)
        raise click.ClickException(str(exc)) from exc
    except ScraperError as exc:
        raise click.ClickException(str(exc)) from exc
    _echo_pages(results)


if __name__ == "__main__":  # pragma: no cover
    cli()
