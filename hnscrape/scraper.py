"""
Page-level orchestration: locate the listing rows, build posts, walk page ranges.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Iterator, List, Optional, Tuple

from pydantic import ValidationError

from hnscrape.errors import IncompleteScrape, InvalidInput, ScraperError, UnexpectedFormat
from hnscrape.extractors.fields import (
    get_author,
    get_num_comments,
    get_posted_at,
    get_rank,
    get_score,
    get_title,
    get_url,
)
from hnscrape.infra.document import Node, load_url
from hnscrape.infra.http import HttpFetcher
from hnscrape.schemas.models import Page, Post

logger = logging.getLogger(__name__)

BASE_URL = "https://news.ycombinator.com/news?p="

LISTING_ROWS_SELECTOR = (
    "//table[contains(@class, 'itemlist')]/tr"
    " | //table[contains(@class, 'itemlist')]/tbody/tr"
)
SUBTEXT_SELECTOR = "./td[contains(@class, 'subtext')]"
ROWS_PER_POST = 3


def build_page_url(page_number: int) -> str:
    return BASE_URL + str(page_number)


def iter_row_groups(document: Node) -> Iterator[Tuple[Node, Node]]:
    """
    Yield ``(title_row, subtext_cell)`` for every post in the listing table.

    Posts are laid out as title row, subtext row, spacer row. Rows left over
    at the end (the "More" link) are not a full group and are skipped.
    """
    rows = document.find(LISTING_ROWS_SELECTOR)
    for index in range(0, len(rows) - (ROWS_PER_POST - 1), ROWS_PER_POST):
        subtext_cells = rows[index + 1].find(SUBTEXT_SELECTOR)
        if len(subtext_cells) != 1:
            raise UnexpectedFormat()
        yield rows[index], subtext_cells[0]


def get_post(title_row: Node, subtext: Node) -> Post:
    title = get_title(title_row)
    rank = get_rank(title_row)
    url = get_url(title_row)
    author = get_author(subtext)
    score = get_score(subtext)
    num_comments = get_num_comments(subtext)
    posted_at = get_posted_at(subtext)
    try:
        return Post(
            rank=rank,
            title=title,
            score=score,
            author=author,
            url=url,
            num_comments=num_comments,
            posted_at=posted_at,
        )
    except ValidationError as exc:
        raise UnexpectedFormat() from exc


def parse_listing(document: Node, page_number: int, retrieved_at: datetime) -> Page:
    posts = [get_post(title_row, subtext) for title_row, subtext in iter_row_groups(document)]
    logger.debug("Extracted %d posts from page %d", len(posts), page_number)
    return Page(posts=tuple(posts), number=page_number, retrieved_at=retrieved_at)


def scrape_page(page_number: int, fetcher: Optional[HttpFetcher] = None) -> Page:
    """
    Scrape a single listing page. Page 1 is the front page.
    """
    if page_number < 1:
        raise InvalidInput("page number must be a positive integer")

    fetcher = fetcher or HttpFetcher.from_settings()
    document = load_url(build_page_url(page_number), fetcher)
    retrieved_at = datetime.now(timezone.utc)
    return parse_listing(document, page_number, retrieved_at)


def scrape_pages(start: int, end: int, fetcher: Optional[HttpFetcher] = None) -> List[Page]:
    """
    Scrape pages ``start`` through ``end`` inclusive, one request at a time.

    If a page fails, IncompleteScrape is raised with the pages collected so far.
    """
    if start < 1 or end < 1:
        raise InvalidInput("page numbers must be positive integers")
    if start > end:
        raise InvalidInput("starting page number cannot be larger than ending page number")

    fetcher = fetcher or HttpFetcher.from_settings()
    pages: List[Page] = []
    for page_number in range(start, end + 1):
        try:
            pages.append(scrape_page(page_number, fetcher=fetcher))
        except ScraperError as exc:
            raise IncompleteScrape(pages, exc) from exc
    return pages
