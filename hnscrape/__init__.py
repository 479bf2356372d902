"""
Public API for scraping Hacker News listing pages.
"""
from __future__ import annotations

from hnscrape.errors import (
    FetchFailure,
    IncompleteScrape,
    InvalidInput,
    ScraperError,
    UnexpectedFormat,
)
from hnscrape.schemas.models import Page, Post
from hnscrape.scraper import parse_listing, scrape_page, scrape_pages

__all__ = [
    "FetchFailure",
    "IncompleteScrape",
    "InvalidInput",
    "Page",
    "Post",
    "ScraperError",
    "UnexpectedFormat",
    "parse_listing",
    "scrape_page",
    "scrape_pages",
]
