"""
Exceptions raised by the scraper.
"""
from __future__ import annotations

from typing import Sequence

FORMAT_ERROR_MESSAGE = "could not process: page formatted unexpectedly"


class ScraperError(Exception):
    """Base class for every error raised by hnscrape."""


class InvalidInput(ScraperError, ValueError):
    """A page number or page range was rejected before any request was made."""


class FetchFailure(ScraperError):
    """Retrieving or parsing the listing document failed."""


class UnexpectedFormat(ScraperError):
    def __init__(self, message: str = FORMAT_ERROR_MESSAGE) -> None:
        super().__init__(message)


class IncompleteScrape(ScraperError):
    """
    Raised by a multi-page scrape when one page fails.

    ``pages`` holds the pages fetched before the failure, ``error`` the
    exception that stopped the run.
    """

    def __init__(self, pages: Sequence, error: Exception) -> None:
        super().__init__(f"scrape stopped after {len(pages)} page(s): {error}")
        self.pages = list(pages)
        self.error = error
