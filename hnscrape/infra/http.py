"""
HTTP fetching for listing pages: one GET per call, no retries or caching.
"""
from __future__ import annotations

import logging
from typing import Optional

import requests

from hnscrape.errors import FetchFailure
from hnscrape.settings import ScraperSettings, load_settings

logger = logging.getLogger(__name__)


class HttpFetcher:
    """
    Thin wrapper over requests.Session with browser-like headers.
    """

    def __init__(self, user_agent: str, timeout: int = 20) -> None:
        self.session = requests.Session()
        self.session.headers.update(
            {
                "User-Agent": user_agent,
                "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
                "Accept-Language": "en-US,en;q=0.8",
            }
        )
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Optional[ScraperSettings] = None) -> "HttpFetcher":
        settings = settings or load_settings()
        return cls(user_agent=settings.user_agent, timeout=settings.timeout)

    def fetch_text(self, url: str) -> str:
        """
        Fetch ``url`` and return the decoded body.

        Raises FetchFailure (chained to the requests error) on transport
        errors and on any status other than 200.
        """
        logger.debug("GET %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise FetchFailure(f"request to {url} failed: {exc}") from exc
        if response.status_code != 200:
            raise FetchFailure(f"HTTP {response.status_code} for {url}")
        return response.text
