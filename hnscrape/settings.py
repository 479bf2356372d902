"""
Centralised settings for the scraper (env-first, code-light).

Only transport details are configurable; the listing URL and markup contract
are fixed in ``hnscrape.scraper``.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "hnscrape/1.0 (+https://github.com/hnscrape/hnscrape)"
DEFAULT_TIMEOUT = 20


@dataclass(frozen=True)
class ScraperSettings:
    user_agent: str
    timeout: int


def _int_from_env(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None or str(raw).strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int value for %s=%s; using default %s", key, raw, default)
        return default
    if value <= 0:
        logger.warning("Non-positive value for %s=%s; using default %s", key, raw, default)
        return default
    return value


def load_settings() -> ScraperSettings:
    user_agent = (os.getenv("HNSCRAPE_USER_AGENT") or "").strip()
    return ScraperSettings(
        user_agent=user_agent or DEFAULT_USER_AGENT,
        timeout=_int_from_env("HNSCRAPE_TIMEOUT", DEFAULT_TIMEOUT),
    )
