"""
Field extractors for a single listing entry.

Title, rank and URL come from the title row; everything else from the subtext
cell beneath it. Each function is pure given its node and raises
UnexpectedFormat when the markup does not match.
"""
from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import List

from hnscrape.errors import UnexpectedFormat
from hnscrape.infra.document import Node

TITLE_SELECTOR = "./td/a"
RANK_SELECTOR = "./td/span[contains(@class, 'rank')]"
URL_SELECTOR = "./td/a[contains(@class, 'titlelink')]"
AUTHOR_SELECTOR = ".//a[contains(@class, 'hnuser')]"
SCORE_SELECTOR = ".//span[contains(@class, 'score')]"
COMMENTS_SELECTOR = ".//a"
AGE_SELECTOR = ".//span[contains(@class, 'age')]"

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"

_POINTS_RE = re.compile(r"\bpoints?\b")
_NON_DIGITS_RE = re.compile(r"[^0-9]+")


def _find_exactly_one(node: Node, selector: str) -> Node:
    matches: List[Node] = node.find(selector)
    if len(matches) != 1:
        raise UnexpectedFormat()
    return matches[0]


def _to_int(raw: str) -> int:
    try:
        return int(raw)
    except ValueError as exc:
        raise UnexpectedFormat() from exc


def get_title(title_row: Node) -> str:
    return _find_exactly_one(title_row, TITLE_SELECTOR).text()


def get_rank(title_row: Node) -> int:
    raw = _find_exactly_one(title_row, RANK_SELECTOR).text().strip()
    if raw.endswith("."):
        raw = raw[:-1]
    return _to_int(raw)


def get_url(title_row: Node) -> str:
    # Self posts carry a relative href ("item?id=...").
    return _find_exactly_one(title_row, URL_SELECTOR).attr("href") or ""


def get_author(subtext: Node) -> str:
    # Job listings have no submitter.
    matches = subtext.find(AUTHOR_SELECTOR)
    if len(matches) == 1:
        return matches[0].text()
    return ""


def get_score(subtext: Node) -> int:
    raw = _find_exactly_one(subtext, SCORE_SELECTOR).text()
    return _to_int(_POINTS_RE.sub("", raw).strip())


def get_num_comments(subtext: Node) -> int:
    """
    Read the comment count from the subtext links.

    The site labels an entry without comments "discuss" and otherwise
    "N comment(s)", so the two cases are matched separately. Any other
    wording is treated as a format change.
    """
    comments_text = ""
    for link in subtext.find(COMMENTS_SELECTOR):
        text = link.text()
        if "discuss" in text:
            return 0
        if "comment" in text:
            comments_text = _NON_DIGITS_RE.sub("", text)
    if not comments_text:
        raise UnexpectedFormat()
    return _to_int(comments_text)


def get_posted_at(subtext: Node) -> datetime:
    """
    Parse the absolute timestamp from the age span's ``title`` attribute.

    The visible text is relative ("3 hours ago"); newer markup appends a unix
    timestamp after the ISO value, which is ignored.
    """
    raw = _find_exactly_one(subtext, AGE_SELECTOR).attr("title") or ""
    parts = raw.split()
    if not parts:
        raise UnexpectedFormat()
    try:
        posted = datetime.strptime(parts[0], TIMESTAMP_FORMAT)
    except ValueError as exc:
        raise UnexpectedFormat() from exc
    return posted.replace(tzinfo=timezone.utc)
