"""
Typed tree-query layer over lxml.

Extractors only see the ``Node`` protocol: XPath lookups relative to a node,
visible text and attribute values.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Protocol

from lxml import etree, html

from hnscrape.errors import FetchFailure
from hnscrape.infra.http import HttpFetcher

logger = logging.getLogger(__name__)


class Node(Protocol):
    def find(self, selector: str) -> List["Node"]:
        ...

    def text(self) -> str:
        ...

    def attr(self, name: str) -> Optional[str]:
        ...


class HtmlNode:
    """Node backed by an ``lxml.html`` element."""

    __slots__ = ("element",)

    def __init__(self, element: html.HtmlElement) -> None:
        self.element = element

    def find(self, selector: str) -> List["HtmlNode"]:
        # Selectors may return strings or numbers; only elements are nodes.
        results = self.element.xpath(selector)
        if not isinstance(results, list):
            return []
        return [HtmlNode(item) for item in results if isinstance(item, html.HtmlElement)]

    def text(self) -> str:
        return self.element.text_content()

    def attr(self, name: str) -> Optional[str]:
        return self.element.get(name)

    def __repr__(self) -> str:
        return f"HtmlNode(<{self.element.tag}>)"


def parse_html(markup: str) -> HtmlNode:
    try:
        root = html.document_fromstring(markup)
    except (etree.ParserError, ValueError) as exc:
        raise FetchFailure(f"could not parse document: {exc}") from exc
    return HtmlNode(root)


def load_url(url: str, fetcher: HttpFetcher) -> HtmlNode:
    markup = fetcher.fetch_text(url)
    document = parse_html(markup)
    logger.debug("Parsed %d characters from %s", len(markup), url)
    return document
