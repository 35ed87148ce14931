"""
HTML document collaborator.
Parses the rendered ePI HTML with BeautifulSoup, inserts the panel as the
first child of <body> (or of the document root when there is no body) and
serializes the result.
"""

from typing import Protocol
import logging

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

EMPTY_HTML = "<html><body></body></html>"
PARSER = "html.parser"


class HtmlDocument:
    """Thin wrapper around a parsed BeautifulSoup tree."""

    def __init__(self, soup: BeautifulSoup):
        self.soup = soup

    def insertion_point(self):
        return self.soup.body or self.soup.html or self.soup

    def query(self, selector: str):
        """Host-facing CSS selector query over the parsed document."""
        return self.soup.select(selector)

    def insert_first(self, markup: str) -> None:
        """Insert an HTML fragment as the first child of the insertion point."""
        target = self.insertion_point()
        fragment = BeautifulSoup(markup, PARSER)
        # insert in reverse so the fragment keeps its order at position 0
        for node in reversed(list(fragment.contents)):
            target.insert(0, node.extract())

    def serialize(self) -> str:
        return str(self.soup)


class DocumentProvider(Protocol):
    def from_html(self, html: str) -> HtmlDocument:
        ...


class BeautifulSoupProvider:
    """Default document provider."""

    def __init__(self, parser: str = PARSER):
        self.parser = parser

    def from_html(self, html: str) -> HtmlDocument:
        if not html or not html.strip():
            logger.debug("Empty HTML, starting from a blank document")
            html = EMPTY_HTML
        return HtmlDocument(BeautifulSoup(html, self.parser))
