"""
Parsed article page with the derived text views used by the detectors.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

logger = logging.getLogger(__name__)

# Subtrees whose text must never reach the heuristics
STRIPPED_TAGS = ["script", "style", "noscript"]


def normalize_whitespace(text: str) -> str:
    """Collapse runs of whitespace into single spaces."""
    return " ".join(text.split())


class ArticleDocument:
    """
    Read-only view over a fetched HTML page.

    Wraps a BeautifulSoup tree (``html.parser`` tolerates malformed
    markup) and exposes:

    - ``select`` / ``select_one`` for CSS lookups
    - ``raw_text``: whitespace-normalized body text, original case
    - ``body_text``: lower-cased ``raw_text``
    - ``title``: text of the ``<title>`` elements, or of the first
      ``<h1>`` when they hold no text at all
    - ``derived``: per-document memo for values computed from the above
    """

    def __init__(self, soup: BeautifulSoup):
        self.soup = soup
        self._derived: Dict[str, Any] = {}

        for tag in soup(STRIPPED_TAGS):
            tag.decompose()

        root = soup.body or soup
        self.raw_text = normalize_whitespace(root.get_text(separator=" "))
        self.body_text = self.raw_text.lower()
        self.title = self._extract_title()

    @classmethod
    def from_html(cls, html: Optional[str]) -> 'ArticleDocument':
        """Parse HTML text into a document."""
        soup = BeautifulSoup(html or "", 'html.parser')
        return cls(soup)

    def _extract_title(self) -> str:
        # Whitespace-only title text still counts as a title
        text = "".join(element.get_text() for element in self.soup.find_all("title"))
        if not text:
            h1 = self.soup.find("h1")
            text = h1.get_text(separator=" ") if h1 else ""
        return normalize_whitespace(text)

    def derived(self, key: str, compute: Callable[['ArticleDocument'], Any]) -> Any:
        """Compute a value from this document once and reuse it afterwards."""
        if key not in self._derived:
            self._derived[key] = compute(self)
        return self._derived[key]

    def select(self, selector: str) -> List[Tag]:
        """All elements matching a CSS selector."""
        return self.soup.select(selector)

    def select_one(self, selector: str) -> Optional[Tag]:
        return self.soup.select_one(selector)

    @property
    def word_count(self) -> int:
        """Whitespace-token count of the body text."""
        return len(self.body_text.split())

    def __repr__(self):
        return f"ArticleDocument(title='{self.title[:50]}', words={self.word_count})"
