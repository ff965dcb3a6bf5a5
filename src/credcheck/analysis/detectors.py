#!/usr/bin/env python3
"""
Credibility Detectors

Each detector inspects a parsed page and yields one weighted boolean
indicator. Detectors are independent: none mutates the document and
none depends on another's result, so they can be added, removed or
reordered without touching the scorer.
"""

import logging
from abc import ABC, abstractmethod
from typing import List

from ..content.document import ArticleDocument
from ..models.analysis import AnalysisIndicator
from . import vocabulary

logger = logging.getLogger(__name__)


class Detector(ABC):
    """Abstract base class for scored credibility checks."""

    name: str = ""
    weight: int = 0
    present_description: str = ""
    absent_description: str = ""

    @abstractmethod
    def evaluate(self, document: ArticleDocument) -> bool:
        """
        Decide whether the signal is present on the page.

        Args:
            document: Parsed page

        Returns:
            True if the credibility signal was found
        """
        pass

    def describe(self, present: bool, document: ArticleDocument) -> str:
        """Human-readable explanation of the outcome."""
        return self.present_description if present else self.absent_description

    def detect(self, document: ArticleDocument) -> AnalysisIndicator:
        """Evaluate and wrap the outcome as an indicator."""
        present = bool(self.evaluate(document))
        logger.debug(f"{self.name}: {'present' if present else 'absent'}")
        return AnalysisIndicator(
            name=self.name,
            present=present,
            description=self.describe(present, document),
            weight=self.weight
        )


class AuthorDetector(Detector):
    """Looks for authorship markup or a byline in the text."""

    name = "Autoria Identificada"
    weight = 25
    present_description = "O artigo possui informação de autoria identificada."
    absent_description = "Não foi possível identificar a autoria do conteúdo."

    def evaluate(self, document: ArticleDocument) -> bool:
        for selector in vocabulary.AUTHOR_SELECTORS:
            for element in document.select(selector):
                content = element.get('content') or element.get_text()
                if len(content.strip()) >= vocabulary.MIN_AUTHOR_LENGTH:
                    return True

        return any(pattern.search(document.raw_text) for pattern in vocabulary.AUTHOR_PATTERNS)


class PublicationDateDetector(Detector):
    """Looks for date markup or a written date in the text."""

    name = "Data de Publicação"
    weight = 20
    present_description = "O artigo possui data de publicação identificada."
    absent_description = "Não foi possível identificar a data de publicação."

    def evaluate(self, document: ArticleDocument) -> bool:
        for selector in vocabulary.DATE_SELECTORS:
            if document.select_one(selector) is not None:
                return True

        return any(pattern.search(document.body_text) for pattern in vocabulary.DATE_PATTERNS)


class CitedSourcesDetector(Detector):
    """Counts external non-social links and citation elements."""

    name = "Fontes Citadas"
    weight = 30
    present_description = "O artigo cita fontes ou referências externas."
    absent_description = "Não foram identificadas citações ou referências a fontes."

    def evaluate(self, document: ArticleDocument) -> bool:
        external_links = [
            link for link in document.select(vocabulary.EXTERNAL_LINK_SELECTOR)
            if not vocabulary.SOCIAL_MEDIA_PATTERN.search(link.get('href', ''))
        ]
        if len(external_links) > vocabulary.MIN_EXTERNAL_SOURCES:
            return True

        return document.select_one(vocabulary.CITATION_SELECTOR) is not None


def find_sensationalist_words(text: str) -> List[str]:
    """
    Collect vocabulary words contained in any whitespace token of ``text``.

    Each word is reported once, in the order it is first seen.
    """
    found: List[str] = []
    for token in text.lower().split():
        for word in vocabulary.SENSATIONALIST_WORDS:
            if word in token and word not in found:
                found.append(word)
    return found


def sensationalist_text(document: ArticleDocument) -> str:
    """Body text plus title, the input of the sensationalism check."""
    return f"{document.body_text} {document.title.lower()}"


def sensationalist_words_in(document: ArticleDocument) -> List[str]:
    """Distinct sensationalist words of a page, scanned once per document."""
    return document.derived(
        "sensationalist_words",
        lambda doc: find_sensationalist_words(sensationalist_text(doc))
    )


class BalancedLanguageDetector(Detector):
    """Present when only a few sensationalist terms appear."""

    name = "Linguagem Equilibrada"
    weight = 25
    present_description = "A linguagem utilizada parece equilibrada e factual."

    def find_words(self, document: ArticleDocument) -> List[str]:
        return sensationalist_words_in(document)

    def evaluate(self, document: ArticleDocument) -> bool:
        return len(self.find_words(document)) <= vocabulary.MAX_BALANCED_SENSATIONALIST_HITS

    def describe(self, present: bool, document: ArticleDocument) -> str:
        if present:
            return self.present_description
        count = len(self.find_words(document))
        return f"Detectadas {count} palavras sensacionalistas no conteúdo."


def default_detectors() -> List[Detector]:
    """The standard detector set, in output order."""
    return [
        AuthorDetector(),
        PublicationDateDetector(),
        CitedSourcesDetector(),
        BalancedLanguageDetector(),
    ]
