#!/usr/bin/env python3
"""
Narrative findings.

Unscored observations about the page. Some checks only report the
positive case (security, about page); the contact check always reports
one way or the other.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from ..content.document import ArticleDocument
from ..models.analysis import Finding, Impact
from . import vocabulary

logger = logging.getLogger(__name__)


class FindingCheck(ABC):
    """Abstract base class for narrative checks."""

    category: str = ""

    @abstractmethod
    def evaluate(self, document: ArticleDocument) -> Optional[Finding]:
        """
        Inspect the page.

        Args:
            document: Parsed page

        Returns:
            A finding, or None when there is nothing to report
        """
        pass

    def _finding(self, text: str, impact: Impact) -> Finding:
        return Finding(category=self.category, finding=text, impact=impact)


class SecureConnectionCheck(FindingCheck):
    """Positive finding when the canonical og:url is served over HTTPS."""

    category = "Segurança"

    def evaluate(self, document: ArticleDocument) -> Optional[Finding]:
        og_url = document.select_one(vocabulary.OG_URL_SELECTOR)
        content = (og_url.get('content') or '') if og_url is not None else ''
        if content.startswith('https://'):
            return self._finding("O site utiliza conexão segura (HTTPS).", Impact.POSITIVE)
        return None


class ContactInformationCheck(FindingCheck):
    category = "Transparência"

    def evaluate(self, document: ArticleDocument) -> Optional[Finding]:
        has_contact = (
            document.select_one(vocabulary.MAILTO_SELECTOR) is not None
            or any(keyword in document.body_text for keyword in vocabulary.CONTACT_KEYWORDS)
        )
        if has_contact:
            return self._finding(
                "Informações de contato foram identificadas no site.",
                Impact.POSITIVE
            )
        return self._finding(
            "Não foram identificadas informações de contato facilmente acessíveis.",
            Impact.NEGATIVE
        )


class AboutPageCheck(FindingCheck):
    category = "Credibilidade"

    def evaluate(self, document: ArticleDocument) -> Optional[Finding]:
        if document.select_one(vocabulary.ABOUT_PAGE_SELECTOR) is not None:
            return self._finding("O site possui uma página 'Sobre' ou 'About'.", Impact.POSITIVE)
        return None


class ContentDepthCheck(FindingCheck):
    """Reports substantial (>500 words) or brief (<200 words) content."""

    category = "Profundidade"

    def evaluate(self, document: ArticleDocument) -> Optional[Finding]:
        word_count = document.word_count
        if word_count > vocabulary.SUBSTANTIAL_WORD_COUNT:
            return self._finding(
                f"O conteúdo é substancial com aproximadamente {word_count} palavras.",
                Impact.POSITIVE
            )
        if word_count < vocabulary.BRIEF_WORD_COUNT:
            return self._finding(
                "O conteúdo parece ser muito breve para um artigo jornalístico completo.",
                Impact.NEGATIVE
            )
        return None


def default_finding_checks() -> List[FindingCheck]:
    """The standard narrative checks, in output order."""
    return [
        SecureConnectionCheck(),
        ContactInformationCheck(),
        AboutPageCheck(),
        ContentDepthCheck(),
    ]


def generate_findings(document: ArticleDocument, checks: Optional[List[FindingCheck]] = None) -> List[Finding]:
    """Run every check in order and keep the ones that reported something."""
    findings = []
    for check in checks if checks is not None else default_finding_checks():
        finding = check.evaluate(document)
        if finding is not None:
            findings.append(finding)
    logger.debug(f"Generated {len(findings)} narrative findings")
    return findings
