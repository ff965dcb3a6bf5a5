"""
Credibility heuristics, scoring and result assembly.
"""

from .analyzer import CredibilityAnalyzer, analyze
from .detectors import (
    AuthorDetector,
    BalancedLanguageDetector,
    CitedSourcesDetector,
    Detector,
    PublicationDateDetector,
    default_detectors,
    find_sensationalist_words,
    sensationalist_words_in,
)
from .findings import (
    AboutPageCheck,
    ContactInformationCheck,
    ContentDepthCheck,
    FindingCheck,
    SecureConnectionCheck,
    default_finding_checks,
    generate_findings,
)
from .scoring import calculate_trust_score, get_trust_level

__all__ = [
    'CredibilityAnalyzer', 'analyze',
    'Detector', 'AuthorDetector', 'PublicationDateDetector', 'CitedSourcesDetector',
    'BalancedLanguageDetector', 'default_detectors', 'find_sensationalist_words', 'sensationalist_words_in',
    'FindingCheck', 'SecureConnectionCheck', 'ContactInformationCheck', 'AboutPageCheck',
    'ContentDepthCheck', 'default_finding_checks', 'generate_findings',
    'calculate_trust_score', 'get_trust_level',
]
