"""
credcheck - heuristic credibility analysis for news article URLs.
"""

from .analysis import CredibilityAnalyzer, analyze
from .exceptions import (
    AnalysisFailedError,
    ConfigurationError,
    CredCheckError,
    FetchError,
    FetchTimeoutError,
    HttpStatusError,
    InvalidURLError,
    NetworkError,
)
from .models import AnalysisIndicator, AnalysisResult, Finding, Impact, TrustLevel

__version__ = "1.0.0"

__all__ = [
    'CredibilityAnalyzer', 'analyze',
    'AnalysisIndicator', 'AnalysisResult', 'Finding', 'Impact', 'TrustLevel',
    'CredCheckError', 'AnalysisFailedError', 'ConfigurationError', 'FetchError',
    'FetchTimeoutError', 'HttpStatusError', 'InvalidURLError', 'NetworkError',
]
