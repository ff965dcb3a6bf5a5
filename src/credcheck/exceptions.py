#!/usr/bin/env python3
"""
Standardized exception hierarchy for the credibility checker.

Provides specific exception types for fetch, configuration and input
failures with error context suitable for logging and serialization.
"""

from typing import Optional, Dict, Any


class CredCheckError(Exception):
    """Base exception for all credibility checker errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, context: Optional[Dict[str, Any]] = None):
        """
        Initialize base exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            context: Additional error context
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            'error_type': self.__class__.__name__,
            'error_code': self.error_code,
            'message': self.message,
            'context': self.context
        }


class InvalidURLError(CredCheckError):
    """URL is not a syntactically valid absolute http(s) URL."""

    def __init__(self, url: str, issue: str):
        message = f"URL inválida: {issue}"
        context = {
            'url': url,
            'issue': issue
        }
        super().__init__(message, context=context)


# Fetch-related exceptions
class FetchError(CredCheckError):
    """Base exception for page fetch errors."""
    pass


class NetworkError(FetchError):
    """DNS, connection or other transport failure."""

    def __init__(self, url: str, original_error: Exception):
        message = f"Network error while fetching {url}: {original_error}"
        context = {
            'url': url,
            'original_error': str(original_error)
        }
        super().__init__(message, context=context)


class FetchTimeoutError(FetchError):
    """Fetch did not complete within the time bound."""

    def __init__(self, url: str, timeout_seconds: float):
        message = f"Timeout fetching {url} after {timeout_seconds:g}s"
        context = {
            'url': url,
            'timeout_seconds': timeout_seconds
        }
        super().__init__(message, context=context)


class HttpStatusError(FetchError):
    """Server answered with a non-2xx status."""

    def __init__(self, url: str, status_code: int):
        message = f"HTTP error! status: {status_code}"
        context = {
            'url': url,
            'status_code': status_code
        }
        super().__init__(message, context=context)
        self.status_code = status_code


# Configuration-related exceptions
class ConfigurationError(CredCheckError):
    """Configuration is invalid or missing."""

    def __init__(self, config_key: str, issue: str):
        message = f"Configuration error for {config_key}: {issue}"
        context = {
            'config_key': config_key,
            'issue': issue
        }
        super().__init__(message, context=context)


# Analysis-related exceptions
class AnalysisFailedError(CredCheckError):
    """
    User-facing failure of a whole analysis.

    Wraps the underlying cause; callers treat it as "analysis unavailable".
    """

    def __init__(self, url: str, cause: Exception):
        cause_message = getattr(cause, 'message', None) or str(cause) or 'Erro desconhecido'
        message = f"Falha ao analisar o site: {cause_message}"
        context = {
            'url': url,
            'cause_type': cause.__class__.__name__,
            'cause': cause_message
        }
        if isinstance(cause, CredCheckError):
            context['cause_context'] = cause.context
        super().__init__(message, context=context)
        self.url = url
        self.cause = cause

    @property
    def status_code(self) -> Optional[int]:
        """HTTP status of the underlying failure, if there was one."""
        return getattr(self.cause, 'status_code', None)
