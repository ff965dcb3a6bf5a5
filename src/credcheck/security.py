#!/usr/bin/env python3
"""
Input validation for URLs submitted for analysis.

Performs the syntactic checks the analyzer expects its callers to have
done already: absolute http(s) URL with a host, bounded length.
"""

import urllib.parse
import logging

from .exceptions import InvalidURLError

logger = logging.getLogger(__name__)


class SecurityValidator:
    """Handles validation of user-supplied URLs."""

    MAX_URL_LENGTH = 2048

    ALLOWED_SCHEMES = {'http', 'https'}

    def __init__(self, max_url_length: int = MAX_URL_LENGTH):
        self.max_url_length = max_url_length

    def validate_url(self, url: str) -> str:
        """
        Validate that a URL can be submitted for analysis.

        Args:
            url: Candidate URL

        Returns:
            The URL stripped of surrounding whitespace

        Raises:
            InvalidURLError: If the URL is empty, too long, relative or not http(s)
        """
        url = (url or '').strip()
        if not url:
            raise InvalidURLError(url, "URL vazia")

        if len(url) > self.max_url_length:
            raise InvalidURLError(url, f"URL excede {self.max_url_length} caracteres")

        try:
            parsed = urllib.parse.urlparse(url)
        except ValueError as e:
            raise InvalidURLError(url, str(e))

        if parsed.scheme.lower() not in self.ALLOWED_SCHEMES:
            logger.warning(f"Blocked URL with invalid scheme: {parsed.scheme!r}")
            raise InvalidURLError(url, "esquema deve ser http ou https")

        if not parsed.netloc or not parsed.hostname:
            raise InvalidURLError(url, "URL sem domínio")

        if any(char.isspace() for char in url):
            raise InvalidURLError(url, "URL contém espaços")

        return url

    def is_valid_url(self, url: str) -> bool:
        """Boolean form of validate_url."""
        try:
            self.validate_url(url)
            return True
        except InvalidURLError:
            return False
