#!/usr/bin/env python3
"""
Service wiring for the command layer.

Commands share one configuration and one URL validator per process but
get a fresh analyzer for every analysis, so nothing from one URL can
leak into the next. The analyzer factory can be swapped, which is how
tests route analyses through a fake fetcher.
"""

import logging
import threading
from typing import Callable, Optional

from .analysis.analyzer import CredibilityAnalyzer
from .config import Config, get_config
from .security import SecurityValidator

logger = logging.getLogger(__name__)

AnalyzerFactory = Callable[[Config], CredibilityAnalyzer]


class Container:
    """Lazily builds the services a command run needs."""

    def __init__(self,
                 config_loader: Callable[[], Config] = get_config,
                 analyzer_factory: AnalyzerFactory = CredibilityAnalyzer.from_config):
        """
        Initialize container.

        Args:
            config_loader: Returns the application configuration
            analyzer_factory: Builds an analyzer from the configuration
        """
        self._config_loader = config_loader
        self._analyzer_factory = analyzer_factory
        self._config: Optional[Config] = None
        self._security_validator: Optional[SecurityValidator] = None
        self._lock = threading.RLock()

    @property
    def config(self) -> Config:
        """Configuration, loaded on first use."""
        with self._lock:
            if self._config is None:
                self._config = self._config_loader()
            return self._config

    @property
    def security_validator(self) -> SecurityValidator:
        """URL validator honouring the configured length limit."""
        with self._lock:
            if self._security_validator is None:
                self._security_validator = SecurityValidator(
                    max_url_length=self.config.app.max_url_length
                )
            return self._security_validator

    def create_analyzer(self) -> CredibilityAnalyzer:
        """New analyzer for a single analysis."""
        analyzer = self._analyzer_factory(self.config)
        logger.debug(f"Created analyzer with {len(analyzer.detectors)} detectors")
        return analyzer

    def use_analyzer_factory(self, factory: AnalyzerFactory) -> None:
        """Replace how analyzers are built."""
        self._analyzer_factory = factory


# Global container instance
_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Get global container instance (thread-safe singleton)."""
    global _container
    if _container is None:
        with _container_lock:
            if _container is None:
                _container = Container()
    return _container


def reset_container() -> None:
    """Reset global container (useful for testing)."""
    global _container
    with _container_lock:
        _container = None
