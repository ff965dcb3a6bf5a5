#!/usr/bin/env python3
"""
Centralized Configuration Manager

Provides a single source of truth for application configuration,
including environment variables, defaults, and validation.
"""

import os
import logging
from dataclasses import dataclass, field
from typing import Optional

from .env_loader import load_env_file
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36'


@dataclass
class ApplicationConfig:
    """Core application configuration."""
    # Fetch settings
    fetch_timeout: float = 10.0
    fetch_user_agent: str = DEFAULT_USER_AGENT

    # Result settings
    max_sensationalist_words: int = 10

    # Security settings
    max_url_length: int = 2048

    # Logging
    log_level: str = "INFO"
    verbose_logging: bool = False


@dataclass
class Config:
    """Master configuration container."""
    app: ApplicationConfig = field(default_factory=ApplicationConfig)


class ConfigManager:
    """Manages application configuration with validation and environment loading."""

    def __init__(self, env_file_path: str = ".env", load_env: bool = True):
        """
        Initialize configuration manager.

        Args:
            env_file_path: Path to .env file relative to project root
            load_env: Whether to read the .env file at all
        """
        self._config: Optional[Config] = None
        if load_env:
            load_env_file(env_file_path)

    def get_config(self, force_reload: bool = False) -> Config:
        """
        Get application configuration.

        Args:
            force_reload: Force reloading configuration from environment

        Returns:
            Complete configuration object
        """
        if self._config is None or force_reload:
            self._config = self._build_config()
        return self._config

    def _build_config(self) -> Config:
        """Build configuration from environment variables."""
        app_config = ApplicationConfig(
            fetch_timeout=self._get_number('FETCH_TIMEOUT', '10', float),
            fetch_user_agent=os.getenv('FETCH_USER_AGENT', DEFAULT_USER_AGENT),
            max_sensationalist_words=self._get_number('MAX_SENSATIONALIST_WORDS', '10', int),
            max_url_length=self._get_number('MAX_URL_LENGTH', '2048', int),
            log_level=os.getenv('LOG_LEVEL', 'INFO').upper(),
            verbose_logging=os.getenv('VERBOSE_LOGGING', 'false').lower() == 'true'
        )

        config = Config(app=app_config)
        self._validate_config(config)
        return config

    def _get_number(self, key: str, default: str, cast):
        """Read a numeric environment variable."""
        raw = os.getenv(key, default)
        try:
            return cast(raw)
        except ValueError:
            raise ConfigurationError(key, f"expected a number, got {raw!r}")

    def _validate_config(self, config: Config) -> None:
        """Validate configuration values."""
        if config.app.fetch_timeout <= 0:
            raise ConfigurationError('FETCH_TIMEOUT', "must be greater than 0 seconds")

        if config.app.max_sensationalist_words < 0:
            raise ConfigurationError('MAX_SENSATIONALIST_WORDS', "must not be negative")

        if config.app.max_url_length < 1:
            raise ConfigurationError('MAX_URL_LENGTH', "must be at least 1")

        if not config.app.fetch_user_agent.strip():
            raise ConfigurationError('FETCH_USER_AGENT', "must not be empty")

        valid_log_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if config.app.log_level not in valid_log_levels:
            raise ConfigurationError('LOG_LEVEL', f"must be one of: {', '.join(valid_log_levels)}")

        logger.debug("Configuration validation passed")

    def update_logging(self) -> None:
        """Configure logging based on current configuration."""
        config = self.get_config()

        numeric_level = getattr(logging, config.app.log_level)
        logging.getLogger().setLevel(numeric_level)

        if config.app.verbose_logging:
            format_str = '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'
        else:
            format_str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

        for handler in logging.getLogger().handlers:
            handler.setLevel(numeric_level)
            formatter = logging.Formatter(format_str, datefmt='%Y-%m-%d %H:%M:%S')
            handler.setFormatter(formatter)


# Global configuration manager instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def get_config() -> Config:
    """Get application configuration."""
    return get_config_manager().get_config()


def reset_config() -> None:
    """Reset configuration manager (useful for testing)."""
    global _config_manager
    _config_manager = None
