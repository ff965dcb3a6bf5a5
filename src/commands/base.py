#!/usr/bin/env python3
"""
Base command class for the command endpoints.

Commands name their subcommands, get services from the container and
turn exceptions into exit codes.
"""

import logging
from argparse import Namespace
from typing import Tuple

from credcheck.container import Container, get_container
from credcheck.exceptions import AnalysisFailedError, ConfigurationError, InvalidURLError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_MISSING_FILE = 2
EXIT_INVALID_INPUT = 22
EXIT_BAD_CONFIG = 78


class BaseCommand:
    """
    Base class for all command endpoints.

    Subclasses list their subcommands in ``subcommands`` and implement
    one method per name taking the parsed arguments.
    """

    name: str = ""
    subcommands: Tuple[str, ...] = ()

    def __init__(self, container: Container = None):
        """
        Initialize base command.

        Args:
            container: Optional container instance. If None, uses global container.
        """
        self.logger = logging.getLogger(self.__class__.__name__)
        self.container = container or get_container()

    def execute(self, subcommand: str, args: Namespace) -> int:
        """
        Run one subcommand.

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        if subcommand not in self.subcommands:
            self.logger.error(
                f"Unknown subcommand '{subcommand}'. Available: {', '.join(self.subcommands)}"
            )
            return EXIT_FAILURE

        try:
            return getattr(self, subcommand)(args)
        except Exception as e:
            return self.handle_error(e, f"{self.name} {subcommand}")

    def handle_error(self, error: Exception, context: str = "") -> int:
        """Log an error and map it to an exit code."""
        error_msg = f"{context}: {error}" if context else str(error)

        if isinstance(error, (InvalidURLError, AnalysisFailedError, ConfigurationError, FileNotFoundError)):
            self.logger.error(error_msg)
        else:
            self.logger.error(error_msg, exc_info=True)

        if isinstance(error, FileNotFoundError):
            return EXIT_MISSING_FILE
        if isinstance(error, (InvalidURLError, ValueError)):
            return EXIT_INVALID_INPUT
        if isinstance(error, ConfigurationError):
            return EXIT_BAD_CONFIG
        return EXIT_FAILURE
