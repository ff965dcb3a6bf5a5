#!/usr/bin/env python3
"""
CLI Router for the credibility checker.

Parses the command line and dispatches to command classes.
"""

import argparse
import logging
import sys
from typing import Optional, List

from commands import get_command, COMMANDS
from credcheck.config import get_config_manager
from credcheck.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class CLIRouter:
    """
    CLI router for credibility analysis commands.

    Command structure:
    - python run.py analyze url https://example.com/noticia
    - python run.py analyze url https://example.com/noticia --json
    - python run.py analyze batch urls.txt
    """

    def __init__(self):
        """Initialize CLI router."""
        self._command_parsers = {}
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create the main argument parser."""
        parser = argparse.ArgumentParser(
            description="News article credibility checker",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=self._get_examples_text()
        )

        subparsers = parser.add_subparsers(
            dest='command',
            help='Available commands',
            metavar='{command}'
        )

        self._add_analyze_parser(subparsers)

        return parser

    def _add_analyze_parser(self, subparsers):
        """Add analyze command parser."""
        analyze_parser = subparsers.add_parser(
            'analyze',
            help='Analyze the credibility of article URLs'
        )

        self._command_parsers['analyze'] = analyze_parser

        analyze_subparsers = analyze_parser.add_subparsers(
            dest='subcommand',
            help='Analyze operations',
            metavar='{url,batch}'
        )

        url_parser = analyze_subparsers.add_parser('url', help='Analyze a single article URL')
        url_parser.add_argument('url', help='Absolute http(s) URL of the article')
        url_parser.add_argument('--json', action='store_true', help='Print the result as JSON')
        url_parser.add_argument('--verbose', action='store_true', help='Verbose output')

        batch_parser = analyze_subparsers.add_parser('batch', help='Analyze URLs listed in a file (one per line)')
        batch_parser.add_argument('file', help='Path to a file with one URL per line')
        batch_parser.add_argument('--json', action='store_true', help='Print the results as a JSON list')
        batch_parser.add_argument('--verbose', action='store_true', help='Verbose output')

    def _get_examples_text(self) -> str:
        """Get examples text for help."""
        return """
Examples:
  python run.py analyze url https://g1.globo.com/politica/noticia/exemplo.ghtml
  python run.py analyze url https://example.com/artigo --json
  python run.py analyze batch urls.txt --verbose

"""

    def route_command(self, args: Optional[List[str]] = None) -> int:
        """
        Route command to appropriate handler.

        Args:
            args: Command line arguments (uses sys.argv if None)

        Returns:
            Exit code
        """
        try:
            if args is None:
                args = sys.argv[1:]

            parsed_args = self.parser.parse_args(args)

            if not parsed_args.command:
                self.parser.print_help()
                return 1

            if getattr(parsed_args, 'verbose', False):
                root_logger = logging.getLogger()
                root_logger.setLevel(logging.DEBUG)
                for handler in root_logger.handlers:
                    handler.setLevel(logging.DEBUG)

            return self._handle_command(parsed_args)

        except SystemExit as e:
            # argparse calls sys.exit() on error or help
            return e.code if e.code is not None else 0
        except Exception as e:
            logger.error(f"CLI routing error: {e}", exc_info=True)
            return 1

    def _handle_command(self, args: argparse.Namespace) -> int:
        """Handle command structure."""
        logger.debug(f"Handling command: {args.command}")

        if args.command not in COMMANDS:
            available = ', '.join(COMMANDS.keys())
            logger.error(f"Unknown command '{args.command}'. Available: {available}")
            return 1

        subcommand = getattr(args, 'subcommand', None)
        if not subcommand:
            logger.error(f"No subcommand specified for '{args.command}'")
            self._command_parsers[args.command].print_help()
            return 1

        try:
            command = get_command(args.command)
            return command.execute(subcommand, args)
        except Exception as e:
            logger.error(f"Error executing {args.command} {subcommand}: {e}", exc_info=True)
            return 1


def main(args: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Args:
        args: Command line arguments (uses sys.argv if None)

    Returns:
        Exit code
    """
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        get_config_manager().update_logging()
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 78

    router = CLIRouter()
    return router.route_command(args)


if __name__ == '__main__':
    exit_code = main()
    sys.exit(exit_code)
