#!/usr/bin/env python3
"""
Analyze command for checking the credibility of article URLs.
"""

import json
import logging
from argparse import Namespace
from pathlib import Path
from typing import Any, Dict, List

from .base import EXIT_FAILURE, EXIT_OK, BaseCommand
from credcheck.exceptions import AnalysisFailedError, InvalidURLError
from credcheck.formatters import format_analysis_result, result_to_json
from credcheck.json_validator import validate_result_payload

logger = logging.getLogger(__name__)


class AnalyzeCommand(BaseCommand):
    """Analyze the credibility of news article URLs."""

    name = "analyze"
    subcommands = ("url", "batch")

    def url(self, args: Namespace) -> int:
        """Analyze a single URL."""
        url = self.container.security_validator.validate_url(args.url)
        result = self.container.create_analyzer().analyze(url)
        validate_result_payload(result.to_dict())

        if getattr(args, 'json', False):
            print(result_to_json(result))
        else:
            print(format_analysis_result(result))
        return EXIT_OK

    def batch(self, args: Namespace) -> int:
        """Analyze every URL listed in a file, one per line."""
        urls = self._read_url_file(Path(args.file))
        if not urls:
            self.logger.warning(f"No URLs found in {args.file}")
            return EXIT_OK

        outputs: List[Dict[str, Any]] = []
        failed = 0

        for i, raw_url in enumerate(urls, 1):
            self.logger.info(f"Analyzing {i}/{len(urls)}: {raw_url}")
            try:
                url = self.container.security_validator.validate_url(raw_url)
                result = self.container.create_analyzer().analyze(url)
            except (InvalidURLError, AnalysisFailedError) as e:
                failed += 1
                self.logger.warning(f"Skipping {raw_url}: {e.message}")
                outputs.append({'url': raw_url, 'error': e.message})
                if not getattr(args, 'json', False):
                    print(f"\n❌ {raw_url}\n   {e.message}")
                continue

            payload = validate_result_payload(result.to_dict())
            outputs.append(payload)
            if not getattr(args, 'json', False):
                print(format_analysis_result(result))

        if getattr(args, 'json', False):
            print(json.dumps(outputs, ensure_ascii=False, indent=2))

        self.logger.info(f"Batch completed: {len(urls) - failed} analyzed, {failed} failed")
        return EXIT_OK if failed == 0 else EXIT_FAILURE

    @staticmethod
    def _read_url_file(path: Path) -> List[str]:
        """Read URLs, skipping blank lines and # comments."""
        with open(path, 'r', encoding='utf-8') as f:
            lines = [line.strip() for line in f]
        return [line for line in lines if line and not line.startswith('#')]
