#!/usr/bin/env python3
"""
Credibility analyzer.

Fetches one page, runs every detector and narrative check against the
parsed document, scores the indicators and assembles the result record.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional

from ..config import Config, get_config
from ..content.document import ArticleDocument
from ..content.fetcher import ContentFetcher
from ..exceptions import AnalysisFailedError, ConfigurationError, FetchError, InvalidURLError
from ..models.analysis import AnalysisResult
from .detectors import Detector, default_detectors, sensationalist_words_in
from .findings import FindingCheck, default_finding_checks, generate_findings
from .scoring import calculate_trust_score, get_trust_level

logger = logging.getLogger(__name__)


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a Z suffix."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class CredibilityAnalyzer:
    """Runs the fetch, detect, score and assemble pipeline for single URLs."""

    def __init__(self,
                 fetcher: Optional[ContentFetcher] = None,
                 detectors: Optional[List[Detector]] = None,
                 finding_checks: Optional[List[FindingCheck]] = None,
                 max_sensationalist_words: int = 10,
                 clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc)):
        """
        Initialize analyzer.

        Args:
            fetcher: Page fetcher (a default ContentFetcher if None)
            detectors: Scored checks, in output order
            finding_checks: Narrative checks, in output order
            max_sensationalist_words: Cap on reported sensationalist words
            clock: Source of the analysis timestamp

        Raises:
            ConfigurationError: If the detectors carry no weight at all
        """
        self.fetcher = fetcher or ContentFetcher()
        self.detectors = list(detectors) if detectors is not None else default_detectors()
        self.finding_checks = list(finding_checks) if finding_checks is not None else default_finding_checks()
        self.max_sensationalist_words = max_sensationalist_words
        self.clock = clock

        if sum(detector.weight for detector in self.detectors) <= 0:
            raise ConfigurationError('detectors', "total indicator weight must be greater than zero")

    @classmethod
    def from_config(cls, config: Config) -> 'CredibilityAnalyzer':
        """Build an analyzer using application configuration."""
        fetcher = ContentFetcher(
            timeout=config.app.fetch_timeout,
            user_agent=config.app.fetch_user_agent
        )
        return cls(fetcher=fetcher, max_sensationalist_words=config.app.max_sensationalist_words)

    def analyze(self, url: str) -> AnalysisResult:
        """
        Analyze the page at ``url``.

        Args:
            url: Absolute URL, already validated by the caller

        Returns:
            Complete analysis result

        Raises:
            AnalysisFailedError: If the page could not be fetched
        """
        logger.info(f"Analyzing {url}")
        try:
            html = self.fetcher.fetch_html(url)
        except (FetchError, InvalidURLError) as e:
            logger.error(f"Analysis of {url} failed: {e.message}")
            raise AnalysisFailedError(url, e) from e

        return self.analyze_html(url, html)

    def analyze_html(self, url: str, html: str) -> AnalysisResult:
        """Run the parse, detect, score and assemble stages on fetched HTML."""
        document = ArticleDocument.from_html(html)

        indicators = [detector.detect(document) for detector in self.detectors]
        trust_score = calculate_trust_score(indicators)
        trust_level = get_trust_level(trust_score)

        sensationalist_words = sensationalist_words_in(document)
        findings = generate_findings(document, self.finding_checks)

        result = AnalysisResult(
            url=url,
            trust_score=trust_score,
            trust_level=trust_level,
            indicators=indicators,
            sensationalist_words=sensationalist_words[:self.max_sensationalist_words],
            detailed_findings=findings,
            analyzed_at=utc_timestamp(self.clock())
        )

        logger.info(
            f"Analysis of {url} complete: score {trust_score} ({trust_level.value}), "
            f"{sum(1 for i in indicators if i.present)}/{len(indicators)} indicators present"
        )
        return result


def analyze(url: str) -> AnalysisResult:
    """Analyze ``url`` with the application configuration."""
    return CredibilityAnalyzer.from_config(get_config()).analyze(url)
