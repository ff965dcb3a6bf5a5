#!/usr/bin/env python3
"""
Wire-contract validation for serialized analysis results.

Checks a result payload against the JSON shape consumed by API and UI
layers before it leaves the process.
"""

import logging
from typing import Any, Dict, List

from dateutil import parser as date_parser

from .models.analysis import Impact, TrustLevel

logger = logging.getLogger(__name__)

RESULT_FIELDS = {
    'url', 'trustScore', 'trustLevel', 'indicators',
    'sensationalistWords', 'detailedFindings', 'analyzedAt',
}
INDICATOR_FIELDS = {'name', 'present', 'description', 'weight'}
FINDING_FIELDS = {'category', 'finding', 'impact'}

TRUST_LEVELS = {level.value for level in TrustLevel}
IMPACTS = {impact.value for impact in Impact}


class ResultValidationError(Exception):
    """Raised when a payload does not match the result contract."""

    def __init__(self, errors: List[str]):
        super().__init__(f"Result validation failed: {'; '.join(errors)}")
        self.errors = errors


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_fields(data: Any, expected: set, where: str, errors: List[str]) -> bool:
    if not isinstance(data, dict):
        errors.append(f"{where} must be an object")
        return False
    missing = expected - data.keys()
    extra = data.keys() - expected
    if missing:
        errors.append(f"{where} missing fields: {', '.join(sorted(missing))}")
    if extra:
        errors.append(f"{where} has unexpected fields: {', '.join(sorted(extra))}")
    return not missing


def validate_result_payload(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate a serialized AnalysisResult.

    Args:
        payload: Output of ``AnalysisResult.to_dict()`` or equivalent JSON

    Returns:
        The payload unchanged

    Raises:
        ResultValidationError: Listing every violation found
    """
    errors: List[str] = []
    if not _check_fields(payload, RESULT_FIELDS, "result", errors):
        raise ResultValidationError(errors)

    if not isinstance(payload['url'], str) or not payload['url']:
        errors.append("url must be a non-empty string")

    score = payload['trustScore']
    if not _is_int(score) or not 0 <= score <= 100:
        errors.append("trustScore must be an integer between 0 and 100")

    if payload['trustLevel'] not in TRUST_LEVELS:
        errors.append(f"trustLevel must be one of: {', '.join(sorted(TRUST_LEVELS))}")

    indicators = payload['indicators']
    if not isinstance(indicators, list):
        errors.append("indicators must be a list")
    else:
        for index, indicator in enumerate(indicators):
            where = f"indicators[{index}]"
            if not _check_fields(indicator, INDICATOR_FIELDS, where, errors):
                continue
            if not isinstance(indicator['present'], bool):
                errors.append(f"{where}.present must be a boolean")
            if not _is_int(indicator['weight']) or indicator['weight'] <= 0:
                errors.append(f"{where}.weight must be a positive integer")
            if not isinstance(indicator['name'], str) or not isinstance(indicator['description'], str):
                errors.append(f"{where}.name and description must be strings")

    words = payload['sensationalistWords']
    if not isinstance(words, list) or not all(isinstance(word, str) for word in words):
        errors.append("sensationalistWords must be a list of strings")
    elif len(set(words)) != len(words):
        errors.append("sensationalistWords must not contain duplicates")

    findings = payload['detailedFindings']
    if not isinstance(findings, list):
        errors.append("detailedFindings must be a list")
    else:
        for index, finding in enumerate(findings):
            where = f"detailedFindings[{index}]"
            if not _check_fields(finding, FINDING_FIELDS, where, errors):
                continue
            if finding['impact'] not in IMPACTS:
                errors.append(f"{where}.impact must be one of: {', '.join(sorted(IMPACTS))}")

    analyzed_at = payload['analyzedAt']
    try:
        if not isinstance(analyzed_at, str):
            raise ValueError(analyzed_at)
        date_parser.isoparse(analyzed_at)
    except ValueError:
        errors.append("analyzedAt must be an ISO-8601 timestamp")

    if errors:
        logger.error(f"Result payload failed validation with {len(errors)} errors")
        raise ResultValidationError(errors)

    return payload
