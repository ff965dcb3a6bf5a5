#!/usr/bin/env python3
"""
Trust score aggregation.

Pure functions over weighted boolean indicators; independent of HTML
parsing so the scoring rule can be tested on its own.
"""

from typing import Iterable

from ..exceptions import ConfigurationError
from ..models.analysis import TrustLevel

TRUSTED_THRESHOLD = 70
QUESTIONABLE_THRESHOLD = 40


def calculate_trust_score(indicators: Iterable) -> int:
    """
    Weighted share of present indicators on a 0-100 scale.

    Ties at .5 round up. The division is done in integers so the
    boundary is exact.

    Args:
        indicators: Objects exposing ``present`` and ``weight``

    Returns:
        Integer score between 0 and 100

    Raises:
        ConfigurationError: If the total weight is zero
    """
    total_weight = 0
    earned_weight = 0

    for indicator in indicators:
        total_weight += indicator.weight
        if indicator.present:
            earned_weight += indicator.weight

    if total_weight <= 0:
        raise ConfigurationError('indicators', "total indicator weight must be greater than zero")

    # floor(100 * earned / total + 1/2)
    return (200 * earned_weight + total_weight) // (2 * total_weight)


def get_trust_level(score: int) -> TrustLevel:
    """Map a score to its trust bucket (lower bounds inclusive)."""
    if score >= TRUSTED_THRESHOLD:
        return TrustLevel.TRUSTED
    if score >= QUESTIONABLE_THRESHOLD:
        return TrustLevel.QUESTIONABLE
    return TrustLevel.SUSPICIOUS
