from itertools import product

import pytest

from credcheck.analysis.scoring import calculate_trust_score, get_trust_level
from credcheck.exceptions import ConfigurationError
from credcheck.models.analysis import AnalysisIndicator, TrustLevel

DEFAULT_WEIGHTS = [25, 20, 30, 25]


def make_indicators(flags, weights=DEFAULT_WEIGHTS):
    return [
        AnalysisIndicator(name=f"check-{i}", present=flag, description="", weight=weight)
        for i, (flag, weight) in enumerate(zip(flags, weights))
    ]


def test_all_present_scores_100():
    assert calculate_trust_score(make_indicators([True] * 4)) == 100


def test_all_absent_scores_0():
    assert calculate_trust_score(make_indicators([False] * 4)) == 0


@pytest.mark.parametrize("flags,expected", [
    ([False, False, True, False], 30),   # sources only
    ([True, True, False, False], 45),    # author + date
    ([True, False, True, True], 80),
    ([False, True, False, True], 45),
])
def test_weighted_share(flags, expected):
    assert calculate_trust_score(make_indicators(flags)) == expected


def test_every_default_combination_stays_in_range():
    for flags in product([True, False], repeat=4):
        score = calculate_trust_score(make_indicators(flags))
        assert 0 <= score <= 100
        assert (score == 100) == all(flags)
        assert (score == 0) == (not any(flags))


@pytest.mark.parametrize("weights,expected", [
    ([1, 199], 1),    # 0.5 rounds up
    ([3, 197], 2),    # 1.5 rounds up
    ([5, 195], 3),    # 2.5 rounds up
    ([1, 2], 33),     # 33.33 rounds down
    ([2, 1], 67),     # 66.67 rounds up
])
def test_half_values_round_up(weights, expected):
    indicators = make_indicators([True, False], weights)
    assert calculate_trust_score(indicators) == expected


def test_scorer_accepts_arbitrary_weight_sets():
    indicators = make_indicators([True, False, True], [7, 7, 6])
    assert calculate_trust_score(indicators) == 65


def test_scorer_accepts_plain_present_weight_pairs():
    class Pair:
        def __init__(self, present, weight):
            self.present = present
            self.weight = weight

    assert calculate_trust_score([Pair(True, 3), Pair(False, 1)]) == 75


def test_empty_indicator_set_is_a_configuration_error():
    with pytest.raises(ConfigurationError) as exc_info:
        calculate_trust_score([])
    assert exc_info.value.context["config_key"] == "indicators"


def test_zero_total_weight_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        calculate_trust_score(make_indicators([True, True], [0, 0]))


@pytest.mark.parametrize("score,level", [
    (0, TrustLevel.SUSPICIOUS),
    (39, TrustLevel.SUSPICIOUS),
    (40, TrustLevel.QUESTIONABLE),
    (69, TrustLevel.QUESTIONABLE),
    (70, TrustLevel.TRUSTED),
    (100, TrustLevel.TRUSTED),
])
def test_level_boundaries(score, level):
    assert get_trust_level(score) is level


def test_level_mapping_is_total_and_monotonic():
    order = [TrustLevel.SUSPICIOUS, TrustLevel.QUESTIONABLE, TrustLevel.TRUSTED]
    levels = [get_trust_level(score) for score in range(101)]

    assert all(level in order for level in levels)
    ranks = [order.index(level) for level in levels]
    assert ranks == sorted(ranks)
    assert levels.count(TrustLevel.SUSPICIOUS) == 40
    assert levels.count(TrustLevel.QUESTIONABLE) == 30
    assert levels.count(TrustLevel.TRUSTED) == 31
