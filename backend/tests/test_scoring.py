from __future__ import annotations

from app.schemas.common import ScoreFormula
from app.services.reporting.records import ScoredValue
from app.services.reporting.scoring import (
    calculate_average,
    calculate_weighted_score,
    round_half_away_from_zero,
    score_bucket,
)


def test_weighted_score_matches_category_weights() -> None:
    scores = [ScoredValue(value=4, weight=0.7), ScoredValue(value=5, weight=0.3)]

    assert calculate_weighted_score(scores) == 86


def test_weighted_score_is_zero_for_empty_or_weightless_buckets() -> None:
    assert calculate_weighted_score([]) == 0
    assert calculate_weighted_score([ScoredValue(value=5, weight=0.0), ScoredValue(value=3, weight=0.0)]) == 0


def test_weighted_score_stays_within_percentage_bounds() -> None:
    weights = [0.0, 0.1, 0.5, 1.0, 2.5]
    for value in range(1, 6):
        for weight in weights:
            for other in range(1, 6):
                score = calculate_weighted_score(
                    [ScoredValue(value=value, weight=weight), ScoredValue(value=other, weight=1.0)]
                )
                assert isinstance(score, int)
                assert 0 <= score <= 100


def test_weighted_score_full_marks() -> None:
    assert calculate_weighted_score([ScoredValue(value=5, weight=1.2)] * 3) == 100
    assert calculate_weighted_score([ScoredValue(value=1, weight=1.0)]) == 20


def test_round_half_away_from_zero() -> None:
    assert round_half_away_from_zero(2.5) == 3
    assert round_half_away_from_zero(3.5) == 4
    assert round_half_away_from_zero(-2.5) == -3
    assert round_half_away_from_zero(2.49) == 2
    assert round_half_away_from_zero(0.0) == 0


def test_average_truncates() -> None:
    assert calculate_average([4, 5, 4]) == 4
    assert calculate_average([5, 4]) == 4
    assert calculate_average([3]) == 3
    assert calculate_average([]) == 0


def test_score_bucket_dispatches_on_formula() -> None:
    scores = [ScoredValue(value=4, weight=0.7), ScoredValue(value=5, weight=0.3)]

    assert score_bucket(scores, ScoreFormula.weighted) == 86
    assert score_bucket(scores, ScoreFormula.average) == 4
    assert score_bucket([], ScoreFormula.average) == 0
