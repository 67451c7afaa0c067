from __future__ import annotations

import math
from typing import Iterable, Sequence

from app.schemas.common import ScoreFormula
from app.services.reporting.records import ScoredValue

MAX_RATING = 5.0


def round_half_away_from_zero(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def calculate_weighted_score(scores: Iterable[ScoredValue]) -> int:
    weight_sum = 0.0
    value_sum = 0.0
    for score in scores:
        weight_sum += score.weight
        value_sum += (score.value / MAX_RATING) * score.weight
    if value_sum == 0 or weight_sum == 0:
        return 0
    return round_half_away_from_zero(100 * (value_sum / weight_sum))


def calculate_average(values: Sequence[int]) -> int:
    if not values:
        return 0
    return sum(values) // len(values)


def score_bucket(scores: Sequence[ScoredValue], formula: ScoreFormula) -> int:
    if formula is ScoreFormula.average:
        return calculate_average([score.value for score in scores])
    return calculate_weighted_score(scores)
