from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from app.schemas.common import ScoreKind


@dataclass(slots=True, frozen=True)
class RatingRow:
    day: date
    category: str
    value: int
    weight: float
    total: int = 1


@dataclass(slots=True, frozen=True)
class ScoredValue:
    value: int
    weight: float


@dataclass(slots=True, frozen=True)
class ScoreRecord:
    kind: ScoreKind
    label: str
    spelling: int
    grammar: int
    gdpr: int
    randomness: int
