from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from app.schemas.common import Granularity, ScoreFormula, ScoreKind


class ScoreOut(BaseModel):
    type: ScoreKind
    value: str
    spelling: int
    grammar: int
    gdpr: int
    randomness: int


class OverallScoreResponse(BaseModel):
    start_date: datetime
    end_date: datetime
    overall_score: float


class AggregatedScoresResponse(BaseModel):
    start_date: datetime
    end_date: datetime
    granularity: Granularity
    scores: list[ScoreOut]


class CategoriesResponse(BaseModel):
    categories: list[str]
    score_formula: ScoreFormula
    min_window_days: int
    weekly_bucket_days: int
