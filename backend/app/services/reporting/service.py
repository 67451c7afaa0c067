from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Sequence

from app.core.config import Settings
from app.schemas.common import Granularity, ScoreFormula, ScoreKind
from app.services.reporting.accumulator import add_total, new_count_accumulator
from app.services.reporting.bucketing import DEFAULT_WEEK_LENGTH, bucket_daily, bucket_weekly
from app.services.reporting.periods import MIN_WINDOW_DAYS, classify_period
from app.services.reporting.records import RatingRow, ScoreRecord


@dataclass(slots=True, frozen=True)
class ReportPolicy:
    formula: ScoreFormula = ScoreFormula.weighted
    min_window_days: int = MIN_WINDOW_DAYS
    week_length: int = DEFAULT_WEEK_LENGTH
    keep_single_day_tail: bool = False

    @classmethod
    def from_settings(cls, settings: Settings) -> ReportPolicy:
        return cls(
            formula=ScoreFormula(settings.report_score_formula),
            min_window_days=settings.min_window_days,
            week_length=settings.weekly_bucket_days,
            keep_single_day_tail=settings.weekly_keep_single_day_tail,
        )


@dataclass(slots=True)
class AggregatedReport:
    granularity: Granularity
    records: list[ScoreRecord]


def build_totals_record(rows: Sequence[RatingRow]) -> ScoreRecord:
    totals = new_count_accumulator()
    for row in rows:
        totals.update(row, add_total)
    return ScoreRecord(
        kind=ScoreKind.totals,
        label='',
        spelling=totals.spelling,
        grammar=totals.grammar,
        gdpr=totals.gdpr,
        randomness=totals.randomness,
    )


def build_daily_report(rows: Sequence[RatingRow], policy: ReportPolicy | None = None) -> list[ScoreRecord]:
    policy = policy or ReportPolicy()
    return [build_totals_record(rows), *bucket_daily(rows, formula=policy.formula)]


def build_weekly_report(rows: Sequence[RatingRow], policy: ReportPolicy | None = None) -> list[ScoreRecord]:
    policy = policy or ReportPolicy()
    buckets = bucket_weekly(
        rows,
        formula=policy.formula,
        week_length=policy.week_length,
        keep_single_day_tail=policy.keep_single_day_tail,
    )
    return [build_totals_record(rows), *buckets]


def build_report(
    rows: Sequence[RatingRow],
    *,
    start: datetime,
    end: datetime,
    policy: ReportPolicy | None = None,
) -> AggregatedReport:
    policy = policy or ReportPolicy()
    granularity = classify_period(start, end, min_window_days=policy.min_window_days)
    if granularity is Granularity.daily:
        records = build_daily_report(rows, policy)
    else:
        records = build_weekly_report(rows, policy)
    return AggregatedReport(granularity=granularity, records=records)
