from __future__ import annotations

from datetime import date
from typing import Iterable

from app.schemas.common import ScoreFormula, ScoreKind
from app.services.reporting.accumulator import CategoryAccumulator, collect_pair, new_pair_accumulator
from app.services.reporting.records import RatingRow, ScoreRecord, ScoredValue
from app.services.reporting.scoring import score_bucket

DEFAULT_WEEK_LENGTH = 7

PairAccumulator = CategoryAccumulator[list[ScoredValue]]


def close_bucket(
    bucket: PairAccumulator,
    *,
    kind: ScoreKind,
    label: str,
    formula: ScoreFormula,
) -> ScoreRecord:
    spelling, grammar, gdpr, randomness = bucket.map(lambda scores: score_bucket(scores, formula))
    return ScoreRecord(
        kind=kind,
        label=label,
        spelling=spelling,
        grammar=grammar,
        gdpr=gdpr,
        randomness=randomness,
    )


class DailyBucketer:
    """Groups consecutive rows sharing a ``day`` into one bucket each.

    State is the open bucket's day plus its accumulator; a row with a new day
    closes the open bucket before opening the next one.
    """

    def __init__(self, formula: ScoreFormula = ScoreFormula.weighted) -> None:
        self._formula = formula
        self._day: date | None = None
        self._bucket: PairAccumulator | None = None
        self._records: list[ScoreRecord] = []

    def feed(self, row: RatingRow) -> None:
        bucket = self._bucket
        if bucket is None or row.day != self._day:
            self._close()
            bucket = self._bucket = new_pair_accumulator()
            self._day = row.day
        bucket.update(row, collect_pair)

    def finish(self) -> list[ScoreRecord]:
        self._close()
        return list(self._records)

    def _close(self) -> None:
        if self._bucket is None or self._day is None:
            return
        self._records.append(
            close_bucket(
                self._bucket,
                kind=ScoreKind.daily,
                label=self._day.isoformat(),
                formula=self._formula,
            )
        )
        self._bucket = None
        self._day = None


class WeeklyBucketer:
    """Groups rows into runs of up to ``week_length`` distinct observed days.

    Buckets follow the row stream rather than the calendar: the distinct-day
    counter only advances when a row's day differs from the previous row's.
    A trailing bucket covering a single day is dropped unless
    ``keep_single_day_tail`` is set.
    """

    def __init__(
        self,
        formula: ScoreFormula = ScoreFormula.weighted,
        *,
        week_length: int = DEFAULT_WEEK_LENGTH,
        keep_single_day_tail: bool = False,
    ) -> None:
        self._formula = formula
        self._week_length = week_length
        self._keep_single_day_tail = keep_single_day_tail
        self._bucket: PairAccumulator | None = None
        self._previous_day: date | None = None
        self._day_counter = 0
        self._week_number = 1
        self._records: list[ScoreRecord] = []

    def feed(self, row: RatingRow) -> None:
        bucket = self._bucket
        if bucket is None:
            bucket = self._open()
        elif row.day != self._previous_day:
            self._day_counter += 1
            if self._day_counter > self._week_length:
                self._close()
                bucket = self._open()
        bucket.update(row, collect_pair)
        self._previous_day = row.day

    def finish(self) -> list[ScoreRecord]:
        if self._bucket is not None and (self._day_counter > 1 or self._keep_single_day_tail):
            self._close()
        self._bucket = None
        return list(self._records)

    def _open(self) -> PairAccumulator:
        self._bucket = new_pair_accumulator()
        self._day_counter = 1
        return self._bucket

    def _close(self) -> None:
        if self._bucket is None:
            return
        self._records.append(
            close_bucket(
                self._bucket,
                kind=ScoreKind.weekly,
                label=f'Week {self._week_number}',
                formula=self._formula,
            )
        )
        self._week_number += 1
        self._bucket = None


def bucket_daily(rows: Iterable[RatingRow], *, formula: ScoreFormula = ScoreFormula.weighted) -> list[ScoreRecord]:
    bucketer = DailyBucketer(formula)
    for row in rows:
        bucketer.feed(row)
    return bucketer.finish()


def bucket_weekly(
    rows: Iterable[RatingRow],
    *,
    formula: ScoreFormula = ScoreFormula.weighted,
    week_length: int = DEFAULT_WEEK_LENGTH,
    keep_single_day_tail: bool = False,
) -> list[ScoreRecord]:
    bucketer = WeeklyBucketer(
        formula,
        week_length=week_length,
        keep_single_day_tail=keep_single_day_tail,
    )
    for row in rows:
        bucketer.feed(row)
    return bucketer.finish()
