from __future__ import annotations

from datetime import datetime, timedelta

from app.schemas.common import Granularity

MIN_WINDOW_DAYS = 28


def within_calendar_month(start: datetime, end: datetime) -> bool:
    return start.year == end.year and start.month == end.month


def within_min_window(start: datetime, end: datetime, *, days: int = MIN_WINDOW_DAYS) -> bool:
    return start > end - timedelta(days=days)


def classify_period(start: datetime, end: datetime, *, min_window_days: int = MIN_WINDOW_DAYS) -> Granularity:
    if within_min_window(start, end, days=min_window_days) or within_calendar_month(start, end):
        return Granularity.daily
    return Granularity.weekly
