from __future__ import annotations

from datetime import datetime, timezone

QUERY_TIMESTAMP_FORMAT = '%Y-%m-%dT%H:%M:%S'


def to_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_query_timestamp(dt: datetime) -> str:
    return to_utc(dt).strftime(QUERY_TIMESTAMP_FORMAT)
