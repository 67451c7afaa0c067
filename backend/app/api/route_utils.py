from __future__ import annotations

from datetime import datetime

from fastapi import HTTPException


def parse_timestamp_param(value: str | None, name: str) -> datetime | None:
    # offsets must arrive URL-encoded (%2B02:00); a bare "+" decodes to a space
    if value is None or not value.strip():
        return None
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f'{name} must be an ISO-8601 timestamp') from exc
