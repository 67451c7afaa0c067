from __future__ import annotations

from datetime import datetime
import logging

from app.core.config import Settings
from app.schemas.common import UnknownCategoryError
from app.services.ratings_repository import DataAccessError, RatingsRepository
from app.services.reporting.service import AggregatedReport, ReportPolicy, build_report
from app.utils.timezone import format_query_timestamp, to_utc

LOGGER = logging.getLogger(__name__)


class InvalidArgumentError(ValueError):
    pass


class InternalError(RuntimeError):
    pass


class RatingsService:
    def __init__(self, settings: Settings, repository: RatingsRepository) -> None:
        self._repository = repository
        self._policy = ReportPolicy.from_settings(settings)

    def get_overall_score(self, start: datetime | None, end: datetime | None) -> float:
        LOGGER.info('processing overall score request: %s to %s', start, end)
        start_utc, end_utc = validate_range(start, end)
        try:
            return self._repository.fetch_overall_score(
                format_query_timestamp(start_utc),
                format_query_timestamp(end_utc),
            )
        except DataAccessError as exc:
            LOGGER.error('failed to get overall score: %s', exc.__cause__ or exc)
            raise InternalError('failed to retrieve overall score') from exc

    def get_aggregated_scores(self, start: datetime | None, end: datetime | None) -> AggregatedReport:
        LOGGER.info('processing aggregated scores request: %s to %s', start, end)
        start_utc, end_utc = validate_range(start, end)
        try:
            rows = self._repository.fetch_ratings(
                format_query_timestamp(start_utc),
                format_query_timestamp(end_utc),
            )
        except DataAccessError as exc:
            LOGGER.error('failed to get ratings: %s', exc.__cause__ or exc)
            raise InternalError('failed to retrieve ratings') from exc

        try:
            report = build_report(rows, start=start_utc, end=end_utc, policy=self._policy)
        except UnknownCategoryError as exc:
            LOGGER.error('failed to calculate report: %s', exc)
            raise InternalError('failed to calculate report') from exc

        LOGGER.info(
            'generated %s report: %s to %s (%d rows, %d scores)',
            report.granularity.value,
            start_utc,
            end_utc,
            len(rows),
            len(report.records),
        )
        return report


def validate_range(start: datetime | None, end: datetime | None) -> tuple[datetime, datetime]:
    if start is None or end is None:
        LOGGER.warning('invalid date range: %s to %s', start, end)
        raise InvalidArgumentError('start_date and end_date are required')
    start_utc = to_utc(start)
    end_utc = to_utc(end)
    if start_utc > end_utc:
        LOGGER.warning('invalid date range: %s to %s', start_utc, end_utc)
        raise InvalidArgumentError('start_date cannot be after end_date')
    return start_utc, end_utc
