from __future__ import annotations

from datetime import date

from sqlalchemy import Integer, func, literal, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.rating import Rating
from app.models.rating_category import RatingCategory
from app.services.reporting.records import RatingRow


class DataAccessError(RuntimeError):
    pass


class RatingsRepository:
    """Reads rating rows for a ``[start, end]`` range of query timestamps.

    Bounds are ``YYYY-MM-DDTHH:MM:SS`` strings and are compared against the
    stored ``created_at`` text, both ends inclusive.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def fetch_ratings(self, start: str, end: str) -> list[RatingRow]:
        day = func.date(Rating.created_at).label('day')
        query = (
            select(
                day,
                RatingCategory.name,
                Rating.rating,
                RatingCategory.weight,
                literal(1, type_=Integer).label('total'),
            )
            .join(RatingCategory, RatingCategory.id == Rating.rating_category_id)
            .where(Rating.created_at.between(start, end))
            .order_by(day, Rating.rating_category_id, Rating.id)
        )
        try:
            result = self._session.execute(query).all()
        except SQLAlchemyError as exc:
            raise DataAccessError('failed to fetch ratings') from exc

        return [
            RatingRow(
                day=_coerce_day(row.day),
                category=row.name,
                value=int(row.rating),
                weight=float(row.weight or 0.0),
                total=int(row.total),
            )
            for row in result
        ]

    def fetch_overall_score(self, start: str, end: str) -> float:
        weighted_sum = func.sum((Rating.rating / 5.0) * RatingCategory.weight)
        weight_sum = func.nullif(func.sum(RatingCategory.weight), 0)
        query = (
            select(func.coalesce(100.0 * weighted_sum / weight_sum, 0.0))
            .select_from(Rating)
            .join(RatingCategory, RatingCategory.id == Rating.rating_category_id)
            .where(Rating.created_at.between(start, end))
        )
        try:
            score = self._session.execute(query).scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise DataAccessError('failed to fetch overall score') from exc
        return float(score or 0.0)


def _coerce_day(value: date | str) -> date:
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value))
