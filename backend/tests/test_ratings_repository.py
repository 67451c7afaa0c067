from __future__ import annotations

from datetime import date

import pytest
from sqlalchemy import create_engine, delete, select
from sqlalchemy.orm import Session

from app.db.session import SessionLocal
from app.models.rating import Rating
from app.models.rating_category import RatingCategory
from app.services.ratings_repository import DataAccessError, RatingsRepository


def _category_ids(session) -> dict[str, int]:  # type: ignore[no-untyped-def]
    return {row.name: row.id for row in session.execute(select(RatingCategory)).scalars().all()}


def _reset_range(session, start: str, end: str) -> None:  # type: ignore[no-untyped-def]
    session.execute(delete(Rating).where(Rating.created_at.between(start, end)))


def test_fetch_ratings_orders_by_day_then_category() -> None:
    with SessionLocal() as session:
        _reset_range(session, '2024-03-01T00:00:00', '2024-03-31T23:59:59')
        ids = _category_ids(session)
        session.add_all(
            [
                Rating(rating=2, rating_category_id=ids['GDPR'], created_at='2024-03-02T09:00:00'),
                Rating(rating=5, rating_category_id=ids['Grammar'], created_at='2024-03-01T15:30:00'),
                Rating(rating=4, rating_category_id=ids['Spelling'], created_at='2024-03-01T08:00:00'),
                Rating(rating=3, rating_category_id=ids['Spelling'], created_at='2024-03-31T23:59:59'),
                Rating(rating=1, rating_category_id=ids['Spelling'], created_at='2024-04-01T00:00:00'),
            ]
        )
        session.commit()

        rows = RatingsRepository(session).fetch_ratings('2024-03-01T00:00:00', '2024-03-31T23:59:59')

    assert [(row.day, row.category, row.value) for row in rows] == [
        (date(2024, 3, 1), 'Spelling', 4),
        (date(2024, 3, 1), 'Grammar', 5),
        (date(2024, 3, 2), 'GDPR', 2),
        (date(2024, 3, 31), 'Spelling', 3),
    ]
    assert rows[0].weight == 1.0
    assert rows[1].weight == 0.7
    assert all(row.total == 1 for row in rows)


def test_fetch_overall_score_weights_by_category() -> None:
    with SessionLocal() as session:
        _reset_range(session, '2024-05-01T00:00:00', '2024-05-31T23:59:59')
        ids = _category_ids(session)
        session.add_all(
            [
                Rating(rating=4, rating_category_id=ids['Spelling'], created_at='2024-05-03T10:00:00'),
                Rating(rating=5, rating_category_id=ids['Grammar'], created_at='2024-05-04T10:00:00'),
            ]
        )
        session.commit()

        repository = RatingsRepository(session)
        score = repository.fetch_overall_score('2024-05-01T00:00:00', '2024-05-31T23:59:59')
        empty = repository.fetch_overall_score('1999-01-01T00:00:00', '1999-01-31T23:59:59')

    assert abs(score - 100 * (0.8 * 1.0 + 1.0 * 0.7) / 1.7) < 1e-6
    assert empty == 0.0


def test_database_errors_are_wrapped_as_data_access_errors() -> None:
    with Session(create_engine('sqlite://')) as session:
        repository = RatingsRepository(session)

        with pytest.raises(DataAccessError):
            repository.fetch_ratings('2024-03-01T00:00:00', '2024-03-31T23:59:59')
        with pytest.raises(DataAccessError):
            repository.fetch_overall_score('2024-03-01T00:00:00', '2024-03-31T23:59:59')
