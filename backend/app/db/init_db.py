from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

import app.models  # noqa: F401
from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.models.rating_category import RatingCategory
from app.schemas.common import Category

DEFAULT_CATEGORY_WEIGHTS: dict[Category, float] = {
    Category.spelling: 1.0,
    Category.grammar: 0.7,
    Category.gdpr: 1.2,
    Category.randomness: 0.0,
}


def init_db() -> None:
    Base.metadata.create_all(bind=engine)


def seed_categories(session: Session) -> list[RatingCategory]:
    existing = {row.name: row for row in session.execute(select(RatingCategory)).scalars().all()}
    for category, weight in DEFAULT_CATEGORY_WEIGHTS.items():
        if category.value not in existing:
            row = RatingCategory(name=category.value, weight=weight)
            session.add(row)
            existing[category.value] = row
    session.commit()
    return [existing[category.value] for category in Category]


if __name__ == '__main__':
    init_db()
    with SessionLocal() as session:
        seed_categories(session)
