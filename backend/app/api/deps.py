from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.db.session import SessionLocal
from app.services.ratings_repository import RatingsRepository
from app.services.ratings_service import RatingsService


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_ratings_repository(db: Session = Depends(get_db)) -> RatingsRepository:
    return RatingsRepository(db)


def get_ratings_service(
    repository: RatingsRepository = Depends(get_ratings_repository),
) -> RatingsService:
    return RatingsService(settings=get_settings(), repository=repository)
