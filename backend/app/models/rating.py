from __future__ import annotations

from sqlalchemy import ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Rating(Base):
    __tablename__ = 'ratings'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    ticket_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    reviewer_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    reviewee_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    rating_category_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey('rating_categories.id', ondelete='CASCADE'),
        nullable=False,
    )
    # stored as 'YYYY-MM-DDTHH:MM:SS' text, compared lexicographically
    created_at: Mapped[str] = mapped_column(String(19), nullable=False)

    __table_args__ = (
        Index('ix_ratings_created_at', 'created_at'),
        Index('ix_ratings_rating_category_id', 'rating_category_id'),
    )
