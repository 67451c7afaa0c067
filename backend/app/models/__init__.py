from app.models.rating import Rating
from app.models.rating_category import RatingCategory

__all__ = [
    'Rating',
    'RatingCategory',
]
