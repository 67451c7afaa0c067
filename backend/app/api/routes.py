from __future__ import annotations

from fastapi import APIRouter

from app.api.routes_scores import router as scores_router
from app.core.config import get_settings
from app.schemas.api import CategoriesResponse
from app.schemas.common import Category, ScoreFormula

router = APIRouter(prefix='/api', tags=['api'])
settings = get_settings()


@router.get('/categories', response_model=CategoriesResponse)
def list_categories() -> CategoriesResponse:
    return CategoriesResponse(
        categories=[category.value for category in Category],
        score_formula=ScoreFormula(settings.report_score_formula),
        min_window_days=settings.min_window_days,
        weekly_bucket_days=settings.weekly_bucket_days,
    )


router.include_router(scores_router)
