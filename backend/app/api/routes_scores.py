from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from app.api.deps import get_ratings_service
from app.api.route_utils import parse_timestamp_param
from app.schemas.api import AggregatedScoresResponse, OverallScoreResponse, ScoreOut
from app.services.ratings_service import InternalError, InvalidArgumentError, RatingsService

router = APIRouter(prefix='/scores')


@router.get('/overall', response_model=OverallScoreResponse)
def get_overall_score(
    start_date: str | None = Query(default=None),
    end_date: str | None = Query(default=None),
    service: RatingsService = Depends(get_ratings_service),
) -> OverallScoreResponse:
    start = parse_timestamp_param(start_date, 'start_date')
    end = parse_timestamp_param(end_date, 'end_date')
    try:
        overall_score = service.get_overall_score(start, end)
    except InvalidArgumentError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except InternalError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return OverallScoreResponse(start_date=start, end_date=end, overall_score=overall_score)


@router.get('/aggregated', response_model=AggregatedScoresResponse)
def get_aggregated_scores(
    start_date: str | None = Query(default=None),
    end_date: str | None = Query(default=None),
    service: RatingsService = Depends(get_ratings_service),
) -> AggregatedScoresResponse:
    start = parse_timestamp_param(start_date, 'start_date')
    end = parse_timestamp_param(end_date, 'end_date')
    try:
        report = service.get_aggregated_scores(start, end)
    except InvalidArgumentError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except InternalError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return AggregatedScoresResponse(
        start_date=start,
        end_date=end,
        granularity=report.granularity,
        scores=[
            ScoreOut(
                type=record.kind,
                value=record.label,
                spelling=record.spelling,
                grammar=record.grammar,
                gdpr=record.gdpr,
                randomness=record.randomness,
            )
            for record in report.records
        ],
    )
