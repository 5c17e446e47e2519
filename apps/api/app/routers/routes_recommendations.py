import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from watchwise_core.errors import NotFound
from watchwise_recommendation.orchestrator import RecommendationOrchestrator
from watchwise_recommendation.rec_log_service import RecommendationLogService
from watchwise_recommendation.recommend import RecommendationClient
from watchwise_recommendation.schemas import (
    ParsedRequest,
    Recommendation,
    RecommendationLogItem,
)

from app.deps.deps_llm import get_recommendation_client
from app.deps.deps_services import get_orchestrator, get_rec_log_service
from app.schemas import (
    OutcomeUpdateRequest,
    ParseRequestRequest,
    RecommendationsRequest,
    SuccessOut,
)

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["recommendations"])


@router.post(
    "/users/{user_id}/recommendations",
    response_model=List[Recommendation],
)
async def recommend(
    user_id: str,
    req: Optional[RecommendationsRequest] = None,
    orchestrator: RecommendationOrchestrator = Depends(get_orchestrator),
):
    """
    Generate suggestions from the stored profile plus an optional free-text
    request, and log every suggestion returned.
    """
    user_request = req.request if req else None
    try:
        return await orchestrator.recommend(user_id, user_request)
    except NotFound:
        raise
    except Exception:
        log.exception("Recommendation generation failed for user %s", user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate recommendations",
        )


@router.post("/parse-request", response_model=ParsedRequest)
async def parse_request(
    req: ParseRequestRequest,
    client: RecommendationClient = Depends(get_recommendation_client),
):
    try:
        return await client.parse_request(req.request)
    except Exception:
        log.exception("Parse request failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to parse request",
        )


@router.get(
    "/users/{user_id}/recommendation-log",
    response_model=List[RecommendationLogItem],
)
async def list_log(
    user_id: str, service: RecommendationLogService = Depends(get_rec_log_service)
):
    return await service.list(user_id)


@router.patch("/recommendation-log/{id}/outcome", response_model=SuccessOut)
async def set_outcome(
    id: str,
    req: OutcomeUpdateRequest,
    service: RecommendationLogService = Depends(get_rec_log_service),
):
    await service.set_outcome(id, req.outcome)
    return SuccessOut()
