from typing import List

from fastapi import APIRouter, Depends

from watchwise_user.viewing.schemas import (
    HistoryCreate,
    RejectedCreate,
    RejectedItemOut,
    WatchHistoryItemOut,
)
from watchwise_user.viewing.viewing_service import ViewingService

from app.deps.deps_services import get_viewing_service
from app.schemas import (
    HistoryCreateRequest,
    HistoryRatingRequest,
    RejectedCreateRequest,
    SuccessOut,
)

router = APIRouter(prefix="/api", tags=["viewing"])


# ---- Watch history ----
@router.get("/users/{user_id}/history", response_model=List[WatchHistoryItemOut])
async def list_history(
    user_id: str, service: ViewingService = Depends(get_viewing_service)
):
    return await service.list_history(user_id)


@router.post(
    "/users/{user_id}/history", response_model=WatchHistoryItemOut, status_code=201
)
async def add_history(
    user_id: str,
    req: HistoryCreateRequest,
    service: ViewingService = Depends(get_viewing_service),
):
    dto = HistoryCreate(user_id=user_id, **req.model_dump())
    return await service.add_history(dto)


@router.patch("/history/{id}/rating", response_model=SuccessOut)
async def rate_history(
    id: str,
    req: HistoryRatingRequest,
    service: ViewingService = Depends(get_viewing_service),
):
    await service.rate_history(id, req.rating)
    return SuccessOut()


# ---- Rejected suggestions ----
@router.get("/users/{user_id}/rejected", response_model=List[RejectedItemOut])
async def list_rejected(
    user_id: str, service: ViewingService = Depends(get_viewing_service)
):
    return await service.list_rejected(user_id)


@router.post("/users/{user_id}/rejected", response_model=RejectedItemOut, status_code=201)
async def reject(
    user_id: str,
    req: RejectedCreateRequest,
    service: ViewingService = Depends(get_viewing_service),
):
    dto = RejectedCreate(user_id=user_id, **req.model_dump())
    return await service.reject(dto)
