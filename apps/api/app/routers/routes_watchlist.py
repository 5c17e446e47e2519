from typing import List

from fastapi import APIRouter, Depends

from watchwise_watchlist.schemas import (
    WatchlistCreate,
    WatchlistItem,
    WatchlistPriorityUpdate,
)
from watchwise_watchlist.watchlist_service import WatchlistService

from app.deps.deps_services import get_watchlist_service
from app.schemas import SuccessOut, WatchlistCreateRequest, WatchlistPriorityRequest

router = APIRouter(prefix="/api", tags=["watchlist"])


# ---- List ----
@router.get("/users/{user_id}/watchlist", response_model=List[WatchlistItem])
async def list_items(
    user_id: str, service: WatchlistService = Depends(get_watchlist_service)
):
    return await service.list(user_id)


# ---- Create ----
@router.post("/users/{user_id}/watchlist", response_model=WatchlistItem, status_code=201)
async def create_item(
    user_id: str,
    req: WatchlistCreateRequest,
    service: WatchlistService = Depends(get_watchlist_service),
):
    data = req.model_dump(exclude_none=True)
    dto = WatchlistCreate(user_id=user_id, **data)
    return await service.add(dto)


# ---- Delete ----
@router.delete("/watchlist/{id}", response_model=SuccessOut)
async def remove_by_id(
    id: str, service: WatchlistService = Depends(get_watchlist_service)
):
    await service.remove_by_id(id)
    return SuccessOut()


# ---- Reprioritise ----
@router.patch("/watchlist/{id}/priority", response_model=SuccessOut)
async def update_priority(
    id: str,
    req: WatchlistPriorityRequest,
    service: WatchlistService = Depends(get_watchlist_service),
):
    await service.set_priority(WatchlistPriorityUpdate(id=id, priority=req.priority))
    return SuccessOut()
