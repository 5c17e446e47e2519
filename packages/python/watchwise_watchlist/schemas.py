from datetime import datetime

from pydantic import BaseModel

from watchwise_core.schemas import CamelModel
from watchwise_core.types import MediaType


class WatchlistCreate(BaseModel):
    user_id: str
    title: str
    media_type: MediaType
    year: int | None = None
    priority: int = 0
    recommendation_reason: str | None = None


class WatchlistPriorityUpdate(BaseModel):
    id: str
    priority: int


class WatchlistItem(CamelModel):
    id: str
    user_id: str
    title: str
    media_type: MediaType
    year: int | None = None
    priority: int = 0
    recommendation_reason: str | None = None
    added_date: datetime | None = None
    created_at: datetime | None = None
