from datetime import datetime

from pydantic import BaseModel

from watchwise_core.schemas import CamelModel
from watchwise_core.types import HistoryRating, MediaType


class HistoryCreate(BaseModel):
    user_id: str
    title: str
    media_type: MediaType
    year: int | None = None
    watched_date: datetime | None = None  # defaults to now
    rating: HistoryRating | None = None
    notes: str | None = None


class RejectedCreate(BaseModel):
    user_id: str
    title: str
    media_type: MediaType
    year: int | None = None
    reason: str | None = None


class WatchHistoryItemOut(CamelModel):
    id: str
    user_id: str
    title: str
    media_type: MediaType
    year: int | None = None
    watched_date: datetime | None = None
    rating: HistoryRating | None = None
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class RejectedItemOut(CamelModel):
    id: str
    user_id: str
    title: str
    media_type: MediaType
    year: int | None = None
    reason: str | None = None
    created_at: datetime | None = None
