from datetime import datetime

from pydantic import BaseModel

from watchwise_core.schemas import CamelModel
from watchwise_core.types import MediaType


# ---------- DTOs (service input) ----------
class RatedLabelSet(BaseModel):
    user_id: str
    label: str
    rating: int


class NamedPreferenceCreate(BaseModel):
    user_id: str
    name: str
    rating: int = 5


class FavouriteCreate(BaseModel):
    user_id: str
    title: str
    media_type: MediaType
    year: int | None = None
    reason: str | None = None


# ---------- Rows (wire output) ----------
class GenrePreferenceOut(CamelModel):
    id: str
    user_id: str
    genre: str
    rating: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


class MoodPreferenceOut(CamelModel):
    id: str
    user_id: str
    mood: str
    rating: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ActorPreferenceOut(CamelModel):
    id: str
    user_id: str
    actor_name: str
    rating: int
    created_at: datetime | None = None


class DirectorPreferenceOut(CamelModel):
    id: str
    user_id: str
    director_name: str
    rating: int
    created_at: datetime | None = None


class FavouriteTitleOut(CamelModel):
    id: str
    user_id: str
    title: str
    media_type: MediaType
    year: int | None = None
    reason: str | None = None
    created_at: datetime | None = None
