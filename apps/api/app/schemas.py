from __future__ import annotations

from datetime import datetime

from pydantic import Field

from watchwise_core.schemas import CamelModel
from watchwise_core.types import HistoryRating, MediaType, RecommendationOutcome
from watchwise_user.accounts.schemas import UserOut


# ---- Auth ----
class CredentialsRequest(CamelModel):
    email: str | None = None
    password: str | None = None


class LinkRequest(CamelModel):
    user_id: str | None = None
    email: str | None = None
    password: str | None = None


class MeOut(CamelModel):
    user: UserOut | None = None


class SuccessOut(CamelModel):
    success: bool = True


# ---- Preferences ----
class GenreSetRequest(CamelModel):
    genre: str
    rating: int = Field(..., ge=1, le=5)


class MoodSetRequest(CamelModel):
    mood: str
    rating: int = Field(..., ge=1, le=5)


class ActorCreateRequest(CamelModel):
    actor_name: str
    rating: int | None = Field(None, ge=1, le=5)  # defaults to 5


class DirectorCreateRequest(CamelModel):
    director_name: str
    rating: int | None = Field(None, ge=1, le=5)  # defaults to 5


class FavouriteCreateRequest(CamelModel):
    title: str
    media_type: MediaType
    year: int | None = None
    reason: str | None = None


# ---- Viewing ----
class HistoryCreateRequest(CamelModel):
    title: str
    media_type: MediaType
    year: int | None = None
    watched_date: datetime | None = None
    rating: HistoryRating | None = None
    notes: str | None = None


class HistoryRatingRequest(CamelModel):
    rating: HistoryRating | None = None


class RejectedCreateRequest(CamelModel):
    title: str
    media_type: MediaType
    year: int | None = None
    reason: str | None = None


# ---- Watchlist ----
class WatchlistCreateRequest(CamelModel):
    title: str
    media_type: MediaType
    year: int | None = None
    priority: int | None = None  # defaults to 0
    recommendation_reason: str | None = None


class WatchlistPriorityRequest(CamelModel):
    priority: int


# ---- Recommendations ----
class RecommendationsRequest(CamelModel):
    request: str | None = Field(None, examples=["something funny"])


class ParseRequestRequest(CamelModel):
    request: str = Field(..., min_length=1, examples=["a cosy show like Detectorists"])


class OutcomeUpdateRequest(CamelModel):
    outcome: RecommendationOutcome | None = None
