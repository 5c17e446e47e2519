from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from watchwise_core.schemas import CamelModel
from watchwise_core.types import MediaType, RecommendationOutcome, RequestIntent


class Recommendation(CamelModel):
    """One title suggested by the LLM, as decoded from its JSON reply."""

    title: str
    year: int | None = None
    media_type: MediaType
    reason: str = ""
    imdb_score: float | None = None
    rotten_tomatoes_score: int | None = None

    @field_validator("media_type", mode="before")
    @classmethod
    def _normalize_media_type(cls, v):
        # models sometimes answer "TV" or " Film"
        return v.strip().lower() if isinstance(v, str) else v


class ParsedRequest(BaseModel):
    intent: RequestIntent = RequestIntent.UNKNOWN
    details: dict[str, str] = Field(default_factory=dict)


class RecommendationLogCreate(BaseModel):
    user_id: str
    title: str
    media_type: MediaType
    year: int | None = None
    reason: str | None = None
    prompt: str


class RecommendationLogItem(CamelModel):
    id: str
    user_id: str
    title: str
    media_type: MediaType
    year: int | None = None
    reason: str | None = None
    prompt: str | None = None
    outcome: RecommendationOutcome | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
