from __future__ import annotations

from typing import Optional, Sequence

from watchwise_core.config import PROFILE_BASED_PROMPT
from watchwise_core.types import RecommendationOutcome

from .rec_log_repo import SqlRecommendationLogRepo
from .schemas import Recommendation, RecommendationLogCreate, RecommendationLogItem


def prompt_label(user_request: Optional[str]) -> str:
    """What a log row records as its originating prompt."""
    if user_request and user_request.strip():
        return user_request
    return PROFILE_BASED_PROMPT


class RecommendationLogService:
    """
    Tracks every surfaced recommendation and what the user later did with it.

    Rows start with no outcome. Outcomes may be overwritten freely; no
    transition order is enforced.
    """

    def __init__(self, repo: SqlRecommendationLogRepo):
        self.repo = repo

    async def record(
        self,
        user_id: str,
        recommendations: Sequence[Recommendation],
        user_request: Optional[str] = None,
    ) -> list[RecommendationLogItem]:
        prompt = prompt_label(user_request)
        rows = [
            RecommendationLogCreate(
                user_id=user_id,
                title=rec.title,
                media_type=rec.media_type,
                year=rec.year,
                reason=rec.reason,
                prompt=prompt,
            )
            for rec in recommendations
        ]
        entries = await self.repo.add_many(rows)
        return [RecommendationLogItem.model_validate(e) for e in entries]

    async def list(self, user_id: str) -> list[RecommendationLogItem]:
        """Newest first."""
        return [RecommendationLogItem.model_validate(e) for e in await self.repo.list(user_id)]

    async def set_outcome(
        self, id: str, outcome: RecommendationOutcome | None
    ) -> RecommendationLogItem:
        return RecommendationLogItem.model_validate(
            await self.repo.update_outcome(id, outcome)
        )
