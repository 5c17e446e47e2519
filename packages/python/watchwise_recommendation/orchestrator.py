from __future__ import annotations

import logging
import time
from typing import Optional

from watchwise_user.profile.profile_service import ProfileService

from .rec_log_service import RecommendationLogService
from .recommend import RecommendationClient
from .schemas import Recommendation

log = logging.getLogger(__name__)


class RecommendationOrchestrator:
    """read profile -> assemble prompt -> call LLM -> log what was shown"""

    def __init__(
        self,
        profiles: ProfileService,
        client: RecommendationClient,
        tracker: RecommendationLogService,
    ):
        self.profiles = profiles
        self.client = client
        self.tracker = tracker

    async def recommend(
        self, user_id: str, user_request: Optional[str] = None
    ) -> list[Recommendation]:
        t0 = time.perf_counter()
        profile = await self.profiles.get_taste_profile(user_id)
        recs = await self.client.generate(profile, user_request)
        await self.tracker.record(user_id, recs, user_request)
        log.info(
            "Generated %d recommendations for user %s in %.2fs",
            len(recs),
            user_id,
            time.perf_counter() - t0,
        )
        return recs
