from __future__ import annotations

from watchwise_core.errors import NotFound
from watchwise_core.types import HistoryRating
from watchwise_core.validation import require_text
from watchwise_user.accounts.user_repo import SqlUserRepo

from .schemas import (
    HistoryCreate,
    RejectedCreate,
    RejectedItemOut,
    WatchHistoryItemOut,
)
from .viewing_repo import SqlViewingRepo


class ViewingService:
    def __init__(self, repo: SqlViewingRepo, users: SqlUserRepo):
        self.repo = repo
        self.users = users

    async def add_history(self, dto: HistoryCreate) -> WatchHistoryItemOut:
        dto.title = require_text(dto.title, "title")
        await self._require_user(dto.user_id)
        return WatchHistoryItemOut.model_validate(await self.repo.add_history(dto))

    async def list_history(self, user_id: str) -> list[WatchHistoryItemOut]:
        """Newest watch first."""
        return [
            WatchHistoryItemOut.model_validate(r)
            for r in await self.repo.list_history(user_id)
        ]

    async def rate_history(
        self, id: str, rating: HistoryRating | None
    ) -> WatchHistoryItemOut:
        return WatchHistoryItemOut.model_validate(
            await self.repo.update_history_rating(id, rating)
        )

    async def reject(self, dto: RejectedCreate) -> RejectedItemOut:
        dto.title = require_text(dto.title, "title")
        await self._require_user(dto.user_id)
        return RejectedItemOut.model_validate(await self.repo.add_rejected(dto))

    async def list_rejected(self, user_id: str) -> list[RejectedItemOut]:
        return [
            RejectedItemOut.model_validate(r)
            for r in await self.repo.list_rejected(user_id)
        ]

    async def _require_user(self, user_id: str) -> None:
        if not await self.users.exists(user_id):
            raise NotFound("User not found")
