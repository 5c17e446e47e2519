import logging

from watchwise_core.errors import NotFound
from watchwise_core.validation import require_text
from watchwise_user.accounts.user_repo import SqlUserRepo

from .schemas import WatchlistCreate, WatchlistItem, WatchlistPriorityUpdate
from .sql_repo import SqlWatchlistRepo

log = logging.getLogger(__name__)


class WatchlistService:
    def __init__(self, repo: SqlWatchlistRepo, users: SqlUserRepo):
        self.repo = repo
        self.users = users

    async def add(self, dto: WatchlistCreate) -> WatchlistItem:
        dto.title = require_text(dto.title, "title")
        if not await self.users.exists(dto.user_id):
            raise NotFound("User not found")
        item = await self.repo.add(dto)
        log.debug("watchlist add user=%s title=%r", dto.user_id, dto.title)
        return WatchlistItem.model_validate(item)

    async def list(self, user_id: str) -> list[WatchlistItem]:
        """Highest priority first, most recently added first within a priority."""
        return [WatchlistItem.model_validate(r) for r in await self.repo.list(user_id)]

    async def remove_by_id(self, id: str) -> None:
        await self.repo.remove_by_id(id)

    async def set_priority(self, dto: WatchlistPriorityUpdate) -> WatchlistItem:
        return WatchlistItem.model_validate(await self.repo.update_priority(dto))
