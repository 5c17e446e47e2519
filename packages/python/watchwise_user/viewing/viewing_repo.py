from __future__ import annotations

from typing import Sequence

from anyio import to_thread
from sqlalchemy import desc, select
from sqlalchemy.orm import sessionmaker

from watchwise_core.errors import NotFound
from watchwise_core.types import HistoryRating
from watchwise_store.tables import RejectedItem, WatchHistoryItem

from .schemas import HistoryCreate, RejectedCreate


class SqlViewingRepo:
    """Watch history and rejected suggestions for a user."""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    # ---------- Async facade ----------
    async def add_history(self, dto: HistoryCreate) -> WatchHistoryItem:
        return await to_thread.run_sync(self._add_history_sync, dto)

    async def list_history(self, user_id: str) -> Sequence[WatchHistoryItem]:
        return await to_thread.run_sync(self._list_history_sync, user_id)

    async def update_history_rating(
        self, id: str, rating: HistoryRating | None
    ) -> WatchHistoryItem:
        return await to_thread.run_sync(self._update_history_rating_sync, id, rating)

    async def add_rejected(self, dto: RejectedCreate) -> RejectedItem:
        return await to_thread.run_sync(self._add_rejected_sync, dto)

    async def list_rejected(self, user_id: str) -> Sequence[RejectedItem]:
        return await to_thread.run_sync(self._list_rejected_sync, user_id)

    # ---------- Private sync impls ----------
    def _add_history_sync(self, dto: HistoryCreate) -> WatchHistoryItem:
        payload = dto.model_dump(exclude_none=True)
        payload["media_type"] = dto.media_type.value
        if dto.rating is not None:
            payload["rating"] = dto.rating.value
        with self.session_factory.begin() as s:
            row = WatchHistoryItem(**payload)
            s.add(row)
            s.flush()
            return row

    def _list_history_sync(self, user_id: str) -> list[WatchHistoryItem]:
        with self.session_factory() as s:
            stmt = (
                select(WatchHistoryItem)
                .where(WatchHistoryItem.user_id == user_id)
                .order_by(desc(WatchHistoryItem.watched_date), desc(WatchHistoryItem.created_at))
            )
            return list(s.scalars(stmt).all())

    def _update_history_rating_sync(
        self, id: str, rating: HistoryRating | None
    ) -> WatchHistoryItem:
        with self.session_factory.begin() as s:
            row = s.get(WatchHistoryItem, id)
            if row is None:
                raise NotFound("History item not found")
            row.rating = rating.value if rating is not None else None
            s.flush()
            return row

    def _add_rejected_sync(self, dto: RejectedCreate) -> RejectedItem:
        payload = dto.model_dump(exclude_none=True)
        payload["media_type"] = dto.media_type.value
        with self.session_factory.begin() as s:
            row = RejectedItem(**payload)
            s.add(row)
            s.flush()
            return row

    def _list_rejected_sync(self, user_id: str) -> list[RejectedItem]:
        with self.session_factory() as s:
            stmt = (
                select(RejectedItem)
                .where(RejectedItem.user_id == user_id)
                .order_by(RejectedItem.created_at, RejectedItem.id)
            )
            return list(s.scalars(stmt).all())
