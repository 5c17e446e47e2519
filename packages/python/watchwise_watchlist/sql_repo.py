from __future__ import annotations

from typing import Sequence

from anyio import to_thread
from sqlalchemy import delete, desc, select
from sqlalchemy.orm import sessionmaker

from watchwise_core.errors import NotFound
from watchwise_store.tables import WatchlistEntry

from .schemas import WatchlistCreate, WatchlistPriorityUpdate


class SqlWatchlistRepo:
    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    # ---------- Async facade (runs sync work in threadpool) ----------
    async def add(self, dto: WatchlistCreate) -> WatchlistEntry:
        return await to_thread.run_sync(self._add_sync, dto)

    async def list(self, user_id: str) -> Sequence[WatchlistEntry]:
        return await to_thread.run_sync(self._list_sync, user_id)

    async def remove_by_id(self, id: str) -> None:
        await to_thread.run_sync(self._remove_by_id_sync, id)

    async def update_priority(self, dto: WatchlistPriorityUpdate) -> WatchlistEntry:
        return await to_thread.run_sync(self._update_priority_sync, dto)

    # ---------- Private sync implementations ----------
    def _add_sync(self, dto: WatchlistCreate) -> WatchlistEntry:
        payload = dto.model_dump(exclude_none=True)
        payload["media_type"] = dto.media_type.value
        with self.session_factory.begin() as s:
            row = WatchlistEntry(**payload)
            s.add(row)
            s.flush()
            return row

    def _list_sync(self, user_id: str) -> list[WatchlistEntry]:
        with self.session_factory() as s:
            stmt = (
                select(WatchlistEntry)
                .where(WatchlistEntry.user_id == user_id)
                .order_by(desc(WatchlistEntry.priority), desc(WatchlistEntry.added_date))
            )
            return list(s.scalars(stmt).all())

    def _remove_by_id_sync(self, id: str) -> None:
        with self.session_factory.begin() as s:
            res = s.execute(delete(WatchlistEntry).where(WatchlistEntry.id == id))
            if not res.rowcount:
                raise NotFound("watchlist item not found")

    def _update_priority_sync(self, dto: WatchlistPriorityUpdate) -> WatchlistEntry:
        with self.session_factory.begin() as s:
            row = s.get(WatchlistEntry, dto.id)
            if row is None:
                raise NotFound("watchlist item not found")
            row.priority = dto.priority
            s.flush()
            return row
