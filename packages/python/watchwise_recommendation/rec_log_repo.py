from __future__ import annotations

from typing import Sequence

from anyio import to_thread
from sqlalchemy import desc, select
from sqlalchemy.orm import sessionmaker

from watchwise_core.errors import NotFound
from watchwise_core.types import RecommendationOutcome
from watchwise_store.tables import RecommendationLogEntry

from .schemas import RecommendationLogCreate


class SqlRecommendationLogRepo:
    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    # ---------- Async facade ----------
    async def add_many(
        self, rows: Sequence[RecommendationLogCreate]
    ) -> list[RecommendationLogEntry]:
        return await to_thread.run_sync(self._add_many_sync, rows)

    async def list(self, user_id: str) -> Sequence[RecommendationLogEntry]:
        return await to_thread.run_sync(self._list_sync, user_id)

    async def update_outcome(
        self, id: str, outcome: RecommendationOutcome | None
    ) -> RecommendationLogEntry:
        return await to_thread.run_sync(self._update_outcome_sync, id, outcome)

    # ---------- Private sync impls ----------
    def _add_many_sync(
        self, rows: Sequence[RecommendationLogCreate]
    ) -> list[RecommendationLogEntry]:
        if not rows:
            return []
        entries = []
        for dto in rows:
            payload = dto.model_dump(exclude_none=True)
            payload["media_type"] = dto.media_type.value
            entries.append(RecommendationLogEntry(**payload))
        with self.session_factory.begin() as s:
            s.add_all(entries)
            s.flush()
            return entries

    def _list_sync(self, user_id: str) -> list[RecommendationLogEntry]:
        with self.session_factory() as s:
            stmt = (
                select(RecommendationLogEntry)
                .where(RecommendationLogEntry.user_id == user_id)
                .order_by(desc(RecommendationLogEntry.created_at))
            )
            return list(s.scalars(stmt).all())

    def _update_outcome_sync(
        self, id: str, outcome: RecommendationOutcome | None
    ) -> RecommendationLogEntry:
        with self.session_factory.begin() as s:
            row = s.get(RecommendationLogEntry, id)
            if row is None:
                raise NotFound("Recommendation log entry not found")
            row.outcome = outcome.value if outcome is not None else None
            s.flush()
            return row
