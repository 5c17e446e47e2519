from __future__ import annotations

from typing import Sequence

from anyio import to_thread
from sqlalchemy import delete, select
from sqlalchemy.orm import sessionmaker

from watchwise_core.errors import NotFound
from watchwise_store.db import new_id, utcnow
from watchwise_store.tables import (
    ActorPreference,
    DirectorPreference,
    FavouriteTitle,
    GenrePreference,
    MoodPreference,
)
from watchwise_store.upsert import upsert_on_conflict

from .schemas import FavouriteCreate, NamedPreferenceCreate, RatedLabelSet

# model -> label column for the (user_id, label) unique rated tables
RATED_TABLES = {
    GenrePreference: "genre",
    MoodPreference: "mood",
}


class SqlPreferencesRepo:
    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    # ---------- Async facade (runs sync work in threadpool) ----------
    async def set_genre(self, dto: RatedLabelSet) -> GenrePreference:
        return await to_thread.run_sync(self._set_rated_sync, GenrePreference, dto)

    async def set_mood(self, dto: RatedLabelSet) -> MoodPreference:
        return await to_thread.run_sync(self._set_rated_sync, MoodPreference, dto)

    async def list_genres(self, user_id: str) -> Sequence[GenrePreference]:
        return await to_thread.run_sync(self._list_sync, GenrePreference, user_id)

    async def list_moods(self, user_id: str) -> Sequence[MoodPreference]:
        return await to_thread.run_sync(self._list_sync, MoodPreference, user_id)

    async def list_actors(self, user_id: str) -> Sequence[ActorPreference]:
        return await to_thread.run_sync(self._list_sync, ActorPreference, user_id)

    async def list_directors(self, user_id: str) -> Sequence[DirectorPreference]:
        return await to_thread.run_sync(self._list_sync, DirectorPreference, user_id)

    async def list_favourites(self, user_id: str) -> Sequence[FavouriteTitle]:
        return await to_thread.run_sync(self._list_sync, FavouriteTitle, user_id)

    async def add_actor(self, dto: NamedPreferenceCreate) -> ActorPreference:
        row = ActorPreference(user_id=dto.user_id, actor_name=dto.name, rating=dto.rating)
        return await to_thread.run_sync(self._insert_sync, row)

    async def add_director(self, dto: NamedPreferenceCreate) -> DirectorPreference:
        row = DirectorPreference(
            user_id=dto.user_id, director_name=dto.name, rating=dto.rating
        )
        return await to_thread.run_sync(self._insert_sync, row)

    async def add_favourite(self, dto: FavouriteCreate) -> FavouriteTitle:
        row = FavouriteTitle(
            user_id=dto.user_id,
            title=dto.title,
            media_type=dto.media_type.value,
            year=dto.year,
            reason=dto.reason,
        )
        return await to_thread.run_sync(self._insert_sync, row)

    async def delete_actor(self, id: str) -> None:
        await to_thread.run_sync(self._delete_sync, ActorPreference, id, "Actor not found")

    async def delete_director(self, id: str) -> None:
        await to_thread.run_sync(
            self._delete_sync, DirectorPreference, id, "Director not found"
        )

    async def delete_favourite(self, id: str) -> None:
        await to_thread.run_sync(
            self._delete_sync, FavouriteTitle, id, "Favourite not found"
        )

    # ---------- Private sync implementations ----------
    def _set_rated_sync(self, model: type, dto: RatedLabelSet):
        label_col = RATED_TABLES[model]
        now = utcnow()
        with self.session_factory.begin() as s:
            upsert_on_conflict(
                s,
                model,
                {
                    "id": new_id(),
                    "user_id": dto.user_id,
                    label_col: dto.label,
                    "rating": dto.rating,
                    "created_at": now,
                    "updated_at": now,
                },
                conflict_cols=["user_id", label_col],
                update_cols=["rating", "updated_at"],
            )
            return s.scalars(
                select(model)
                .where(model.user_id == dto.user_id)
                .where(getattr(model, label_col) == dto.label)
                .limit(1)
            ).one()

    def _list_sync(self, model: type, user_id: str) -> list:
        with self.session_factory() as s:
            stmt = (
                select(model)
                .where(model.user_id == user_id)
                .order_by(model.created_at, model.id)
            )
            return list(s.scalars(stmt).all())

    def _insert_sync(self, row):
        with self.session_factory.begin() as s:
            s.add(row)
            s.flush()
            return row

    def _delete_sync(self, model: type, id: str, missing_msg: str) -> None:
        with self.session_factory.begin() as s:
            res = s.execute(delete(model).where(model.id == id))
            if not res.rowcount:
                raise NotFound(missing_msg)
