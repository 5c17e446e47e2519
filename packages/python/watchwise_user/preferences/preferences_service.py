from __future__ import annotations

from watchwise_core.errors import NotFound
from watchwise_core.validation import check_rating, require_text
from watchwise_user.accounts.user_repo import SqlUserRepo

from .preferences_repo import SqlPreferencesRepo
from .schemas import (
    ActorPreferenceOut,
    DirectorPreferenceOut,
    FavouriteCreate,
    FavouriteTitleOut,
    GenrePreferenceOut,
    MoodPreferenceOut,
    NamedPreferenceCreate,
    RatedLabelSet,
)


class PreferencesService:
    def __init__(self, repo: SqlPreferencesRepo, users: SqlUserRepo):
        self.repo = repo
        self.users = users

    # ---- Genres / moods: one row per (user, label), last write wins ----
    async def set_genre(self, dto: RatedLabelSet) -> GenrePreferenceOut:
        await self._prepare_rated(dto, "genre")
        return GenrePreferenceOut.model_validate(await self.repo.set_genre(dto))

    async def set_mood(self, dto: RatedLabelSet) -> MoodPreferenceOut:
        await self._prepare_rated(dto, "mood")
        return MoodPreferenceOut.model_validate(await self.repo.set_mood(dto))

    async def list_genres(self, user_id: str) -> list[GenrePreferenceOut]:
        return [GenrePreferenceOut.model_validate(r) for r in await self.repo.list_genres(user_id)]

    async def list_moods(self, user_id: str) -> list[MoodPreferenceOut]:
        return [MoodPreferenceOut.model_validate(r) for r in await self.repo.list_moods(user_id)]

    # ---- Actors / directors: append-only ----
    async def add_actor(self, dto: NamedPreferenceCreate) -> ActorPreferenceOut:
        await self._prepare_named(dto, "actorName")
        return ActorPreferenceOut.model_validate(await self.repo.add_actor(dto))

    async def add_director(self, dto: NamedPreferenceCreate) -> DirectorPreferenceOut:
        await self._prepare_named(dto, "directorName")
        return DirectorPreferenceOut.model_validate(await self.repo.add_director(dto))

    async def list_actors(self, user_id: str) -> list[ActorPreferenceOut]:
        return [ActorPreferenceOut.model_validate(r) for r in await self.repo.list_actors(user_id)]

    async def list_directors(self, user_id: str) -> list[DirectorPreferenceOut]:
        return [
            DirectorPreferenceOut.model_validate(r)
            for r in await self.repo.list_directors(user_id)
        ]

    async def delete_actor(self, id: str) -> None:
        await self.repo.delete_actor(id)

    async def delete_director(self, id: str) -> None:
        await self.repo.delete_director(id)

    # ---- Favourite titles ----
    async def add_favourite(self, dto: FavouriteCreate) -> FavouriteTitleOut:
        dto.title = require_text(dto.title, "title")
        await self._require_user(dto.user_id)
        return FavouriteTitleOut.model_validate(await self.repo.add_favourite(dto))

    async def list_favourites(self, user_id: str) -> list[FavouriteTitleOut]:
        return [
            FavouriteTitleOut.model_validate(r)
            for r in await self.repo.list_favourites(user_id)
        ]

    async def delete_favourite(self, id: str) -> None:
        await self.repo.delete_favourite(id)

    # ---- helpers ----
    async def _require_user(self, user_id: str) -> None:
        if not await self.users.exists(user_id):
            raise NotFound("User not found")

    async def _prepare_rated(self, dto: RatedLabelSet, field: str) -> None:
        dto.label = require_text(dto.label, field)
        check_rating(dto.rating)
        await self._require_user(dto.user_id)

    async def _prepare_named(self, dto: NamedPreferenceCreate, field: str) -> None:
        dto.name = require_text(dto.name, field)
        check_rating(dto.rating)
        await self._require_user(dto.user_id)

