from __future__ import annotations

import asyncio

from watchwise_core.errors import NotFound
from watchwise_core.types import RatedLabel, TitleSignal, UserProfile
from watchwise_user.accounts.user_service import AccountService
from watchwise_user.preferences.preferences_service import PreferencesService
from watchwise_user.viewing.viewing_service import ViewingService

from .schemas import ProfileOut


class ProfileService:
    """Aggregates every per-user preference source into one profile."""

    def __init__(
        self,
        accounts: AccountService,
        preferences: PreferencesService,
        viewing: ViewingService,
    ):
        self.accounts = accounts
        self.preferences = preferences
        self.viewing = viewing

    async def get_profile(self, user_id: str) -> ProfileOut:
        user = await self.accounts.get(user_id)
        if user is None:
            raise NotFound("User not found")

        genres, actors, directors, moods, favourites, history, rejected = await asyncio.gather(
            self.preferences.list_genres(user_id),
            self.preferences.list_actors(user_id),
            self.preferences.list_directors(user_id),
            self.preferences.list_moods(user_id),
            self.preferences.list_favourites(user_id),
            self.viewing.list_history(user_id),
            self.viewing.list_rejected(user_id),
        )
        return ProfileOut(
            user=user,
            genres=genres,
            actors=actors,
            directors=directors,
            moods=moods,
            favourites=favourites,
            history=history,
            rejected=rejected,
        )

    async def get_taste_profile(self, user_id: str) -> UserProfile:
        return to_user_profile(await self.get_profile(user_id))


def to_user_profile(profile: ProfileOut) -> UserProfile:
    """Strip a stored profile down to the signals the prompt builder reads."""
    return UserProfile(
        genres=[RatedLabel(label=g.genre, rating=g.rating) for g in profile.genres],
        moods=[RatedLabel(label=m.mood, rating=m.rating) for m in profile.moods],
        actors=[RatedLabel(label=a.actor_name, rating=a.rating) for a in profile.actors],
        directors=[
            RatedLabel(label=d.director_name, rating=d.rating) for d in profile.directors
        ],
        favourites=[
            TitleSignal(
                title=f.title,
                media_type=f.media_type.value,
                year=f.year,
                reason=f.reason,
            )
            for f in profile.favourites
        ],
        history=[
            TitleSignal(
                title=h.title,
                media_type=h.media_type.value,
                year=h.year,
                rating=h.rating.value if h.rating else None,
            )
            for h in profile.history
        ],
        rejected=[
            TitleSignal(
                title=r.title,
                media_type=r.media_type.value,
                year=r.year,
                reason=r.reason,
            )
            for r in profile.rejected
        ],
    )
