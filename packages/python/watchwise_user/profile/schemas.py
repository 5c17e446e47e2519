from watchwise_core.schemas import CamelModel
from watchwise_user.accounts.schemas import UserOut
from watchwise_user.preferences.schemas import (
    ActorPreferenceOut,
    DirectorPreferenceOut,
    FavouriteTitleOut,
    GenrePreferenceOut,
    MoodPreferenceOut,
)
from watchwise_user.viewing.schemas import RejectedItemOut, WatchHistoryItemOut


class ProfileOut(CamelModel):
    user: UserOut
    genres: list[GenrePreferenceOut]
    actors: list[ActorPreferenceOut]
    directors: list[DirectorPreferenceOut]
    moods: list[MoodPreferenceOut]
    favourites: list[FavouriteTitleOut]
    history: list[WatchHistoryItemOut]
    rejected: list[RejectedItemOut]
