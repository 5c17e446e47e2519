from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List

from watchwise_core.config import DISLIKED_MAX_RATING, LIKED_MIN_RATING


class MediaType(str, Enum):
    FILM = "film"
    TV = "tv"


class HistoryRating(str, Enum):
    LOVED = "loved"
    OK = "ok"
    DISLIKED = "disliked"


class RecommendationOutcome(str, Enum):
    ADDED_TO_WATCHLIST = "added_to_watchlist"
    WATCHED = "watched"
    REJECTED = "rejected"
    NO_ACTION = "no_action"


class RequestIntent(str, Enum):
    RECOMMENDATION = "recommendation"
    ADD_FAVOURITE = "add_favourite"
    UNKNOWN = "unknown"


@dataclass
class RatedLabel:
    label: str  # genre, mood, actor or director name
    rating: int  # 1-5


@dataclass
class TitleSignal:
    title: str
    media_type: str  # 'film' | 'tv'
    year: int | None = None
    reason: str | None = None
    rating: str | None = None  # history only: 'loved' | 'ok' | 'disliked'


@dataclass
class UserProfile:
    """Snapshot of everything a user has told us about their taste."""

    genres: list[RatedLabel] = field(default_factory=list)
    moods: list[RatedLabel] = field(default_factory=list)
    actors: list[RatedLabel] = field(default_factory=list)
    directors: list[RatedLabel] = field(default_factory=list)
    favourites: list[TitleSignal] = field(default_factory=list)
    history: list[TitleSignal] = field(default_factory=list)  # newest first
    rejected: list[TitleSignal] = field(default_factory=list)

    @staticmethod
    def _liked(items: Iterable[RatedLabel]) -> List[str]:
        return [i.label for i in items if i.rating >= LIKED_MIN_RATING]

    @staticmethod
    def _disliked(items: Iterable[RatedLabel]) -> List[str]:
        return [i.label for i in items if i.rating <= DISLIKED_MAX_RATING]

    def liked_genres(self) -> List[str]:
        return self._liked(self.genres)

    def avoided_genres(self) -> List[str]:
        return self._disliked(self.genres)

    def liked_actors(self) -> List[str]:
        return self._liked(self.actors)

    def liked_directors(self) -> List[str]:
        return self._liked(self.directors)

    def liked_moods(self) -> List[str]:
        return self._liked(self.moods)

    def _history_by_rating(self, rating: HistoryRating) -> List[TitleSignal]:
        return [h for h in self.history if h.rating == rating.value]

    def loved_history(self) -> List[TitleSignal]:
        """History entries rated 'loved'."""
        return self._history_by_rating(HistoryRating.LOVED)

    def disliked_history(self) -> List[TitleSignal]:
        """History entries rated 'disliked'."""
        return self._history_by_rating(HistoryRating.DISLIKED)
