from __future__ import annotations

from typing import Iterable, Optional

from watchwise_core.config import MAX_REJECTED_IN_PROMPT, MAX_WATCHED_IN_PROMPT
from watchwise_core.types import TitleSignal, UserProfile

GENERIC_FALLBACK_PROMPT = (
    "Please suggest 5 popular, highly-rated films and TV shows across "
    "different genres for a new user."
)


def _csv(items: Iterable[str]) -> str:
    return ", ".join(items)


def _favourite_line(f: TitleSignal) -> str:
    line = f"{f.title} ({f.media_type})"
    if f.reason:
        line += f' - "{f.reason}"'
    return line


# == User prompt builder for profile-based recommendations ==
def build_recommendation_prompt(
    profile: UserProfile,
    user_request: Optional[str] = None,
) -> str:
    """
    Build the User Prompt for the recommendation LLM call.

    Only non-empty sections are emitted, always in the same order, separated
    by a blank line. A profile with nothing in it yields the generic fallback.
    Pure: reads nothing but its arguments.
    """
    sections: list[str] = []

    if user_request and user_request.strip():
        sections.append(f'USER REQUEST: "{user_request}"')

    liked_genres = profile.liked_genres()
    avoided_genres = profile.avoided_genres()
    if liked_genres:
        sections.append(f"FAVOURITE GENRES: {_csv(liked_genres)}")
    if avoided_genres:
        sections.append(f"GENRES TO AVOID: {_csv(avoided_genres)}")

    liked_actors = profile.liked_actors()
    if liked_actors:
        sections.append(f"FAVOURITE ACTORS: {_csv(liked_actors)}")

    liked_directors = profile.liked_directors()
    if liked_directors:
        sections.append(f"FAVOURITE DIRECTORS: {_csv(liked_directors)}")

    liked_moods = profile.liked_moods()
    if liked_moods:
        sections.append(f"PREFERRED MOODS: {_csv(liked_moods)}")

    if profile.favourites:
        sections.append(
            "LOVED TITLES: " + "; ".join(_favourite_line(f) for f in profile.favourites)
        )

    loved = profile.loved_history()
    disliked = profile.disliked_history()
    if loved:
        sections.append(f"RECENTLY LOVED: {_csv(h.title for h in loved)}")
    if disliked:
        sections.append(f"RECENTLY DISLIKED: {_csv(h.title for h in disliked)}")

    if profile.rejected:
        rejected = profile.rejected[:MAX_REJECTED_IN_PROMPT]
        sections.append(
            f"ALREADY REJECTED (don't suggest): {_csv(r.title for r in rejected)}"
        )

    if profile.history:
        watched = profile.history[:MAX_WATCHED_IN_PROMPT]
        sections.append(
            f"ALREADY WATCHED (don't suggest): {_csv(h.title for h in watched)}"
        )

    if not sections:
        return GENERIC_FALLBACK_PROMPT

    return "\n\n".join(sections)
