from typing import List

from fastapi import APIRouter, Depends

from watchwise_user.preferences.preferences_service import PreferencesService
from watchwise_user.preferences.schemas import (
    ActorPreferenceOut,
    DirectorPreferenceOut,
    FavouriteCreate,
    FavouriteTitleOut,
    GenrePreferenceOut,
    MoodPreferenceOut,
    NamedPreferenceCreate,
    RatedLabelSet,
)

from app.deps.deps_services import get_preferences_service
from app.schemas import (
    ActorCreateRequest,
    DirectorCreateRequest,
    FavouriteCreateRequest,
    GenreSetRequest,
    MoodSetRequest,
    SuccessOut,
)

router = APIRouter(prefix="/api", tags=["preferences"])


# ---- Genres ----
@router.get("/users/{user_id}/genres", response_model=List[GenrePreferenceOut])
async def list_genres(
    user_id: str, service: PreferencesService = Depends(get_preferences_service)
):
    return await service.list_genres(user_id)


@router.post("/users/{user_id}/genres", response_model=GenrePreferenceOut, status_code=201)
async def set_genre(
    user_id: str,
    req: GenreSetRequest,
    service: PreferencesService = Depends(get_preferences_service),
):
    dto = RatedLabelSet(user_id=user_id, label=req.genre, rating=req.rating)
    return await service.set_genre(dto)


# ---- Moods ----
@router.get("/users/{user_id}/moods", response_model=List[MoodPreferenceOut])
async def list_moods(
    user_id: str, service: PreferencesService = Depends(get_preferences_service)
):
    return await service.list_moods(user_id)


@router.post("/users/{user_id}/moods", response_model=MoodPreferenceOut, status_code=201)
async def set_mood(
    user_id: str,
    req: MoodSetRequest,
    service: PreferencesService = Depends(get_preferences_service),
):
    dto = RatedLabelSet(user_id=user_id, label=req.mood, rating=req.rating)
    return await service.set_mood(dto)


# ---- Actors ----
@router.get("/users/{user_id}/actors", response_model=List[ActorPreferenceOut])
async def list_actors(
    user_id: str, service: PreferencesService = Depends(get_preferences_service)
):
    return await service.list_actors(user_id)


@router.post("/users/{user_id}/actors", response_model=ActorPreferenceOut, status_code=201)
async def add_actor(
    user_id: str,
    req: ActorCreateRequest,
    service: PreferencesService = Depends(get_preferences_service),
):
    dto = NamedPreferenceCreate(user_id=user_id, name=req.actor_name, rating=req.rating or 5)
    return await service.add_actor(dto)


@router.delete("/actors/{id}", response_model=SuccessOut)
async def delete_actor(
    id: str, service: PreferencesService = Depends(get_preferences_service)
):
    await service.delete_actor(id)
    return SuccessOut()


# ---- Directors ----
@router.get("/users/{user_id}/directors", response_model=List[DirectorPreferenceOut])
async def list_directors(
    user_id: str, service: PreferencesService = Depends(get_preferences_service)
):
    return await service.list_directors(user_id)


@router.post(
    "/users/{user_id}/directors", response_model=DirectorPreferenceOut, status_code=201
)
async def add_director(
    user_id: str,
    req: DirectorCreateRequest,
    service: PreferencesService = Depends(get_preferences_service),
):
    dto = NamedPreferenceCreate(
        user_id=user_id, name=req.director_name, rating=req.rating or 5
    )
    return await service.add_director(dto)


@router.delete("/directors/{id}", response_model=SuccessOut)
async def delete_director(
    id: str, service: PreferencesService = Depends(get_preferences_service)
):
    await service.delete_director(id)
    return SuccessOut()


# ---- Favourite titles ----
@router.get("/users/{user_id}/favourites", response_model=List[FavouriteTitleOut])
async def list_favourites(
    user_id: str, service: PreferencesService = Depends(get_preferences_service)
):
    return await service.list_favourites(user_id)


@router.post(
    "/users/{user_id}/favourites", response_model=FavouriteTitleOut, status_code=201
)
async def add_favourite(
    user_id: str,
    req: FavouriteCreateRequest,
    service: PreferencesService = Depends(get_preferences_service),
):
    dto = FavouriteCreate(user_id=user_id, **req.model_dump())
    return await service.add_favourite(dto)


@router.delete("/favourites/{id}", response_model=SuccessOut)
async def delete_favourite(
    id: str, service: PreferencesService = Depends(get_preferences_service)
):
    await service.delete_favourite(id)
    return SuccessOut()
