from fastapi import Depends
from sqlalchemy.orm import sessionmaker

from watchwise_recommendation.orchestrator import RecommendationOrchestrator
from watchwise_recommendation.rec_log_repo import SqlRecommendationLogRepo
from watchwise_recommendation.rec_log_service import RecommendationLogService
from watchwise_recommendation.recommend import RecommendationClient
from watchwise_user.accounts.user_repo import SqlUserRepo
from watchwise_user.accounts.user_service import AccountService
from watchwise_user.preferences.preferences_repo import SqlPreferencesRepo
from watchwise_user.preferences.preferences_service import PreferencesService
from watchwise_user.profile.profile_service import ProfileService
from watchwise_user.viewing.viewing_repo import SqlViewingRepo
from watchwise_user.viewing.viewing_service import ViewingService
from watchwise_watchlist.sql_repo import SqlWatchlistRepo
from watchwise_watchlist.watchlist_service import WatchlistService

from app.deps.deps import get_session_factory
from app.deps.deps_llm import get_recommendation_client


def get_user_repo(sf: sessionmaker = Depends(get_session_factory)) -> SqlUserRepo:
    return SqlUserRepo(sf)


def get_account_service(users: SqlUserRepo = Depends(get_user_repo)) -> AccountService:
    return AccountService(users)


def get_preferences_service(
    sf: sessionmaker = Depends(get_session_factory),
    users: SqlUserRepo = Depends(get_user_repo),
) -> PreferencesService:
    return PreferencesService(SqlPreferencesRepo(sf), users)


def get_viewing_service(
    sf: sessionmaker = Depends(get_session_factory),
    users: SqlUserRepo = Depends(get_user_repo),
) -> ViewingService:
    return ViewingService(SqlViewingRepo(sf), users)


def get_watchlist_service(
    sf: sessionmaker = Depends(get_session_factory),
    users: SqlUserRepo = Depends(get_user_repo),
) -> WatchlistService:
    return WatchlistService(SqlWatchlistRepo(sf), users)


def get_profile_service(
    accounts: AccountService = Depends(get_account_service),
    preferences: PreferencesService = Depends(get_preferences_service),
    viewing: ViewingService = Depends(get_viewing_service),
) -> ProfileService:
    return ProfileService(accounts, preferences, viewing)


def get_rec_log_service(
    sf: sessionmaker = Depends(get_session_factory),
) -> RecommendationLogService:
    return RecommendationLogService(SqlRecommendationLogRepo(sf))


def get_orchestrator(
    profiles: ProfileService = Depends(get_profile_service),
    client: RecommendationClient = Depends(get_recommendation_client),
    tracker: RecommendationLogService = Depends(get_rec_log_service),
) -> RecommendationOrchestrator:
    return RecommendationOrchestrator(profiles, client, tracker)
