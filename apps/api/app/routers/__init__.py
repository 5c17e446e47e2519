from .routes_auth import router as auth_router
from .routes_users import router as users_router
from .routes_preferences import router as preferences_router
from .routes_viewing import router as viewing_router
from .routes_watchlist import router as watchlist_router
from .routes_recommendations import router as recommend_router

all_routers = [
    auth_router,
    users_router,
    preferences_router,
    viewing_router,
    watchlist_router,
    recommend_router,
]
