"""
API routers module.
"""
from app.api.activities import router as activities_router
from app.api.emissions import router as emissions_router
from app.api.factors import router as factors_router
from app.api.friends import router as friends_router
from app.api.leaderboard import router as leaderboard_router
from app.api.profile import router as profile_router
from app.api.quests import router as quests_router

__all__ = [
    "activities_router",
    "emissions_router",
    "factors_router",
    "friends_router",
    "leaderboard_router",
    "profile_router",
    "quests_router",
]
