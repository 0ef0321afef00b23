"""
Database repositories for data access layer.

Provides clean abstraction over database operations following repository pattern.
"""
from app.database.repositories.activity import ActivityRepository
from app.database.repositories.badge import UserBadgeRepository
from app.database.repositories.base import BaseRepository
from app.database.repositories.emission_factor import EmissionFactorRepository
from app.database.repositories.friend_request import FriendRequestRepository
from app.database.repositories.profile import ProfileRepository
from app.database.repositories.quest import QuestRepository, UserQuestRepository

__all__ = [
    "ActivityRepository",
    "BaseRepository",
    "EmissionFactorRepository",
    "FriendRequestRepository",
    "ProfileRepository",
    "QuestRepository",
    "UserBadgeRepository",
    "UserQuestRepository",
]
