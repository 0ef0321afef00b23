"""
SQLAlchemy database models (schemas).
"""
from app.database.schemas.activity import ActivityDBModel
from app.database.schemas.badge import BadgeDBModel, UserBadgeDBModel
from app.database.schemas.emission_factor import EmissionFactorDBModel
from app.database.schemas.friend_request import FriendRequestDBModel
from app.database.schemas.profile import ProfileDBModel
from app.database.schemas.quest import QuestDBModel, UserQuestDBModel

__all__ = [
    "ActivityDBModel",
    "BadgeDBModel",
    "EmissionFactorDBModel",
    "FriendRequestDBModel",
    "ProfileDBModel",
    "QuestDBModel",
    "UserBadgeDBModel",
    "UserQuestDBModel",
]
