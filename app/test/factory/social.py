"""
Factories for friend requests, quests and badges following kkb_fastapi pattern.
"""
from datetime import datetime

import factory

from app.database.schemas import (
    BadgeDBModel,
    FriendRequestDBModel,
    QuestDBModel,
    UserBadgeDBModel,
    UserQuestDBModel,
)
from app.test.factory.base_factory import AsyncSQLAlchemyFactory
from app.test.factory.create_async_session import async_session
from app.utils.constants import FriendRequestStatus


class FriendRequestFactory(AsyncSQLAlchemyFactory):
    """Pending by default; pass requester_id and recipient_id."""

    class Meta:
        model = FriendRequestDBModel
        sqlalchemy_session = async_session
        sqlalchemy_session_persistence = "commit"

    status = FriendRequestStatus.PENDING
    created_at = factory.LazyFunction(datetime.utcnow)


class FriendshipFactory(FriendRequestFactory):
    status = FriendRequestStatus.ACCEPTED


class QuestFactory(AsyncSQLAlchemyFactory):
    class Meta:
        model = QuestDBModel
        sqlalchemy_session = async_session
        sqlalchemy_session_persistence = "commit"

    name = factory.Sequence(lambda n: f"Quest {n}")
    description = "Use public transport 5 days this week"
    category = "transport"
    min_value = None
    max_value = 5
    points_multiplier = 20
    active = True
    created_at = factory.LazyFunction(datetime.utcnow)


class UserQuestFactory(AsyncSQLAlchemyFactory):
    """Enrollment; pass user_id. Creates its quest unless one is given."""

    class Meta:
        model = UserQuestDBModel
        sqlalchemy_session = async_session
        sqlalchemy_session_persistence = "commit"

    quest = factory.SubFactory(QuestFactory)
    progress = 0
    completed = False
    completed_at = None
    date_started = factory.LazyFunction(datetime.utcnow)


class BadgeFactory(AsyncSQLAlchemyFactory):
    class Meta:
        model = BadgeDBModel
        sqlalchemy_session = async_session
        sqlalchemy_session_persistence = "commit"
        sqlalchemy_get_or_create = ("code",)

    code = factory.Sequence(lambda n: f"badge_{n}")
    name = factory.Sequence(lambda n: f"Badge {n}")
    description = "Logged your first carbon footprint activity"
    icon = "🌱"


class UserBadgeFactory(AsyncSQLAlchemyFactory):
    """Awarded badge; pass user_id."""

    class Meta:
        model = UserBadgeDBModel
        sqlalchemy_session = async_session
        sqlalchemy_session_persistence = "commit"

    badge = factory.SubFactory(BadgeFactory)
    awarded_at = factory.LazyFunction(datetime.utcnow)
