"""
Factory for Profile models following kkb_fastapi pattern.
"""
import uuid
from datetime import datetime

import factory

from app.database.schemas import ProfileDBModel
from app.test.factory.base_factory import AsyncSQLAlchemyFactory
from app.test.factory.create_async_session import async_session


class ProfileFactory(AsyncSQLAlchemyFactory):
    """Factory for creating Profile test instances."""

    class Meta:
        model = ProfileDBModel
        sqlalchemy_session = async_session
        sqlalchemy_session_persistence = "commit"

    id = factory.LazyFunction(uuid.uuid4)
    display_name = factory.Sequence(lambda n: f"Player {n}")
    avatar_url = None
    total_points = 0
    state = None
    is_private = False
    current_streak = 0
    onboarding_completed = False
    created_at = factory.LazyFunction(datetime.utcnow)
    updated_at = factory.LazyFunction(datetime.utcnow)


class PrivateProfileFactory(ProfileFactory):
    is_private = True
