"""
Factory for Activity models following kkb_fastapi pattern.
"""
import uuid
from datetime import datetime

import factory

from app.database.schemas import ActivityDBModel
from app.test.factory.base_factory import AsyncSQLAlchemyFactory
from app.test.factory.create_async_session import async_session
from app.utils.constants import ActivityCategory


class ActivityFactory(AsyncSQLAlchemyFactory):
    """Food activity by default; pass user_id of an existing profile."""

    class Meta:
        model = ActivityDBModel
        sqlalchemy_session = async_session
        sqlalchemy_session_persistence = "commit"

    id = factory.LazyFunction(uuid.uuid4)
    category = ActivityCategory.FOOD
    type = "Red Meat"
    quantity = 0.25
    unit = "kg"
    emission_kg = 5.9
    factor_key = "food.red_meat.kg"
    meta = factory.LazyFunction(lambda: {"subcategory": "Red Meat", "amountKg": 0.25})
    created_at = factory.LazyFunction(datetime.utcnow)
