"""
Repository for Quest and UserQuest database operations.
"""
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.repositories.base import BaseRepository
from app.database.schemas import QuestDBModel, UserQuestDBModel


class QuestRepository(BaseRepository[QuestDBModel]):
    """Repository for quest definitions."""

    def __init__(self, session: AsyncSession):
        super().__init__(QuestDBModel, session)

    async def get_active(self) -> List[QuestDBModel]:
        stmt = (
            select(self.model)
            .where(self.model.active.is_(True))
            .order_by(self.model.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_active_by_id(self, quest_id: int) -> Optional[QuestDBModel]:
        stmt = (
            select(self.model)
            .where(self.model.id == quest_id)
            .where(self.model.active.is_(True))
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()


class UserQuestRepository(BaseRepository[UserQuestDBModel]):
    """Repository for quest enrollments."""

    def __init__(self, session: AsyncSession):
        super().__init__(UserQuestDBModel, session)

    async def get_by_user(self, user_id: UUID) -> List[UserQuestDBModel]:
        """A user's enrollments with their quest definitions."""
        stmt = (
            select(self.model)
            .where(self.model.user_id == user_id)
            .order_by(self.model.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().unique().all())

    async def get_for_user(
        self, user_quest_id: int, user_id: UUID
    ) -> Optional[UserQuestDBModel]:
        """Enrollment by id, only if it belongs to the user."""
        stmt = (
            select(self.model)
            .where(self.model.id == user_quest_id)
            .where(self.model.user_id == user_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalars().unique().first()

    async def get_by_user_and_quest(
        self, user_id: UUID, quest_id: int
    ) -> Optional[UserQuestDBModel]:
        stmt = (
            select(self.model)
            .where(self.model.user_id == user_id)
            .where(self.model.quest_id == quest_id)
        )
        result = await self.session.execute(stmt)
        return result.scalars().unique().first()
