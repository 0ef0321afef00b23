"""
Repository for UserBadge database operations.
"""
from typing import List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.repositories.base import BaseRepository
from app.database.schemas import UserBadgeDBModel


class UserBadgeRepository(BaseRepository[UserBadgeDBModel]):
    """Repository for awarded badges."""

    def __init__(self, session: AsyncSession):
        super().__init__(UserBadgeDBModel, session)

    async def get_by_user(self, user_id: UUID) -> List[UserBadgeDBModel]:
        """A user's badges, most recently awarded first."""
        stmt = (
            select(self.model)
            .where(self.model.user_id == user_id)
            .order_by(self.model.awarded_at.desc(), self.model.id.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().unique().all())
