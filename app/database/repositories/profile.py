"""
Repository for Profile database operations.

Returns ORM rows for writes and typed ProfileSummary projections for the
leaderboard and friends reads.
"""
from typing import Iterable, List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.repositories.base import BaseRepository
from app.database.schemas import ProfileDBModel
from app.pydantic_models.leaderboard import ProfileSummary


class ProfileRepository(BaseRepository[ProfileDBModel]):
    """Repository for profile operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(ProfileDBModel, session)

    def _ranked(self):
        # Deterministic tie order for every leaderboard scope
        return select(self.model).order_by(
            self.model.total_points.desc().nulls_last(), self.model.id
        )

    @staticmethod
    def to_summaries(profiles: Iterable[ProfileDBModel]) -> List[ProfileSummary]:
        return [ProfileSummary.model_validate(profile) for profile in profiles]

    async def get_top(self, limit: int = 50) -> List[ProfileSummary]:
        """
        Highest-scoring profiles, private ones included.

        Args:
            limit: Maximum number of profiles

        Returns:
            Profiles ordered by points descending, then id
        """
        result = await self.session.execute(self._ranked().limit(limit))
        return self.to_summaries(result.scalars().all())

    async def get_by_ids(self, ids: Iterable[UUID]) -> List[ProfileSummary]:
        """Profiles with the given ids, ordered by points descending, then id."""
        ids = list(ids)
        if not ids:
            return []
        stmt = self._ranked().where(self.model.id.in_(ids))
        result = await self.session.execute(stmt)
        return self.to_summaries(result.scalars().all())

    async def get_by_state(self, state: str, limit: int = 50) -> List[ProfileSummary]:
        """Profiles tagged with a region, ordered by points descending, then id."""
        stmt = self._ranked().where(self.model.state == state).limit(limit)
        result = await self.session.execute(stmt)
        return self.to_summaries(result.scalars().all())

    async def search_by_display_name(
        self, term: str, exclude_id: Optional[UUID] = None, limit: int = 20
    ) -> List[ProfileDBModel]:
        """
        Case-insensitive substring search on display name.

        Args:
            term: Search term
            exclude_id: Profile to leave out (usually the requester)
            limit: Maximum number of rows
        """
        stmt = select(self.model).where(self.model.display_name.ilike(f"%{term}%"))
        if exclude_id is not None:
            stmt = stmt.where(self.model.id != exclude_id)
        stmt = stmt.order_by(self.model.display_name).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_current_streak(self, id: UUID) -> Optional[int]:
        stmt = select(self.model.current_streak).where(self.model.id == id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_onboarding_completed(self, id: UUID) -> Optional[bool]:
        stmt = select(self.model.onboarding_completed).where(self.model.id == id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
