"""
Profile service: the requester's profile, streak and onboarding flag.
"""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.database.repositories import ProfileRepository
from app.database.schemas import ProfileDBModel
from app.pydantic_models.profile import ProfileUpdate

from .onboarding import OnboardingStatusLoader

logger = logging.getLogger(__name__)


class ProfileService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.profile_repo = ProfileRepository(session)

    async def get(self, user_id: UUID) -> Optional[ProfileDBModel]:
        return await self.profile_repo.get_by_id(user_id)

    async def update(self, user_id: UUID, changes: ProfileUpdate) -> ProfileDBModel:
        """
        Apply the fields set in ``changes``; creates the profile on first write.

        Args:
            user_id: Requester id, also the profile id
            changes: Partial profile update
        """
        data = changes.model_dump(exclude_unset=True)
        if data.get("state") is not None:
            data["state"] = data["state"].value

        if not await self.profile_repo.exists(user_id):
            logger.info(f"Creating profile for {user_id}")
            return await self.profile_repo.create(id=user_id, **data)

        return await self.profile_repo.update(user_id, **data)

    async def get_current_streak(self, user_id: UUID) -> int:
        """Stored streak, 0 when the user has no profile."""
        return await self.profile_repo.get_current_streak(user_id) or 0

    async def get_onboarding_completed(
        self, user_id: UUID, loader: OnboardingStatusLoader
    ) -> bool:
        return await loader.load(user_id, self.profile_repo.get_onboarding_completed)

    async def complete_onboarding(self, user_id: UUID) -> Optional[ProfileDBModel]:
        """Mark onboarding done; None when the user has no profile."""
        if not await self.profile_repo.exists(user_id):
            return None
        profile = await self.profile_repo.update(user_id, onboarding_completed=True)
        logger.info(f"User {user_id} completed onboarding")
        return profile
