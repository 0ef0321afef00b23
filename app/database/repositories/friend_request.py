"""
Repository for FriendRequest database operations.
"""
from typing import List, Optional, Set
from uuid import UUID

from sqlalchemy import and_, delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.repositories.base import BaseRepository
from app.database.schemas import FriendRequestDBModel
from app.utils.constants import FriendRequestStatus


class FriendRequestRepository(BaseRepository[FriendRequestDBModel]):
    """Repository for friend requests and friendships."""

    def __init__(self, session: AsyncSession):
        super().__init__(FriendRequestDBModel, session)

    def _between(self, user_a: UUID, user_b: UUID):
        return or_(
            and_(self.model.requester_id == user_a, self.model.recipient_id == user_b),
            and_(self.model.requester_id == user_b, self.model.recipient_id == user_a),
        )

    def _involving(self, user_id: UUID):
        return or_(
            self.model.requester_id == user_id, self.model.recipient_id == user_id
        )

    async def get_accepted(self, user_id: UUID) -> List[FriendRequestDBModel]:
        """Accepted friendships in either direction."""
        stmt = (
            select(self.model)
            .where(self._involving(user_id))
            .where(self.model.status == FriendRequestStatus.ACCEPTED)
            .order_by(self.model.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().unique().all())

    async def get_incoming(self, user_id: UUID) -> List[FriendRequestDBModel]:
        """Pending requests where the user is the recipient."""
        stmt = (
            select(self.model)
            .where(self.model.recipient_id == user_id)
            .where(self.model.status == FriendRequestStatus.PENDING)
            .order_by(self.model.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().unique().all())

    async def get_outgoing(self, user_id: UUID) -> List[FriendRequestDBModel]:
        """Pending requests the user has sent."""
        stmt = (
            select(self.model)
            .where(self.model.requester_id == user_id)
            .where(self.model.status == FriendRequestStatus.PENDING)
            .order_by(self.model.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().unique().all())

    async def get_friend_ids(self, user_id: UUID) -> Set[UUID]:
        """Ids of every accepted friend."""
        stmt = (
            select(self.model.requester_id, self.model.recipient_id)
            .where(self._involving(user_id))
            .where(self.model.status == FriendRequestStatus.ACCEPTED)
        )
        result = await self.session.execute(stmt)
        return {
            recipient if requester == user_id else requester
            for requester, recipient in result.all()
        }

    async def get_related_ids(self, user_id: UUID) -> Set[UUID]:
        """Ids of everyone with any request (pending or accepted) involving the user."""
        stmt = select(self.model.requester_id, self.model.recipient_id).where(
            self._involving(user_id)
        )
        result = await self.session.execute(stmt)
        return {
            recipient if requester == user_id else requester
            for requester, recipient in result.all()
        }

    async def get_between(
        self, user_a: UUID, user_b: UUID
    ) -> Optional[FriendRequestDBModel]:
        """Request between two users in either direction, if any."""
        stmt = select(self.model).where(self._between(user_a, user_b))
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_pending(
        self, requester_id: UUID, recipient_id: UUID
    ) -> Optional[FriendRequestDBModel]:
        stmt = (
            select(self.model)
            .where(self.model.requester_id == requester_id)
            .where(self.model.recipient_id == recipient_id)
            .where(self.model.status == FriendRequestStatus.PENDING)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def delete_accepted_between(self, user_a: UUID, user_b: UUID) -> int:
        """Remove an accepted friendship in either direction."""
        stmt = (
            delete(self.model)
            .where(self._between(user_a, user_b))
            .where(self.model.status == FriendRequestStatus.ACCEPTED)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
