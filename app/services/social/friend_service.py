"""
Friends service.

Friend requests, acceptance, removal and profile search. A request row is
pending until the recipient accepts it; an accepted row is the friendship
in both directions.
"""

import logging
from typing import Optional
from uuid import UUID

from rapidfuzz import fuzz
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.repositories import FriendRequestRepository, ProfileRepository
from app.database.schemas import FriendRequestDBModel, ProfileDBModel
from app.pydantic_models.friend import (
    FriendProfile,
    FriendSearchResult,
    FriendsOverview,
)
from app.utils.constants import DEFAULT_DISPLAY_NAME, FriendRequestStatus, FriendStatus

logger = logging.getLogger(__name__)


class FriendRequestError(Exception):
    """Base class for friend request failures."""


class SelfFriendRequest(FriendRequestError):
    """A user tried to befriend themselves."""


class ProfileNotFound(FriendRequestError):
    """The other user has no profile."""


class DuplicateFriendRequest(FriendRequestError):
    """A request already links the two users."""


class FriendRequestNotFound(FriendRequestError):
    """No matching request or friendship."""


def _friend_profile(
    profile: Optional[ProfileDBModel], request: FriendRequestDBModel, status: str
) -> FriendProfile:
    return FriendProfile(
        id=profile.id,
        display_name=profile.display_name or DEFAULT_DISPLAY_NAME,
        avatar_url=profile.avatar_url or None,
        total_points=profile.total_points or 0,
        state=profile.state,
        created_at=request.created_at,
        you=False,
        status=status,
    )


class FriendService:
    """Friend list management for one requester per call."""

    SEARCH_LIMIT = 20
    MIN_SEARCH_LENGTH = 2

    def __init__(
        self,
        session: AsyncSession,
        search_limit: int = SEARCH_LIMIT,
        min_search_length: int = MIN_SEARCH_LENGTH,
    ):
        self.session = session
        self.search_limit = search_limit
        self.min_search_length = min_search_length
        self.friend_repo = FriendRequestRepository(session)
        self.profile_repo = ProfileRepository(session)

    async def get_overview(self, user_id: UUID) -> FriendsOverview:
        """Accepted friends plus incoming and outgoing pending requests."""
        accepted = await self.friend_repo.get_accepted(user_id)
        incoming = await self.friend_repo.get_incoming(user_id)
        outgoing = await self.friend_repo.get_outgoing(user_id)

        return FriendsOverview(
            friends=[
                _friend_profile(
                    r.recipient if r.requester_id == user_id else r.requester,
                    r,
                    FriendStatus.ACCEPTED,
                )
                for r in accepted
            ],
            incoming=[_friend_profile(r.requester, r, FriendStatus.INCOMING) for r in incoming],
            outgoing=[_friend_profile(r.recipient, r, FriendStatus.PENDING) for r in outgoing],
        )

    async def send_request(self, user_id: UUID, recipient_id: UUID) -> FriendRequestDBModel:
        """
        Open a pending request from user to recipient.

        Raises:
            SelfFriendRequest: recipient is the user
            ProfileNotFound: recipient has no profile
            DuplicateFriendRequest: a request exists in either direction
        """
        if recipient_id == user_id:
            raise SelfFriendRequest("You cannot add yourself as a friend")
        if not await self.profile_repo.exists(recipient_id):
            raise ProfileNotFound(f"Profile {recipient_id} not found")
        if await self.friend_repo.get_between(user_id, recipient_id):
            raise DuplicateFriendRequest("A friend request already exists")

        request = await self.friend_repo.create(
            requester_id=user_id,
            recipient_id=recipient_id,
            status=FriendRequestStatus.PENDING,
        )
        logger.info(f"Friend request {user_id} -> {recipient_id} created")
        return request

    async def accept(self, user_id: UUID, friend_id: UUID) -> FriendRequestDBModel:
        """
        Accept the pending request friend_id sent to user_id.

        Raises:
            FriendRequestNotFound: no such pending request
        """
        request = await self.friend_repo.get_pending(friend_id, user_id)
        if request is None:
            raise FriendRequestNotFound("No pending friend request from this user")
        request = await self.friend_repo.update(
            request.id, status=FriendRequestStatus.ACCEPTED
        )
        logger.info(f"Friend request {friend_id} -> {user_id} accepted")
        return request

    async def decline(self, user_id: UUID, friend_id: UUID) -> None:
        """
        Delete the pending request friend_id sent to user_id.

        Raises:
            FriendRequestNotFound: no such pending request
        """
        request = await self.friend_repo.get_pending(friend_id, user_id)
        if request is None:
            raise FriendRequestNotFound("No pending friend request from this user")
        await self.friend_repo.delete(request.id)
        logger.info(f"Friend request {friend_id} -> {user_id} declined")

    async def remove(self, user_id: UUID, friend_id: UUID) -> None:
        """
        End an accepted friendship, whichever side sent the original request.

        Raises:
            FriendRequestNotFound: the two users are not friends
        """
        removed = await self.friend_repo.delete_accepted_between(user_id, friend_id)
        if not removed:
            raise FriendRequestNotFound("You are not friends with this user")
        logger.info(f"Friendship {user_id} <-> {friend_id} removed")

    async def search(self, user_id: UUID, term: str) -> list[FriendSearchResult]:
        """
        Find profiles by display name.

        Terms shorter than the minimum length return nothing. Hits are
        ordered by fuzzy similarity to the term, best first.
        """
        term = (term or "").strip()
        if len(term) < self.min_search_length:
            return []

        profiles = await self.profile_repo.search_by_display_name(
            term, exclude_id=user_id, limit=self.search_limit
        )
        related = await self.friend_repo.get_related_ids(user_id)

        scored = sorted(
            profiles,
            key=lambda p: fuzz.WRatio(term.lower(), (p.display_name or "").lower()),
            reverse=True,
        )
        return [
            FriendSearchResult(
                id=p.id,
                display_name=p.display_name or DEFAULT_DISPLAY_NAME,
                avatar_url=p.avatar_url,
                total_points=p.total_points or 0,
                state=p.state,
                you=False,
                already_friend=p.id in related,
            )
            for p in scored
        ]
