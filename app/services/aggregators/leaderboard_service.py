"""
Leaderboard scope selection.

Fetches the profile rows belonging to a scope and hands them to
rank_profiles.
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.database.repositories import FriendRequestRepository, ProfileRepository
from app.pydantic_models.leaderboard import LeaderboardResponse
from app.services.aggregators.ranking_aggregator import rank_profiles
from app.utils.constants import LeaderboardScopeEnum

logger = logging.getLogger(__name__)


class LeaderboardService:
    """
    Builds leaderboards for the global, friends and regional scopes.

    Every scope query orders by points descending, then id, so equal scores
    rank in a stable order across requests.
    """

    DEFAULT_LIMIT = 50

    def __init__(self, session: AsyncSession, default_limit: int = DEFAULT_LIMIT):
        self.session = session
        self.default_limit = default_limit
        self.profile_repo = ProfileRepository(session)
        self.friend_repo = FriendRequestRepository(session)

    async def get_leaderboard(
        self,
        requester_id: UUID,
        scope: LeaderboardScopeEnum = LeaderboardScopeEnum.GLOBAL,
        limit: int | None = None,
    ) -> LeaderboardResponse:
        """
        Leaderboard for a scope.

        Args:
            requester_id: User asking; flagged ``you`` and always sees their own row
            scope: global, friends or regional
            limit: Row cap for global and regional scopes (default from config)

        Returns:
            LeaderboardResponse with ranked entries
        """
        limit = limit or self.default_limit
        friend_ids = await self.friend_repo.get_friend_ids(requester_id)
        state = None

        if scope == LeaderboardScopeEnum.FRIENDS:
            profiles = await self.profile_repo.get_by_ids([requester_id, *friend_ids])
        elif scope == LeaderboardScopeEnum.REGIONAL:
            requester = await self.profile_repo.get_by_id(requester_id)
            state = requester.state if requester else None
            if state:
                profiles = await self.profile_repo.get_by_state(state, limit=limit)
            else:
                logger.info(f"User {requester_id} has no region; regional leaderboard is empty")
                profiles = []
        else:
            profiles = await self.profile_repo.get_top(limit=limit)

        entries = rank_profiles(profiles, requester_id, friend_ids=friend_ids)
        logger.info(f"Built {scope.value} leaderboard with {len(entries)} entries")
        return LeaderboardResponse(scope=scope, state=state, entries=entries)
