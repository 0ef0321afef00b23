"""
Onboarding status lookups.

Concurrent requests for the same user share one query; nothing is kept once
the query finishes, so every new request sees the stored value.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional
from uuid import UUID

logger = logging.getLogger(__name__)

StatusFetcher = Callable[[UUID], Awaitable[Optional[bool]]]


class OnboardingStatusLoader:
    """
    De-duplicates in-flight onboarding status queries by user id.

    One instance lives on the application state; it holds only the tasks
    currently running.
    """

    def __init__(self):
        self._in_flight: dict[UUID, asyncio.Task] = {}

    @property
    def in_flight(self) -> int:
        return len(self._in_flight)

    async def load(self, user_id: UUID, fetch: StatusFetcher) -> bool:
        """
        Whether the user finished onboarding.

        A failed or empty lookup counts as completed so the user is not
        held on the onboarding screen.

        Args:
            user_id: User to look up
            fetch: Coroutine function returning the stored flag, or None if no row
        """
        task = self._in_flight.get(user_id)
        if task is None:
            task = asyncio.ensure_future(self._fetch(user_id, fetch))
            self._in_flight[user_id] = task
            task.add_done_callback(lambda _: self._in_flight.pop(user_id, None))
        return await asyncio.shield(task)

    async def _fetch(self, user_id: UUID, fetch: StatusFetcher) -> bool:
        try:
            completed = await fetch(user_id)
        except Exception as e:
            logger.warning(f"Failed to load onboarding status for {user_id}: {e}")
            return True
        if completed is None:
            logger.warning(f"No profile for {user_id}; treating onboarding as completed")
            return True
        return bool(completed)
