"""
Quest service.

Enrollment, progress and completion of quests, plus the badge list.
"""

import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.database.repositories import (
    QuestRepository,
    UserBadgeRepository,
    UserQuestRepository,
)
from app.database.schemas import UserQuestDBModel
from app.pydantic_models.quest import (
    QuestDefinition,
    QuestsOverview,
    UserBadge,
    UserQuest,
)

logger = logging.getLogger(__name__)


class QuestError(Exception):
    """Base class for quest failures."""


class QuestNotFound(QuestError):
    """Unknown, inactive, foreign or already completed quest."""


class AlreadyEnrolled(QuestError):
    """The user is already enrolled in the quest."""


def progress_percent(progress: Optional[float], max_value: Optional[float]) -> int:
    """
    Completion percentage, capped at 100.

    Example:
        >>> progress_percent(3, 4)
        75
        >>> progress_percent(5, None)
        0
    """
    if not max_value or max_value <= 0 or progress is None:
        return 0
    return min(100, int(progress / max_value * 100 + 0.5))


def is_complete(progress: float, max_value: Optional[float]) -> bool:
    return max_value is not None and progress >= max_value


def _user_quest(row: UserQuestDBModel) -> UserQuest:
    quest = row.quest
    return UserQuest(
        id=row.id,
        quest_id=row.quest_id,
        name=quest.name,
        description=quest.description,
        category=quest.category,
        min_value=quest.min_value,
        max_value=quest.max_value,
        points_multiplier=quest.points_multiplier,
        progress=row.progress,
        completed=row.completed,
        completed_at=row.completed_at,
        percent=progress_percent(row.progress, quest.max_value),
    )


class QuestService:
    """Quest operations for one requester per call."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.quest_repo = QuestRepository(session)
        self.user_quest_repo = UserQuestRepository(session)
        self.badge_repo = UserBadgeRepository(session)

    async def get_overview(self, user_id: UUID) -> QuestsOverview:
        """Active and completed enrollments, and active quests not yet taken."""
        user_quests = [_user_quest(r) for r in await self.user_quest_repo.get_by_user(user_id)]
        owned = {q.quest_id for q in user_quests}
        discover = [
            QuestDefinition.model_validate(q)
            for q in await self.quest_repo.get_active()
            if q.id not in owned
        ]
        return QuestsOverview(
            active=[q for q in user_quests if not q.completed],
            completed=[q for q in user_quests if q.completed],
            discover=discover,
        )

    async def enroll(self, user_id: UUID, quest_id: int) -> UserQuest:
        """
        Start a quest at progress 0.

        Raises:
            QuestNotFound: quest unknown or inactive
            AlreadyEnrolled: user already has this quest
        """
        if await self.quest_repo.get_active_by_id(quest_id) is None:
            raise QuestNotFound(f"Quest {quest_id} not found")
        if await self.user_quest_repo.get_by_user_and_quest(user_id, quest_id):
            raise AlreadyEnrolled(f"Already enrolled in quest {quest_id}")

        row = await self.user_quest_repo.create(
            user_id=user_id, quest_id=quest_id, progress=0, completed=False
        )
        logger.info(f"User {user_id} enrolled in quest {quest_id}")
        return _user_quest(await self.user_quest_repo.get_for_user(row.id, user_id))

    async def increment_progress(
        self, user_id: UUID, user_quest_id: int, delta: float = 1
    ) -> UserQuest:
        """
        Add progress to an active enrollment, completing it at the target.

        Raises:
            QuestNotFound: enrollment missing, not the user's, or already completed
        """
        row = await self.user_quest_repo.get_for_user(user_quest_id, user_id)
        if row is None or row.completed:
            raise QuestNotFound(f"Active quest {user_quest_id} not found")

        new_progress = (row.progress or 0) + delta
        completed = is_complete(new_progress, row.quest.max_value)
        await self.user_quest_repo.update(
            row.id,
            progress=new_progress,
            completed=completed,
            completed_at=datetime.utcnow() if completed else None,
        )
        if completed:
            logger.info(f"User {user_id} completed quest {row.quest_id}")
        return _user_quest(await self.user_quest_repo.get_for_user(row.id, user_id))

    async def cancel(self, user_id: UUID, user_quest_id: int) -> None:
        """
        Drop an enrollment.

        Raises:
            QuestNotFound: enrollment missing or not the user's
        """
        row = await self.user_quest_repo.get_for_user(user_quest_id, user_id)
        if row is None:
            raise QuestNotFound(f"Quest {user_quest_id} not found")
        await self.user_quest_repo.delete(row.id)
        logger.info(f"User {user_id} cancelled quest {row.quest_id}")

    async def get_badges(self, user_id: UUID) -> list[UserBadge]:
        """Badges the user has earned, most recent first."""
        return [
            UserBadge(
                badge_id=r.badge_id,
                awarded_at=r.awarded_at,
                code=r.badge.code,
                name=r.badge.name,
                description=r.badge.description,
                icon=r.badge.icon,
            )
            for r in await self.badge_repo.get_by_user(user_id)
        ]
