"""
Quests and badges API router.
"""
import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import get_current_user_id, get_db_session
from app.pydantic_models.quest import (
    QuestProgressUpdate,
    QuestsOverview,
    UserBadge,
    UserQuest,
)
from app.services.quests.quest_service import (
    AlreadyEnrolled,
    QuestNotFound,
    QuestService,
)

router = APIRouter(
    prefix="/api/v1",
    tags=["Quests"],
)

logger = logging.getLogger(__name__)


def get_quest_service(session: AsyncSession = Depends(get_db_session)) -> QuestService:
    return QuestService(session)


@router.get("/quests", response_model=QuestsOverview)
async def get_quests(
    user_id: UUID = Depends(get_current_user_id),
    service: QuestService = Depends(get_quest_service),
):
    """Active, completed and discoverable quests for the requester."""
    return await service.get_overview(user_id)


@router.post(
    "/quests/{quest_id}/enroll",
    response_model=UserQuest,
    status_code=status.HTTP_201_CREATED,
)
async def enroll_in_quest(
    quest_id: int,
    user_id: UUID = Depends(get_current_user_id),
    service: QuestService = Depends(get_quest_service),
):
    try:
        enrolled = await service.enroll(user_id, quest_id)
    except QuestNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except AlreadyEnrolled as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    await service.session.commit()
    return enrolled


@router.post("/quests/enrolled/{user_quest_id}/progress", response_model=UserQuest)
async def add_quest_progress(
    user_quest_id: int,
    update: QuestProgressUpdate | None = None,
    user_id: UUID = Depends(get_current_user_id),
    service: QuestService = Depends(get_quest_service),
):
    """Add progress to an active quest; completes it when the target is reached."""
    try:
        quest = await service.increment_progress(
            user_id, user_quest_id, update.delta if update else 1
        )
    except QuestNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    await service.session.commit()
    return quest


@router.delete(
    "/quests/enrolled/{user_quest_id}", status_code=status.HTTP_204_NO_CONTENT
)
async def cancel_quest(
    user_quest_id: int,
    user_id: UUID = Depends(get_current_user_id),
    service: QuestService = Depends(get_quest_service),
):
    try:
        await service.cancel(user_id, user_quest_id)
    except QuestNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    await service.session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/badges", response_model=list[UserBadge], tags=["Badges"])
async def get_badges(
    user_id: UUID = Depends(get_current_user_id),
    service: QuestService = Depends(get_quest_service),
):
    return await service.get_badges(user_id)
