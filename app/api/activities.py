"""
Activities API router.

Record activities with their calculated emissions and list them.
"""
import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.emissions import get_calculation_service
from app.core.dependencies import get_current_user_id, get_db_session
from app.database.repositories import ActivityRepository, ProfileRepository
from app.pydantic_models.activity import ActivityPayload, ActivityPydModel
from app.services.calculators.emission_calculator import (
    EmissionCalculationError,
    EmissionCalculationService,
)

router = APIRouter(
    prefix="/api/v1/activities",
    tags=["Activities"],
)

logger = logging.getLogger(__name__)


@router.post(
    "",
    response_model=ActivityPydModel,
    status_code=status.HTTP_201_CREATED,
)
async def record_activity(
    activity: ActivityPayload,
    user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
    service: EmissionCalculationService = Depends(get_calculation_service),
):
    """
    Calculate an activity's emissions and store it for the requester.

    Nothing is stored when the activity cannot be calculated.
    """
    if not await ProfileRepository(session).exists(user_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Profile {user_id} not found",
        )

    try:
        created = await service.record(user_id, activity)
    except EmissionCalculationError as e:
        logger.warning(f"Activity rejected for {user_id}: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.message
        )

    await session.commit()
    logger.info(f"Recorded activity {created.id} for {user_id}")
    return created


@router.get("", response_model=list[ActivityPydModel])
async def list_activities(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """The requester's activities, newest first."""
    return await ActivityRepository(session).get_by_user(user_id, skip=skip, limit=limit)
