"""
Profile API router.

The requester's profile, streak and onboarding status.
"""
import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import get_current_user_id, get_db_session
from app.pydantic_models.profile import (
    OnboardingStatus,
    ProfilePydModel,
    ProfileUpdate,
    StreakResponse,
)
from app.services.profile.profile_service import ProfileService

router = APIRouter(
    prefix="/api/v1/profile",
    tags=["Profile"],
)

logger = logging.getLogger(__name__)


def get_profile_service(
    session: AsyncSession = Depends(get_db_session),
) -> ProfileService:
    return ProfileService(session)


@router.get("", response_model=ProfilePydModel)
async def get_profile(
    user_id: UUID = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service),
):
    profile = await service.get(user_id)
    if not profile:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Profile {user_id} not found",
        )
    return profile


@router.patch("", response_model=ProfilePydModel)
async def update_profile(
    changes: ProfileUpdate,
    user_id: UUID = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service),
):
    """
    Update display name, avatar, state or privacy.

    The first update creates the profile.
    """
    profile = await service.update(user_id, changes)
    await service.session.commit()
    return profile


@router.get("/streak", response_model=StreakResponse)
async def get_streak(
    user_id: UUID = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service),
):
    return StreakResponse(current_streak=await service.get_current_streak(user_id))


@router.get("/onboarding", response_model=OnboardingStatus)
async def get_onboarding_status(
    request: Request,
    user_id: UUID = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service),
):
    """Whether the requester finished onboarding; true when it cannot be looked up."""
    completed = await service.get_onboarding_completed(
        user_id, request.app.state.onboarding_loader
    )
    return OnboardingStatus(onboarding_completed=completed)


@router.post("/onboarding/complete", response_model=OnboardingStatus)
async def complete_onboarding(
    user_id: UUID = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service),
):
    profile = await service.complete_onboarding(user_id)
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Profile {user_id} not found",
        )
    await service.session.commit()
    return OnboardingStatus(onboarding_completed=True)
