"""
Pydantic models for Profile following kkb_fastapi pattern.
"""
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.utils.constants import AustralianStateEnum


class ProfileUpdate(BaseModel):
    """Model for updating the requester's profile."""

    display_name: Optional[str] = Field(None, max_length=100)
    avatar_url: Optional[str] = Field(None, max_length=500)
    state: Optional[AustralianStateEnum] = None
    is_private: Optional[bool] = None


class ProfilePydModel(BaseModel):
    """Model for profile response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None
    total_points: Optional[int] = None
    state: Optional[str] = None
    is_private: bool
    current_streak: int
    onboarding_completed: bool
    created_at: datetime
    updated_at: datetime


class StreakResponse(BaseModel):
    current_streak: int


class OnboardingStatus(BaseModel):
    onboarding_completed: bool
