"""
Pydantic models for leaderboards following kkb_fastapi pattern.
"""
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.utils.constants import LeaderboardScopeEnum


class ProfileSummary(BaseModel):
    """Read-only projection of a profile row, as ranked by the leaderboard."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: UUID
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None
    total_points: Optional[int] = None
    state: Optional[str] = None
    is_private: Optional[bool] = False


class RankedEntry(BaseModel):
    """One leaderboard row."""

    id: UUID
    display_name: str
    avatar_url: Optional[str] = None
    total_points: int
    rank: int = Field(..., ge=1, description="1-based position")
    state: Optional[str] = None
    you: bool
    friend: bool = False


class LeaderboardResponse(BaseModel):
    """Leaderboard for a scope."""

    scope: LeaderboardScopeEnum
    state: Optional[str] = Field(None, description="Region of a regional leaderboard")
    entries: list[RankedEntry]
