"""
Pydantic models for quests and badges following kkb_fastapi pattern.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class QuestDefinition(BaseModel):
    """Quest definition."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    category: Optional[str] = None
    min_value: Optional[float] = None
    max_value: Optional[float] = None
    points_multiplier: float


class UserQuest(BaseModel):
    """A quest the user is enrolled in, with progress."""

    id: int = Field(..., description="Enrollment id")
    quest_id: int
    name: str
    description: Optional[str] = None
    category: Optional[str] = None
    min_value: Optional[float] = None
    max_value: Optional[float] = None
    points_multiplier: float
    progress: Optional[float] = None
    completed: bool
    completed_at: Optional[datetime] = None
    percent: int = Field(..., ge=0, le=100)


class QuestsOverview(BaseModel):
    active: list[UserQuest]
    completed: list[UserQuest]
    discover: list[QuestDefinition]


class QuestProgressUpdate(BaseModel):
    delta: float = Field(1, gt=0, description="Progress to add")


class UserBadge(BaseModel):
    """Badge the user has earned."""

    badge_id: int
    awarded_at: datetime
    code: str
    name: str
    description: Optional[str] = None
    icon: Optional[str] = None
