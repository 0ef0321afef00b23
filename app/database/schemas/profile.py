"""
Profile SQLAlchemy model.

Public projection of a user account: display data, points, streak and the
privacy/region flags the leaderboard filters on.
"""
import uuid
from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, Index, Integer, String, Uuid

from app.database import Base


class ProfileDBModel(Base):
    """User profile, keyed by the auth user id."""

    __tablename__ = "profiles"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)

    display_name = Column(
        String(100),
        nullable=True,
        index=True,
        comment="Public name; shown as 'Anon' when empty",
    )

    avatar_url = Column(String(500), nullable=True)

    total_points = Column(
        Integer,
        nullable=True,
        default=0,
        comment="Points accrued from quests and activities",
    )

    state = Column(
        String(10),
        nullable=True,
        index=True,
        comment="Region tag (e.g., 'au-vic') used by the regional leaderboard",
    )

    is_private = Column(
        Boolean,
        nullable=False,
        default=False,
        comment="Hide from other users' leaderboards",
    )

    current_streak = Column(Integer, nullable=False, default=0)

    onboarding_completed = Column(Boolean, nullable=False, default=False)

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    __table_args__ = (
        Index("ix_profiles_total_points", "total_points"),
        {"comment": "User profiles for leaderboards and social features"},
    )

    def __repr__(self):
        return f"<ProfileDBModel: {self.display_name} ({self.total_points} pts)>"
