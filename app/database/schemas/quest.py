"""
Quest SQLAlchemy models.
"""
from datetime import datetime

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import relationship

from app.database import Base


class QuestDBModel(Base):
    """Quest definition."""

    __tablename__ = "quests"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    description = Column(String, nullable=True)
    category = Column(String(50), nullable=True)
    min_value = Column(Float, nullable=True)
    max_value = Column(
        Float,
        nullable=True,
        comment="Progress target; reaching it completes the quest",
    )
    points_multiplier = Column(Float, nullable=False, default=1.0)
    active = Column(Boolean, nullable=False, default=True, index=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = ({"comment": "Quest definitions"},)

    def __repr__(self):
        return f"<QuestDBModel: {self.name}>"


class UserQuestDBModel(Base):
    """A user's enrollment in a quest and their progress."""

    __tablename__ = "user_quests"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Uuid, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    quest_id = Column(
        Integer, ForeignKey("quests.id", ondelete="CASCADE"), nullable=False
    )
    progress = Column(Float, nullable=True, default=0)
    completed = Column(Boolean, nullable=False, default=False)
    completed_at = Column(DateTime, nullable=True)
    date_started = Column(DateTime, default=datetime.utcnow, nullable=False)

    quest = relationship("QuestDBModel", lazy="joined")

    __table_args__ = (
        UniqueConstraint("user_id", "quest_id", name="uq_user_quests_user_quest"),
        {"comment": "Quest enrollments and progress"},
    )

    def __repr__(self):
        return f"<UserQuestDBModel: {self.user_id} quest={self.quest_id} progress={self.progress}>"
