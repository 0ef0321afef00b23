"""
Badge SQLAlchemy models.
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import relationship

from app.database import Base


class BadgeDBModel(Base):
    """Badge definition."""

    __tablename__ = "badges"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(50), nullable=False, unique=True)
    name = Column(String(100), nullable=False)
    description = Column(String, nullable=True)
    icon = Column(String(200), nullable=True)

    def __repr__(self):
        return f"<BadgeDBModel: {self.code}>"


class UserBadgeDBModel(Base):
    """Badge awarded to a user."""

    __tablename__ = "user_badges"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Uuid, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    badge_id = Column(
        Integer, ForeignKey("badges.id", ondelete="CASCADE"), nullable=False
    )
    awarded_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    badge = relationship("BadgeDBModel", lazy="joined")

    def __repr__(self):
        return f"<UserBadgeDBModel: {self.user_id} badge={self.badge_id}>"
