"""
FriendRequest SQLAlchemy model.
"""
from datetime import datetime

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import relationship

from app.database import Base
from app.utils.constants import FriendRequestStatus


class FriendRequestDBModel(Base):
    """
    Friend request between two profiles.

    A pending row is an open request; once accepted the same row is the
    friendship, in both directions.
    """

    __tablename__ = "friend_requests"

    id = Column(Integer, primary_key=True, autoincrement=True)

    requester_id = Column(
        Uuid, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    )
    recipient_id = Column(
        Uuid, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    )

    status = Column(
        String(20),
        nullable=False,
        default=FriendRequestStatus.PENDING,
        comment="pending or accepted",
    )

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    requester = relationship("ProfileDBModel", foreign_keys=[requester_id], lazy="joined")
    recipient = relationship("ProfileDBModel", foreign_keys=[recipient_id], lazy="joined")

    __table_args__ = (
        UniqueConstraint("requester_id", "recipient_id", name="uq_friend_requests_pair"),
        Index("ix_friend_requests_recipient_status", "recipient_id", "status"),
        Index("ix_friend_requests_requester_status", "requester_id", "status"),
        {"comment": "Friend requests and accepted friendships"},
    )

    def __repr__(self):
        return f"<FriendRequestDBModel: {self.requester_id} -> {self.recipient_id} ({self.status})>"
