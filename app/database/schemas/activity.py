"""
Activity SQLAlchemy model.

One row per logged activity, with the emission computed at insert time.
"""
import uuid
from datetime import datetime

from sqlalchemy import JSON, Column, DateTime, Float, ForeignKey, Index, String, Uuid

from app.database import Base


class ActivityDBModel(Base):
    """Logged activity and its calculated emissions."""

    __tablename__ = "activities"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)

    user_id = Column(
        Uuid,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    category = Column(
        String(50),
        nullable=False,
        comment="Stored category (food, transport, energy, waste, diet, recycling)",
    )

    type = Column(
        String(100),
        nullable=False,
        comment="Subcategory or mode (e.g., 'Red Meat', 'Bus')",
    )

    quantity = Column(Float, nullable=False)

    unit = Column(String(20), nullable=False, comment="kg, km, kWh, meal or item")

    emission_kg = Column(
        Float,
        nullable=False,
        comment="Calculated emissions in kg CO2e",
    )

    factor_key = Column(
        String(100),
        nullable=False,
        comment="Emission factor key used for the calculation",
    )

    meta = Column(
        JSON,
        nullable=True,
        default=dict,
        comment="Submitted category payload",
    )

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        Index("ix_activities_user_created", "user_id", "created_at"),
        {"comment": "Logged carbon activities"},
    )

    def __repr__(self):
        return (
            f"<ActivityDBModel: {self.type} {self.quantity} {self.unit} "
            f"= {self.emission_kg} kg>"
        )
