"""
EmissionFactor SQLAlchemy model.

Stored coefficients override the local factor table key by key.
"""
import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, Numeric, String, Uuid

from app.database import Base


class EmissionFactorDBModel(Base):
    """
    Emission factor lookup table.

    Maps dot-namespaced factor keys to kg CO2e per unit.
    """

    __tablename__ = "emission_factors"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)

    key = Column(
        String(100),
        nullable=False,
        unique=True,
        index=True,
        comment="Factor key (e.g., 'transport.bus.km')",
    )

    unit = Column(
        String(20),
        nullable=False,
        comment="Unit of measurement (kg, km, kWh, meal, item)",
    )

    co2e_factor = Column(
        Numeric(10, 6, asdecimal=False),
        nullable=False,
        comment="kg CO2e per unit",
    )

    source = Column(
        String(200),
        nullable=True,
        comment="Source of the emission factor",
    )

    notes = Column(String, nullable=True)

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    __table_args__ = ({"comment": "Emission factor overrides for CO2e calculations"},)

    def __repr__(self):
        return f"<EmissionFactorDBModel: {self.key} = {self.co2e_factor}>"
