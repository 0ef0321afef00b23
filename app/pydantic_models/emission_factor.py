"""
Pydantic models for EmissionFactor following kkb_fastapi pattern.
"""
from pydantic import BaseModel, Field


class EffectiveEmissionFactor(BaseModel):
    """Coefficient in effect for a factor key."""

    key: str = Field(..., description="Dot-namespaced factor key")
    co2e_factor: float = Field(..., gt=0, description="kg CO2e per unit")
    unit: str = Field(..., description="Unit of measurement")
    source: str = Field(..., description="'local' default or 'database' override")
