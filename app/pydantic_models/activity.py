"""
Pydantic models for Activity Data following kkb_fastapi pattern.

Request payloads mirror the activity form: a category label plus exactly one
category-specific sub-object. Field aliases accept the form's camelCase keys.
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.utils.constants import ActivityCategoryEnum


class _FormPayload(BaseModel):
    """Base for category sub-payloads."""

    model_config = ConfigDict(populate_by_name=True)


class FoodPayload(_FormPayload):
    """Food eaten, by subcategory and weight."""

    subcategory: str | None = Field(None, description="Food subcategory label or slug")
    amount_kg: float | None = Field(None, alias="amountKg", description="Amount in kg")


class TransportPayload(_FormPayload):
    """Trip by mode and duration."""

    mode: str | None = Field(None, description="Transport mode, e.g. 'Bus'")
    duration_hours: float | None = Field(None, alias="durationHours")
    duration_minutes: float | None = Field(None, alias="durationMinutes")
    total_minutes: float | None = Field(
        None, alias="totalMinutes", description="Total duration; wins over hours/minutes"
    )


class ElectricityPayload(_FormPayload):
    """Electricity used."""

    kwh: float | None = Field(None, alias="kWh", description="Consumption in kWh")
    state: str | None = Field(
        None, description="Optional region tag selecting a regional grid factor"
    )


class WastePayload(_FormPayload):
    """Mixed waste produced."""

    amount_kg: float | None = Field(None, alias="amountKg")


class DietPayload(_FormPayload):
    """Meatless meals eaten."""

    meals: float | None = None


class RecyclingPayload(_FormPayload):
    """Plastic items recycled."""

    items: float | None = None


class ActivityPayload(BaseModel):
    """Activity as submitted by the form (request body)."""

    category: ActivityCategoryEnum | None = Field(
        None, description="Form tab the activity came from; informational"
    )
    food: FoodPayload | None = None
    transport: TransportPayload | None = None
    electricity: ElectricityPayload | None = None
    waste: WastePayload | None = None
    diet: DietPayload | None = None
    recycling: RecyclingPayload | None = None


class EmissionResultPydModel(BaseModel):
    """Result of an emission calculation."""

    category: str
    type: str
    quantity: float
    unit: str
    emission_kg: float
    factor_key: str
    meta: dict[str, Any] = Field(default_factory=dict)


class ActivityPydModel(EmissionResultPydModel):
    """Model for a recorded activity response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    meta: dict[str, Any] | None = None
    created_at: datetime
