"""
Emission calculation.

`compute_emission` is the pure calculation: activity payload in, emission
result out, or one of the EmissionCalculationError subclasses. The
EmissionCalculationService wraps it with the database: stored factors
override the local table, and `record` persists the result as an activity.
"""

import logging
import math
from typing import Any, Mapping
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.database.repositories import ActivityRepository, EmissionFactorRepository
from app.database.schemas import ActivityDBModel
from app.pydantic_models.activity import ActivityPayload, EmissionResultPydModel
from app.pydantic_models.emission_factor import EffectiveEmissionFactor
from app.utils.constants import ActivityCategory, FactorSource
from app.utils.emission_factors import (
    AVERAGE_SPEED_KMH,
    EMISSION_FACTORS,
    FACTOR_UNITS,
    MAX_QUANTITY,
    unit_for_key,
)

from .factor_matcher import FactorMatcher
from .unit_converter import UnitConverter

logger = logging.getLogger(__name__)


class EmissionCalculationError(Exception):
    """
    Base class for activities that cannot be turned into an emission value.

    The message is meant for the user as-is.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UnsupportedActivity(EmissionCalculationError):
    """No category payload, or more than one."""


class InvalidQuantity(EmissionCalculationError):
    """Quantity missing, non-numeric, non-finite, not positive or over the cap."""


class UnresolvedFactorKey(EmissionCalculationError):
    """No emission factor for the category/subcategory combination."""


# Payload attribute -> stored category
PAYLOAD_CATEGORIES = {
    "food": ActivityCategory.FOOD,
    "transport": ActivityCategory.TRANSPORT,
    "electricity": ActivityCategory.ENERGY,
    "waste": ActivityCategory.WASTE,
    "diet": ActivityCategory.DIET,
    "recycling": ActivityCategory.RECYCLING,
}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _detect_category(activity: ActivityPayload) -> tuple[str, Any]:
    populated = [
        (category, getattr(activity, field))
        for field, category in PAYLOAD_CATEGORIES.items()
        if getattr(activity, field) is not None
    ]
    if len(populated) != 1:
        raise UnsupportedActivity("Unsupported activity payload")
    return populated[0]


def _quantity_and_type(category: str, payload) -> tuple[Any, str]:
    if category == ActivityCategory.FOOD:
        return payload.amount_kg, payload.subcategory or "food"

    if category == ActivityCategory.TRANSPORT:
        minutes = UnitConverter.total_minutes(
            duration_hours=payload.duration_hours,
            duration_minutes=payload.duration_minutes,
            total_minutes=payload.total_minutes,
        )
        if not math.isfinite(minutes):
            raise InvalidQuantity("Quantity must be > 0")
        speed = AVERAGE_SPEED_KMH.get(payload.mode or "", 0)
        return UnitConverter.minutes_to_km(minutes, speed), payload.mode or "transport"

    if category == ActivityCategory.ENERGY:
        return payload.kwh, "electricity"
    if category == ActivityCategory.WASTE:
        return payload.amount_kg, "waste"
    if category == ActivityCategory.DIET:
        return payload.meals, "meatless_meal"
    return payload.items, "plastic_item"


def compute_emission(
    activity: ActivityPayload,
    factors: Mapping[str, float] = EMISSION_FACTORS,
) -> EmissionResultPydModel:
    """
    Calculate the emissions of one activity.

    Args:
        activity: Activity payload with exactly one category sub-object
        factors: Factor key -> kg CO2e per unit

    Returns:
        EmissionResultPydModel with quantity, unit, factor key and emission_kg

    Raises:
        UnsupportedActivity: Zero or several category payloads
        InvalidQuantity: Quantity not a finite number > 0, or over the category cap
        UnresolvedFactorKey: No factor for the category/subcategory

    Formula:
        emission_kg = round2(quantity * factors[factor_key])

    Example:
        >>> compute_emission(ActivityPayload(food={"subcategory": "Red Meat", "amountKg": 0.25}))
        EmissionResultPydModel(category='food', type='Red Meat', quantity=0.25, unit='kg',
                               emission_kg=5.9, factor_key='food.red_meat.kg', ...)
    """
    category, payload = _detect_category(activity)
    quantity, activity_type = _quantity_and_type(category, payload)

    if not _is_number(quantity) or not math.isfinite(quantity) or quantity <= 0:
        raise InvalidQuantity("Quantity must be > 0")

    cap = MAX_QUANTITY.get(category)
    if cap is not None and quantity > cap:
        raise InvalidQuantity(f"Quantity must not exceed {cap} {FACTOR_UNITS[category]}")

    factor_key = FactorMatcher.match(category, payload)
    if factor_key is None or factor_key not in factors:
        raise UnresolvedFactorKey("No emission factor key resolved")

    emission_kg = UnitConverter.round2(quantity * factors[factor_key])
    if not math.isfinite(emission_kg):
        raise InvalidQuantity("Quantity is too large")

    return EmissionResultPydModel(
        category=category,
        type=activity_type,
        quantity=float(quantity),
        unit=FACTOR_UNITS[category],
        emission_kg=emission_kg,
        factor_key=factor_key,
        meta=payload.model_dump(by_alias=True, exclude_none=True),
    )


class EmissionCalculationService:
    """
    Database-aware emission calculation.

    Stored factors are authoritative; the local table fills every key the
    store does not define.
    """

    def __init__(self, session: AsyncSession, use_database_factors: bool = True):
        """
        Initialize service with database session.

        Args:
            session: Database session
            use_database_factors: Merge stored factor overrides over the local table
        """
        self.session = session
        self.use_database_factors = use_database_factors
        self.factor_repo = EmissionFactorRepository(session)
        self.activity_repo = ActivityRepository(session)

    async def get_stored_factors(self) -> dict[str, float]:
        if not self.use_database_factors:
            return {}
        return await self.factor_repo.get_coefficients()

    async def get_effective_factors(self) -> dict[str, float]:
        """Local defaults with stored overrides applied."""
        return {**EMISSION_FACTORS, **await self.get_stored_factors()}

    async def list_effective_factors(self) -> list[EffectiveEmissionFactor]:
        """Every factor in effect, labelled with where it came from."""
        stored = await self.get_stored_factors()
        merged = {**EMISSION_FACTORS, **stored}
        return [
            EffectiveEmissionFactor(
                key=key,
                co2e_factor=value,
                unit=unit_for_key(key),
                source=FactorSource.DATABASE if key in stored else FactorSource.LOCAL,
            )
            for key, value in sorted(merged.items())
        ]

    async def calculate(self, activity: ActivityPayload) -> EmissionResultPydModel:
        """
        Calculate emissions with the effective factor table.

        Raises:
            EmissionCalculationError: If the activity cannot be calculated
        """
        factors = await self.get_effective_factors()
        result = compute_emission(activity, factors)
        logger.info(
            f"Calculated {result.emission_kg} kg CO2e for {result.quantity} {result.unit} "
            f"({result.factor_key})"
        )
        return result

    async def record(self, user_id: UUID, activity: ActivityPayload) -> ActivityDBModel:
        """
        Calculate and store an activity for a user.

        Nothing is written when the calculation fails.

        Args:
            user_id: Owner profile id
            activity: Submitted activity

        Returns:
            The inserted ActivityDBModel

        Raises:
            EmissionCalculationError: If the activity cannot be calculated
        """
        result = await self.calculate(activity)
        return await self.activity_repo.create(
            user_id=user_id,
            category=result.category,
            type=result.type,
            quantity=result.quantity,
            unit=result.unit,
            emission_kg=result.emission_kg,
            factor_key=result.factor_key,
            meta=result.meta,
        )
