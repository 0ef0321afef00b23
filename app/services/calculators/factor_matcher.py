"""
Emission factor key resolution.

Maps a category payload to the dot-namespaced key of its emission factor.
Resolution is an exact lookup against the static tables; anything that does
not map returns None and the caller decides how to fail.
"""

import logging
from typing import Optional

from app.pydantic_models.activity import (
    ElectricityPayload,
    FoodPayload,
    TransportPayload,
)
from app.utils.constants import ActivityCategory
from app.utils.emission_factors import (
    DIET_FACTOR_KEY,
    ELECTRICITY_FACTOR_KEY,
    FOOD_FACTOR_KEYS,
    RECYCLING_FACTOR_KEY,
    TRANSPORT_FACTOR_KEYS,
    WASTE_FACTOR_KEY,
)

logger = logging.getLogger(__name__)


class FactorMatcher:
    """
    Resolves factor keys for each activity category.

    Food and transport select a key by subcategory/mode; electricity picks a
    regional key when a state tag is given; the remaining categories have a
    single key each.
    """

    @staticmethod
    def match_food(payload: FoodPayload) -> Optional[str]:
        """Factor key for a food subcategory label or slug."""
        if not payload.subcategory:
            return None
        return FOOD_FACTOR_KEYS.get(payload.subcategory.strip())

    @staticmethod
    def match_transport(payload: TransportPayload) -> Optional[str]:
        """Factor key for a transport mode."""
        if not payload.mode:
            return None
        return TRANSPORT_FACTOR_KEYS.get(payload.mode.strip())

    @staticmethod
    def match_electricity(payload: ElectricityPayload) -> str:
        """
        Factor key for electricity use.

        Example:
            >>> FactorMatcher.match_electricity(ElectricityPayload(kwh=5, state="au-vic"))
            'energy.electricity.kwh.au-vic'
        """
        if payload.state:
            return f"{ELECTRICITY_FACTOR_KEY}.{payload.state.strip().lower()}"
        return ELECTRICITY_FACTOR_KEY

    @classmethod
    def match(cls, category: str, payload) -> Optional[str]:
        """
        Resolve the factor key for a stored category and its payload.

        Args:
            category: Stored activity category (ActivityCategory)
            payload: The populated category sub-payload

        Returns:
            Factor key, or None when the combination has no mapping
        """
        if category == ActivityCategory.FOOD:
            key = cls.match_food(payload)
        elif category == ActivityCategory.TRANSPORT:
            key = cls.match_transport(payload)
        elif category == ActivityCategory.ENERGY:
            key = cls.match_electricity(payload)
        elif category == ActivityCategory.WASTE:
            key = WASTE_FACTOR_KEY
        elif category == ActivityCategory.DIET:
            key = DIET_FACTOR_KEY
        elif category == ActivityCategory.RECYCLING:
            key = RECYCLING_FACTOR_KEY
        else:
            key = None

        if key is None:
            logger.debug(f"No factor key for {category} payload {payload!r}")
        return key
