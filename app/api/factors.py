"""
Emission Factors API router.

Read-only view of the factor table in effect.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.emissions import get_calculation_service
from app.pydantic_models.emission_factor import EffectiveEmissionFactor
from app.services.calculators.emission_calculator import EmissionCalculationService

router = APIRouter(
    prefix="/api/v1/factors",
    tags=["Emission Factors"],
)

logger = logging.getLogger(__name__)


@router.get("", response_model=list[EffectiveEmissionFactor])
async def list_emission_factors(
    service: EmissionCalculationService = Depends(get_calculation_service),
):
    """
    List every factor in effect.

    Local defaults merged with stored overrides; ``source`` says which.
    """
    return await service.list_effective_factors()


@router.get("/{key}", response_model=EffectiveEmissionFactor)
async def get_emission_factor(
    key: str,
    service: EmissionCalculationService = Depends(get_calculation_service),
):
    """
    Get one effective factor by key (e.g., ``food.red_meat.kg``).
    """
    for factor in await service.list_effective_factors():
        if factor.key == key:
            return factor

    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Emission factor {key} not found",
    )
