"""
Emissions API router.

Calculate the emissions of an activity without storing it.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Config
from app.core.dependencies import get_app_config, get_db_session
from app.pydantic_models.activity import ActivityPayload, EmissionResultPydModel
from app.services.calculators.emission_calculator import (
    EmissionCalculationError,
    EmissionCalculationService,
)

router = APIRouter(
    prefix="/api/v1/emissions",
    tags=["Emissions"],
)

logger = logging.getLogger(__name__)


def get_calculation_service(
    session: AsyncSession = Depends(get_db_session),
    config: Config = Depends(get_app_config),
) -> EmissionCalculationService:
    use_db = config.section("emission_calculation").get("use_database_factors", True)
    return EmissionCalculationService(session, use_database_factors=use_db)


@router.post("/calculate", response_model=EmissionResultPydModel)
async def calculate_emission(
    activity: ActivityPayload,
    service: EmissionCalculationService = Depends(get_calculation_service),
):
    """
    Calculate emissions for one activity.

    Example:
        ```
        POST /api/v1/emissions/calculate
        {
            "category": "Food",
            "food": {"subcategory": "Red Meat", "amountKg": 0.25}
        }
        ```
    """
    try:
        return await service.calculate(activity)
    except EmissionCalculationError as e:
        logger.warning(f"Emission calculation rejected: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.message
        )
