"""
Repository for EmissionFactor database operations.

Handles all database interactions for stored emission factors.
"""
import logging
from typing import Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.repositories.base import BaseRepository
from app.database.schemas import EmissionFactorDBModel

logger = logging.getLogger(__name__)


class EmissionFactorRepository(BaseRepository[EmissionFactorDBModel]):
    """Repository for emission factor operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(EmissionFactorDBModel, session)

    async def get_by_key(self, key: str) -> Optional[EmissionFactorDBModel]:
        """
        Get emission factor by its factor key.

        Args:
            key: Dot-namespaced factor key

        Returns:
            Emission factor if found, None otherwise
        """
        stmt = select(self.model).where(self.model.key == key)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_all_ordered(self) -> List[EmissionFactorDBModel]:
        """All stored factors ordered by key."""
        stmt = select(self.model).order_by(self.model.key)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_coefficients(self) -> Dict[str, float]:
        """
        Stored coefficients keyed by factor key.

        Rows with a non-positive coefficient are skipped.
        """
        coefficients = {}
        for factor in await self.get_all_ordered():
            value = float(factor.co2e_factor)
            if value <= 0:
                logger.warning(
                    f"Ignoring stored emission factor {factor.key} with non-positive value {value}"
                )
                continue
            coefficients[factor.key] = value
        return coefficients
