"""
Database seeding service for reference data.

Loads the default emission factors plus the quest and badge catalogues from
CSV files.

Usage:
    from app.services.seed_database import DatabaseSeeder

    async with DatabaseSeeder() as seeder:
        await seeder.seed_all(clear_existing=True)
"""

import csv
import logging
from pathlib import Path
from typing import Any, Optional

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.repositories import EmissionFactorRepository, QuestRepository
from app.database.repositories.base import BaseRepository
from app.database.schemas import (
    BadgeDBModel,
    EmissionFactorDBModel,
    QuestDBModel,
    UserBadgeDBModel,
    UserQuestDBModel,
)
from app.database.session_manager.db_session import Database
from app.utils.emission_factors import EMISSION_FACTORS, unit_for_key

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent / "seed_data"
SEED_SOURCE = "GreenSteps default factor table"


def _optional_float(value: Optional[str]) -> Optional[float]:
    value = (value or "").strip()
    return float(value) if value else None


def _as_bool(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in ("true", "1", "yes")


class DatabaseSeeder:
    """Service for seeding reference data."""

    def __init__(
        self,
        session: AsyncSession | None = None,
        data_dir: str | Path = DEFAULT_DATA_DIR,
    ):
        """
        Initialize the database seeder.

        Args:
            session: Optional async database session. If not provided, will create one.
            data_dir: Directory containing quests.csv and badges.csv
        """
        self._session = session
        self._external_session = session is not None
        self.data_dir = Path(data_dir)

        if not self.data_dir.exists():
            raise ValueError(f"Data directory not found: {self.data_dir}")

    async def __aenter__(self):
        if not self._external_session:
            db = Database()
            self._session = await db.__aenter__()
            self._db_context = db
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if not self._external_session and hasattr(self, "_db_context"):
            await self._db_context.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def session(self) -> AsyncSession:
        if not self._session:
            raise RuntimeError("Session not initialized. Use as context manager.")
        return self._session

    async def seed_all(
        self, clear_existing: bool = False, skip_factors: bool = False
    ) -> dict[str, Any]:
        """
        Seed factors, quests and badges.

        Args:
            clear_existing: Delete existing reference data (and enrollments) first
            skip_factors: Leave the emission_factors table alone

        Returns:
            Dictionary with seeding statistics
        """
        logger.info("Starting database seeding")
        stats = {"emission_factors": 0, "quests": 0, "badges": 0, "errors": []}

        try:
            if clear_existing:
                await self._clear_existing_data(include_factors=not skip_factors)

            if not skip_factors:
                stats["emission_factors"] = await self.seed_emission_factors()
            stats["quests"] = await self.seed_quests(stats["errors"])
            stats["badges"] = await self.seed_badges(stats["errors"])

            await self.session.commit()
            logger.info(f"Database seeding completed: {stats}")
            return stats

        except Exception as e:
            logger.error(f"Error during database seeding: {e}", exc_info=True)
            await self.session.rollback()
            raise

    async def _clear_existing_data(self, include_factors: bool = True):
        logger.info("Clearing existing reference data")

        # Children before parents
        await self.session.execute(delete(UserQuestDBModel))
        await self.session.execute(delete(UserBadgeDBModel))
        await self.session.execute(delete(QuestDBModel))
        await self.session.execute(delete(BadgeDBModel))
        if include_factors:
            await self.session.execute(delete(EmissionFactorDBModel))

        await self.session.commit()
        logger.info("Existing data cleared")

    async def seed_emission_factors(self) -> int:
        """
        Store the local factor table, skipping keys already present.

        Returns:
            Number of emission factors created
        """
        repo = EmissionFactorRepository(self.session)
        count = 0
        for key, value in EMISSION_FACTORS.items():
            if await repo.get_by_key(key) is not None:
                continue
            await repo.create(
                key=key, unit=unit_for_key(key), co2e_factor=value, source=SEED_SOURCE
            )
            count += 1

        logger.info(f"Created {count} emission factors")
        return count

    async def seed_quests(self, errors: list[str]) -> int:
        """
        Load quest definitions from quests.csv, skipping names already present.

        Returns:
            Number of quests created
        """
        csv_file = self.data_dir / "quests.csv"
        if not csv_file.exists():
            logger.warning(f"File not found: {csv_file}")
            return 0

        repo = QuestRepository(self.session)
        existing = {q.name for q in await repo.get_all(limit=10_000)}
        count = 0

        with open(csv_file, "r", encoding="utf-8") as f:
            for row in csv.DictReader(f):
                if row["Name"] in existing:
                    continue
                try:
                    await repo.create(
                        name=row["Name"],
                        description=row["Description"] or None,
                        category=row["Category"] or None,
                        min_value=_optional_float(row["Min"]),
                        max_value=_optional_float(row["Max"]),
                        points_multiplier=float(row["Points Multiplier"]),
                        active=_as_bool(row["Active"]),
                    )
                    count += 1
                except (KeyError, ValueError) as e:
                    logger.warning(f"Failed to create quest from row {row}: {e}")
                    errors.append(f"quest {row.get('Name')}: {e}")

        logger.info(f"Created {count} quests")
        return count

    async def seed_badges(self, errors: list[str]) -> int:
        """
        Load badge definitions from badges.csv, skipping codes already present.

        Returns:
            Number of badges created
        """
        csv_file = self.data_dir / "badges.csv"
        if not csv_file.exists():
            logger.warning(f"File not found: {csv_file}")
            return 0

        repo = BaseRepository(BadgeDBModel, self.session)
        existing = {b.code for b in await repo.get_all(limit=10_000)}
        count = 0

        with open(csv_file, "r", encoding="utf-8") as f:
            for row in csv.DictReader(f):
                if row["Code"] in existing:
                    continue
                try:
                    await repo.create(
                        code=row["Code"],
                        name=row["Name"],
                        description=row["Description"] or None,
                        icon=row["Icon"] or None,
                    )
                    count += 1
                except KeyError as e:
                    logger.warning(f"Failed to create badge from row {row}: {e}")
                    errors.append(f"badge {row.get('Code')}: {e}")

        logger.info(f"Created {count} badges")
        return count
