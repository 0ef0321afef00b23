"""
Async session manager following kkb_fastapi pattern.

`Database.init()` is called once from the application lifespan (or the test
fixtures); `async with Database() as session` then yields a session that is
committed on clean exit and rolled back on error.
"""
import logging
from typing import Any, Optional

from sqlalchemy.engine.url import URL
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.database.session_manager.exceptions import (
    DatabaseNotInitialized,
    DatabaseTransactionError,
)

logger = logging.getLogger(__name__)


class Database:
    """Process-wide engine and session maker holder."""

    _async_engine: Optional[AsyncEngine] = None
    _async_session_maker: Optional[async_sessionmaker[AsyncSession]] = None

    def __init__(self):
        self._session: Optional[AsyncSession] = None

    @classmethod
    def init(cls, async_db_url: URL, engine_kw: Optional[dict[str, Any]] = None):
        """
        Create the engine and session maker.

        Args:
            async_db_url: Async database URL
            engine_kw: Extra keyword arguments for create_async_engine
        """
        cls._async_engine = create_async_engine(async_db_url, **(engine_kw or {}))
        cls._async_session_maker = async_sessionmaker(
            bind=cls._async_engine, expire_on_commit=False
        )
        logger.info(f"Database initialized for {async_db_url.drivername}")

    @classmethod
    async def dispose(cls):
        """Close every pooled connection and forget the engine."""
        if cls._async_engine is not None:
            await cls._async_engine.dispose()
        cls._async_engine = None
        cls._async_session_maker = None

    async def __aenter__(self) -> AsyncSession:
        if self._async_session_maker is None:
            raise DatabaseNotInitialized("Call Database.init() before opening a session")
        self._session = self._async_session_maker()
        return self._session

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        session = self._session
        self._session = None
        if session is None:
            return False

        try:
            if exc_type is None:
                await session.commit()
            else:
                await session.rollback()
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Database transaction failed: {e}")
            raise DatabaseTransactionError(str(e)) from e
        finally:
            await session.close()

        if exc_type is not None and issubclass(exc_type, SQLAlchemyError):
            logger.error(f"Database transaction failed: {exc_val}")
            raise DatabaseTransactionError(str(exc_val)) from exc_val
        return False
