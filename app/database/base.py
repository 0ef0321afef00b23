"""
Database base configuration following kkb_fastapi pattern.

Handles async engine creation and session management. PostgreSQL (asyncpg)
is the deployment target; the test configuration runs on SQLite (aiosqlite).
"""
import asyncio
import contextlib
import functools
import logging
from pathlib import Path
from typing import Any

from alembic import command
from alembic.config import Config as alembic_config
from sqlalchemy import text
from sqlalchemy.engine.url import URL
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from app.core.config import Config

DEFAULT_DRIVERNAME = "postgresql+asyncpg"

engine_kw = {
    "pool_pre_ping": True,
    # feature will normally emit SQL equivalent to "SELECT 1" each time a connection is checked out from the pool
    "pool_size": 2,  # number of connections to keep open at a time
    "max_overflow": 4,  # number of connections to allow to be opened above pool_size
    "connect_args": {
        "prepared_statement_cache_size": 0,  # disable prepared statement cache
        "statement_cache_size": 0,  # disable statement cache
    },
}


def get_db_url(config: Config) -> URL:
    """
    Construct database URL from config.
    """
    config_db = dict(config.data["db"])
    drivername = config_db.pop("drivername", DEFAULT_DRIVERNAME)
    return URL.create(drivername=drivername, **config_db)


def get_engine_kw(async_db_url: URL) -> dict[str, Any]:
    """
    Engine options for the URL's driver.

    The pool and statement-cache options only apply to asyncpg.
    """
    if async_db_url.drivername.startswith("postgresql"):
        return engine_kw
    return {}


def get_async_engine(async_db_url: URL) -> AsyncEngine:
    """
    Create async database engine with connection pooling.
    """
    if not async_db_url.drivername.startswith("postgresql"):
        return create_async_engine(async_db_url)

    async_engine = create_async_engine(
        async_db_url,
        pool_recycle=3600,
        pool_pre_ping=True,
        pool_size=60,
        max_overflow=80,
        pool_timeout=30,
    )
    return async_engine


async def create_database(config: Config) -> bool:
    """
    Ensures the PostgreSQL database specified in the config exists.
    Connects to a maintenance database (e.g., 'postgres') to issue the CREATE DATABASE command.

    Args:
        config: The application configuration.

    Returns:
        True if the database was newly created by this function.
        False if the database already existed or the driver creates it on connect.

    Raises:
        ValueError: If the database name is missing in the configuration.
        Exception: If any other unexpected error occurs during the database creation process.
    """
    original_db_params_copy = dict(config.data["db"])
    drivername = original_db_params_copy.pop("drivername", DEFAULT_DRIVERNAME)
    if not drivername.startswith("postgresql"):
        # SQLite creates the file on first connect
        return False

    logging.info("Creating database...")
    target_database_name = original_db_params_copy.pop("database", None)

    if not target_database_name:
        logging.error("Database name not found in configuration for creation.")
        raise ValueError("Database name missing in configuration for creation.")

    if "user" in original_db_params_copy and "username" not in original_db_params_copy:
        original_db_params_copy["username"] = original_db_params_copy.pop("user")

    maintenance_db_connect_params = {**original_db_params_copy, "database": "postgres"}

    maintenance_url = URL.create(drivername=drivername, **maintenance_db_connect_params)
    maintenance_engine = None
    try:
        maintenance_engine = get_async_engine(maintenance_url)
        logging.info(
            f"Attempting to create database '{target_database_name}' in {original_db_params_copy.get('host')} if it does not exist."
        )
        async with maintenance_engine.connect() as connection:
            # CREATE DATABASE cannot run inside a transaction block
            autocommit_connection = await connection.execution_options(
                isolation_level="AUTOCOMMIT"
            )
            await autocommit_connection.execute(
                text(f'CREATE DATABASE "{target_database_name}"')
            )
        logging.info(f"Database '{target_database_name}' created successfully.")
        return True
    except DBAPIError as e:
        # 42P04 is duplicate_database
        with contextlib.suppress(AttributeError):
            if (
                e.orig is not None
                and getattr(e.orig, "pgcode", None) == "42P04"
            ):
                logging.warning(
                    f"Database '{target_database_name}' already exists (detected by pgcode '42P04'). No action taken."
                )
                return False

        logging.error(
            f"A DBAPIError occurred while trying to create database '{target_database_name}': {e}"
        )
        raise
    finally:
        if maintenance_engine:
            await maintenance_engine.dispose()


async def apply_db_migration(config: Config):
    """
    Apply database migrations before the application starts serving.

    Args:
        config: The application configuration containing database connection details.
    """
    await create_database(config)

    alembic_cfg = alembic_config(str(Path.cwd() / "alembic.ini"))
    alembic_cfg.set_main_option(
        "script_location", str(Path.cwd() / "alembic_migrations")
    )

    # Alembic runs synchronously: swap the async driver for its sync counterpart
    async_url = get_db_url(config)
    sync_url = async_url.set(
        drivername=async_url.drivername.replace("+asyncpg", "").replace("+aiosqlite", "")
    )
    alembic_cfg.set_main_option(
        "sqlalchemy.url", sync_url.render_as_string(hide_password=False)
    )

    logging.info("Starting database migrations...")
    loop = asyncio.get_running_loop()
    await loop.run_in_executor(
        None, functools.partial(command.upgrade, alembic_cfg, "head")
    )
    logging.info("Database migration completed successfully")
