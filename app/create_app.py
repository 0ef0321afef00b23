"""
FastAPI application factory following kkb_fastapi pattern.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import (
    activities_router,
    emissions_router,
    factors_router,
    friends_router,
    leaderboard_router,
    profile_router,
    quests_router,
)
from app.core.config import get_config
from app.database.base import get_db_url, get_engine_kw
from app.database.session_manager.db_session import Database
from app.services.profile.onboarding import OnboardingStatusLoader

logging.basicConfig(
    level=logging.DEBUG, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


def register_routers(app: FastAPI):
    """Register all API routers."""
    app.include_router(emissions_router)
    app.include_router(activities_router)
    app.include_router(factors_router)
    app.include_router(leaderboard_router)
    app.include_router(friends_router)
    app.include_router(quests_router)
    app.include_router(profile_router)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.

    Handles database initialization and cleanup.
    """
    logging.info("Application startup")
    async_db_url = get_db_url(app.state.config)

    Database.init(async_db_url, engine_kw=get_engine_kw(async_db_url))
    logging.info("Initialized database")

    try:
        yield
    finally:
        await Database.dispose()
        logging.info("Application shutdown")


def get_app(config_file: str) -> FastAPI:
    """
    Application factory function.

    Args:
        config_file: Configuration file name (e.g., "production.toml")

    Returns:
        Configured FastAPI application instance
    """
    config = get_config(config_file)
    api_config = config.section("api")

    app = FastAPI(
        title=api_config.get("title", "GreenSteps API"),
        description=api_config.get(
            "description", "Carbon footprint tracking with quests, badges and leaderboards"
        ),
        version=api_config.get("version", "1.0.0"),
        debug=api_config.get("debug", False),
        lifespan=lifespan,
        generate_unique_id_function=lambda route: (
            f"{route.tags[0]}-{route.name}" if route.tags else route.name
        ),
    )

    app.state.config = config
    app.state.onboarding_loader = OnboardingStatusLoader()

    register_routers(app)

    origins = api_config.get(
        "cors_origins", ["http://localhost:3000", "http://127.0.0.1:3000"]
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    return app
