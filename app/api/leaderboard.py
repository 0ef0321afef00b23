"""
Leaderboard API router.
"""
import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import RequestContext, get_db_session, get_request_context
from app.pydantic_models.leaderboard import LeaderboardResponse
from app.services.aggregators.leaderboard_service import LeaderboardService
from app.utils.constants import LeaderboardScopeEnum

router = APIRouter(
    prefix="/api/v1/leaderboard",
    tags=["Leaderboard"],
)

logger = logging.getLogger(__name__)


@router.get("", response_model=LeaderboardResponse)
async def get_leaderboard(
    scope: LeaderboardScopeEnum = LeaderboardScopeEnum.GLOBAL,
    limit: int | None = Query(None, ge=1),
    context: RequestContext = Depends(get_request_context),
    session: AsyncSession = Depends(get_db_session),
):
    """
    Ranked profiles for a scope.

    Args:
        scope: global, friends or regional (the requester's state)
        limit: Row cap for global and regional, bounded by config
    """
    settings = context.config.section("leaderboard")
    default_limit = settings.get("default_limit", LeaderboardService.DEFAULT_LIMIT)
    max_limit = settings.get("max_limit", 100)

    service = LeaderboardService(session, default_limit=default_limit)
    return await service.get_leaderboard(
        context.user_id,
        scope=scope,
        limit=min(limit, max_limit) if limit else None,
    )
