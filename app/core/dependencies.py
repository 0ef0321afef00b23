"""
FastAPI dependencies.

Provides the per-request database session and the per-request context
(authenticated user id plus loaded configuration).
"""
from dataclasses import dataclass
from typing import AsyncIterator
from uuid import UUID

from fastapi import Depends, Header, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Config
from app.database.session_manager.db_session import Database
from app.utils.constants import USER_ID_HEADER


async def get_db_session() -> AsyncIterator[AsyncSession]:
    """Yield a session committed when the request handler returns."""
    async with Database() as session:
        yield session


def get_app_config(request: Request) -> Config:
    """Configuration attached to the running application."""
    return request.app.state.config


async def get_current_user_id(
    x_user_id: str | None = Header(None, alias=USER_ID_HEADER),
) -> UUID:
    """
    Authenticated user id, as forwarded by the auth proxy.

    Raises:
        HTTPException: 401 when the header is missing or not a UUID
    """
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized"
        )
    try:
        return UUID(x_user_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Authentication Failed"
        )


@dataclass(frozen=True)
class RequestContext:
    """Everything a handler needs to know about who is asking."""

    user_id: UUID
    config: Config


async def get_request_context(
    user_id: UUID = Depends(get_current_user_id),
    config: Config = Depends(get_app_config),
) -> RequestContext:
    return RequestContext(user_id=user_id, config=config)
