"""
Friends API router.

Friend list, requests and profile search for the requester.
"""
import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import RequestContext, get_db_session, get_request_context
from app.pydantic_models.friend import (
    FriendRequestCreate,
    FriendSearchResult,
    FriendsOverview,
)
from app.services.social.friend_service import (
    DuplicateFriendRequest,
    FriendRequestError,
    FriendRequestNotFound,
    FriendService,
    ProfileNotFound,
    SelfFriendRequest,
)

router = APIRouter(
    prefix="/api/v1/friends",
    tags=["Friends"],
)

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    SelfFriendRequest: status.HTTP_400_BAD_REQUEST,
    ProfileNotFound: status.HTTP_404_NOT_FOUND,
    FriendRequestNotFound: status.HTTP_404_NOT_FOUND,
    DuplicateFriendRequest: status.HTTP_409_CONFLICT,
}


def to_http_exception(error: FriendRequestError) -> HTTPException:
    return HTTPException(
        status_code=ERROR_STATUS.get(type(error), status.HTTP_400_BAD_REQUEST),
        detail=str(error),
    )


def get_friend_service(
    context: RequestContext = Depends(get_request_context),
    session: AsyncSession = Depends(get_db_session),
) -> FriendService:
    settings = context.config.section("friends")
    return FriendService(
        session,
        search_limit=settings.get("search_limit", FriendService.SEARCH_LIMIT),
        min_search_length=settings.get(
            "min_search_length", FriendService.MIN_SEARCH_LENGTH
        ),
    )


@router.get("", response_model=FriendsOverview)
async def get_friends(
    context: RequestContext = Depends(get_request_context),
    service: FriendService = Depends(get_friend_service),
):
    """Accepted friends plus incoming and outgoing requests."""
    return await service.get_overview(context.user_id)


@router.get("/search", response_model=list[FriendSearchResult])
async def search_profiles(
    term: str = "",
    context: RequestContext = Depends(get_request_context),
    service: FriendService = Depends(get_friend_service),
):
    """Profiles whose display name contains ``term``, best match first."""
    return await service.search(context.user_id, term)


@router.post("/requests", status_code=status.HTTP_201_CREATED)
async def send_friend_request(
    request: FriendRequestCreate,
    context: RequestContext = Depends(get_request_context),
    service: FriendService = Depends(get_friend_service),
):
    try:
        created = await service.send_request(context.user_id, request.recipient_id)
    except FriendRequestError as e:
        logger.warning(f"Friend request from {context.user_id} rejected: {e}")
        raise to_http_exception(e)

    await service.session.commit()
    return {"id": created.id, "recipient_id": created.recipient_id, "status": created.status}


@router.post("/{friend_id}/accept")
async def accept_friend_request(
    friend_id: UUID,
    context: RequestContext = Depends(get_request_context),
    service: FriendService = Depends(get_friend_service),
):
    try:
        accepted = await service.accept(context.user_id, friend_id)
    except FriendRequestError as e:
        raise to_http_exception(e)

    await service.session.commit()
    return {"id": accepted.id, "requester_id": accepted.requester_id, "status": accepted.status}


@router.delete("/{friend_id}/request", status_code=status.HTTP_204_NO_CONTENT)
async def decline_friend_request(
    friend_id: UUID,
    context: RequestContext = Depends(get_request_context),
    service: FriendService = Depends(get_friend_service),
):
    try:
        await service.decline(context.user_id, friend_id)
    except FriendRequestError as e:
        raise to_http_exception(e)

    await service.session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{friend_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_friend(
    friend_id: UUID,
    context: RequestContext = Depends(get_request_context),
    service: FriendService = Depends(get_friend_service),
):
    try:
        await service.remove(context.user_id, friend_id)
    except FriendRequestError as e:
        raise to_http_exception(e)

    await service.session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
