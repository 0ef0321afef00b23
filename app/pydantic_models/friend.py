"""
Pydantic models for friends following kkb_fastapi pattern.
"""
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field


class FriendProfile(BaseModel):
    """Another user as seen from the requester's friend list."""

    id: UUID
    display_name: str
    avatar_url: Optional[str] = None
    total_points: int = 0
    state: Optional[str] = None
    created_at: Optional[datetime] = Field(
        None, description="When the request was made"
    )
    you: bool = False
    status: Optional[str] = Field(None, description="accepted, pending or incoming")


class FriendSearchResult(FriendProfile):
    """Search hit, flagged when any request already links the two users."""

    already_friend: bool = False


class FriendsOverview(BaseModel):
    """Accepted friends plus open requests in each direction."""

    friends: list[FriendProfile]
    incoming: list[FriendProfile]
    outgoing: list[FriendProfile]


class FriendRequestCreate(BaseModel):
    """Model for sending a friend request."""

    recipient_id: UUID
