"""
API tests for friends endpoints following kkb_fastapi pattern.
"""

import pytest

from app.database.repositories import FriendRequestRepository
from app.test.helpers import auth_headers
from app.test.factory.profile import ProfileFactory
from app.test.factory.social import FriendRequestFactory, FriendshipFactory


@pytest.mark.asyncio
async def test_friends_overview(test_async_client):
    me = await ProfileFactory()
    friend = await ProfileFactory(display_name="Fern")
    asker = await ProfileFactory(display_name="Ash")
    asked = await ProfileFactory(display_name="Oak")
    await FriendshipFactory(requester_id=friend.id, recipient_id=me.id)
    await FriendRequestFactory(requester_id=asker.id, recipient_id=me.id)
    await FriendRequestFactory(requester_id=me.id, recipient_id=asked.id)

    response = await test_async_client.get("/api/v1/friends", headers=auth_headers(me.id))
    assert response.status_code == 200

    data = response.json()
    assert [(f["id"], f["status"]) for f in data["friends"]] == [(str(friend.id), "accepted")]
    assert [(f["id"], f["status"]) for f in data["incoming"]] == [(str(asker.id), "incoming")]
    assert [(f["id"], f["status"]) for f in data["outgoing"]] == [(str(asked.id), "pending")]


@pytest.mark.asyncio
async def test_send_and_accept_request(test_async_client, test_db_session):
    me = await ProfileFactory()
    other = await ProfileFactory()

    response = await test_async_client.post(
        "/api/v1/friends/requests",
        json={"recipient_id": str(other.id)},
        headers=auth_headers(me.id),
    )
    assert response.status_code == 201
    assert response.json()["status"] == "pending"

    response = await test_async_client.post(
        f"/api/v1/friends/{me.id}/accept", headers=auth_headers(other.id)
    )
    assert response.status_code == 200
    assert response.json()["status"] == "accepted"

    friend_ids = await FriendRequestRepository(test_db_session).get_friend_ids(me.id)
    assert friend_ids == {other.id}


@pytest.mark.asyncio
async def test_request_to_self_rejected(test_async_client):
    me = await ProfileFactory()

    response = await test_async_client.post(
        "/api/v1/friends/requests",
        json={"recipient_id": str(me.id)},
        headers=auth_headers(me.id),
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_request_to_unknown_profile(test_async_client, user_id):
    me = await ProfileFactory()

    response = await test_async_client.post(
        "/api/v1/friends/requests",
        json={"recipient_id": str(user_id)},
        headers=auth_headers(me.id),
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_duplicate_request_in_either_direction(test_async_client):
    me = await ProfileFactory()
    other = await ProfileFactory()
    await FriendRequestFactory(requester_id=other.id, recipient_id=me.id)

    response = await test_async_client.post(
        "/api/v1/friends/requests",
        json={"recipient_id": str(other.id)},
        headers=auth_headers(me.id),
    )
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_accept_without_pending_request(test_async_client):
    me = await ProfileFactory()
    other = await ProfileFactory()

    response = await test_async_client.post(
        f"/api/v1/friends/{other.id}/accept", headers=auth_headers(me.id)
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_decline_request(test_async_client, test_db_session):
    me = await ProfileFactory()
    other = await ProfileFactory()
    await FriendRequestFactory(requester_id=other.id, recipient_id=me.id)

    response = await test_async_client.delete(
        f"/api/v1/friends/{other.id}/request", headers=auth_headers(me.id)
    )
    assert response.status_code == 204
    assert await FriendRequestRepository(test_db_session).count() == 0

    response = await test_async_client.delete(
        f"/api/v1/friends/{other.id}/request", headers=auth_headers(me.id)
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_remove_friend_from_either_side(test_async_client, test_db_session):
    me = await ProfileFactory()
    other = await ProfileFactory()
    await FriendshipFactory(requester_id=other.id, recipient_id=me.id)

    response = await test_async_client.delete(
        f"/api/v1/friends/{other.id}", headers=auth_headers(me.id)
    )
    assert response.status_code == 204
    assert await FriendRequestRepository(test_db_session).get_friend_ids(me.id) == set()

    response = await test_async_client.delete(
        f"/api/v1/friends/{other.id}", headers=auth_headers(me.id)
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_search_short_term_returns_nothing(test_async_client):
    me = await ProfileFactory()
    await ProfileFactory(display_name="Eco Warrior")

    response = await test_async_client.get(
        "/api/v1/friends/search?term=E", headers=auth_headers(me.id)
    )
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_search_profiles(test_async_client):
    me = await ProfileFactory(display_name="Eco Me")
    friend = await ProfileFactory(display_name="Eco Warrior")
    stranger = await ProfileFactory(display_name="eco")
    await ProfileFactory(display_name="Green Giant")
    await FriendshipFactory(requester_id=me.id, recipient_id=friend.id)

    response = await test_async_client.get(
        "/api/v1/friends/search?term=eco", headers=auth_headers(me.id)
    )
    assert response.status_code == 200

    results = response.json()
    assert [r["id"] for r in results] == [str(stranger.id), str(friend.id)]
    assert [r["already_friend"] for r in results] == [False, True]
