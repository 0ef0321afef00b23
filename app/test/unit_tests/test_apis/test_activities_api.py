"""
API tests for activities endpoints following kkb_fastapi pattern.
"""
from datetime import datetime, timedelta

import pytest

from app.database.repositories import ActivityRepository
from app.test.helpers import auth_headers
from app.test.factory.activity import ActivityFactory
from app.test.factory.profile import ProfileFactory


@pytest.mark.asyncio
async def test_record_activity(test_async_client, test_db_session):
    profile = await ProfileFactory()

    response = await test_async_client.post(
        "/api/v1/activities",
        json={"category": "Electricity", "electricity": {"kWh": 100, "state": "au-vic"}},
        headers=auth_headers(profile.id),
    )
    assert response.status_code == 201

    data = response.json()
    assert data["user_id"] == str(profile.id)
    assert data["category"] == "energy"
    assert data["type"] == "electricity"
    assert data["emission_kg"] == 207.29
    assert data["meta"] == {"kWh": 100.0, "state": "au-vic"}

    assert await ActivityRepository(test_db_session).count({"user_id": profile.id}) == 1


@pytest.mark.asyncio
async def test_record_activity_requires_auth(test_async_client):
    response = await test_async_client.post(
        "/api/v1/activities", json={"waste": {"amountKg": 1}}
    )
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_record_activity_rejects_bad_user_header(test_async_client):
    response = await test_async_client.post(
        "/api/v1/activities",
        json={"waste": {"amountKg": 1}},
        headers={"X-User-Id": "not-a-uuid"},
    )
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_record_activity_requires_profile(test_async_client, user_id):
    response = await test_async_client.post(
        "/api/v1/activities",
        json={"waste": {"amountKg": 1}},
        headers=auth_headers(user_id),
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_invalid_activity_not_stored(test_async_client, test_db_session):
    profile = await ProfileFactory()

    response = await test_async_client.post(
        "/api/v1/activities",
        json={"waste": {"amountKg": -2}},
        headers=auth_headers(profile.id),
    )
    assert response.status_code == 422
    assert response.json()["detail"] == "Quantity must be > 0"

    assert await ActivityRepository(test_db_session).count() == 0


@pytest.mark.asyncio
async def test_list_own_activities_newest_first(test_async_client):
    profile = await ProfileFactory()
    other = await ProfileFactory()
    now = datetime.utcnow()
    older = await ActivityFactory(user_id=profile.id, created_at=now - timedelta(days=1))
    newer = await ActivityFactory(user_id=profile.id, created_at=now)
    await ActivityFactory(user_id=other.id)

    response = await test_async_client.get(
        "/api/v1/activities", headers=auth_headers(profile.id)
    )
    assert response.status_code == 200
    assert [a["id"] for a in response.json()] == [str(newer.id), str(older.id)]


@pytest.mark.asyncio
async def test_list_activities_pagination(test_async_client):
    profile = await ProfileFactory()
    await ActivityFactory.create_batch(5, user_id=profile.id)

    response = await test_async_client.get(
        "/api/v1/activities?skip=3&limit=10", headers=auth_headers(profile.id)
    )
    assert response.status_code == 200
    assert len(response.json()) == 2
