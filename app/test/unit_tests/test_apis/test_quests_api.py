"""
API tests for quest and badge endpoints following kkb_fastapi pattern.
"""
from datetime import datetime, timedelta

import pytest

from app.test.helpers import auth_headers
from app.test.factory.profile import ProfileFactory
from app.test.factory.social import (
    BadgeFactory,
    QuestFactory,
    UserBadgeFactory,
    UserQuestFactory,
)


@pytest.mark.asyncio
async def test_quests_overview(test_async_client):
    me = await ProfileFactory()
    active = await UserQuestFactory(user_id=me.id, progress=3)
    done = await UserQuestFactory(
        user_id=me.id, progress=5, completed=True, completed_at=datetime.utcnow()
    )
    open_quest = await QuestFactory(name="Zero Waste Week", max_value=7)
    await QuestFactory(name="Retired", active=False)

    response = await test_async_client.get("/api/v1/quests", headers=auth_headers(me.id))
    assert response.status_code == 200

    data = response.json()
    assert [(q["id"], q["percent"]) for q in data["active"]] == [(active.id, 60)]
    assert [(q["id"], q["percent"]) for q in data["completed"]] == [(done.id, 100)]
    assert [q["id"] for q in data["discover"]] == [open_quest.id]


@pytest.mark.asyncio
async def test_enroll_in_quest(test_async_client):
    me = await ProfileFactory()
    quest = await QuestFactory(max_value=10)

    response = await test_async_client.post(
        f"/api/v1/quests/{quest.id}/enroll", headers=auth_headers(me.id)
    )
    assert response.status_code == 201

    data = response.json()
    assert data["quest_id"] == quest.id
    assert data["progress"] == 0
    assert data["percent"] == 0
    assert data["completed"] is False

    response = await test_async_client.post(
        f"/api/v1/quests/{quest.id}/enroll", headers=auth_headers(me.id)
    )
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_enroll_in_inactive_or_unknown_quest(test_async_client):
    me = await ProfileFactory()
    retired = await QuestFactory(active=False)

    for quest_id in (retired.id, 9999):
        response = await test_async_client.post(
            f"/api/v1/quests/{quest_id}/enroll", headers=auth_headers(me.id)
        )
        assert response.status_code == 404


@pytest.mark.asyncio
async def test_progress_completes_quest(test_async_client):
    me = await ProfileFactory()
    enrollment = await UserQuestFactory(user_id=me.id, progress=3)
    url = f"/api/v1/quests/enrolled/{enrollment.id}/progress"

    response = await test_async_client.post(url, headers=auth_headers(me.id))
    assert response.status_code == 200
    assert response.json()["progress"] == 4
    assert response.json()["completed"] is False

    response = await test_async_client.post(
        url, json={"delta": 2}, headers=auth_headers(me.id)
    )
    data = response.json()
    assert data["progress"] == 6
    assert data["completed"] is True
    assert data["completed_at"] is not None
    assert data["percent"] == 100

    response = await test_async_client.post(url, headers=auth_headers(me.id))
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_progress_on_someone_elses_quest(test_async_client):
    me = await ProfileFactory()
    other = await ProfileFactory()
    enrollment = await UserQuestFactory(user_id=other.id)

    response = await test_async_client.post(
        f"/api/v1/quests/enrolled/{enrollment.id}/progress",
        headers=auth_headers(me.id),
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_open_ended_quest_never_completes(test_async_client):
    me = await ProfileFactory()
    enrollment = await UserQuestFactory(
        user_id=me.id, quest=QuestFactory(max_value=None)
    )

    response = await test_async_client.post(
        f"/api/v1/quests/enrolled/{enrollment.id}/progress",
        json={"delta": 50},
        headers=auth_headers(me.id),
    )
    assert response.json()["completed"] is False
    assert response.json()["percent"] == 0


@pytest.mark.asyncio
async def test_cancel_quest(test_async_client):
    me = await ProfileFactory()
    enrollment = await UserQuestFactory(user_id=me.id)

    response = await test_async_client.delete(
        f"/api/v1/quests/enrolled/{enrollment.id}", headers=auth_headers(me.id)
    )
    assert response.status_code == 204

    response = await test_async_client.get("/api/v1/quests", headers=auth_headers(me.id))
    assert response.json()["active"] == []
    assert [q["id"] for q in response.json()["discover"]] == [enrollment.quest_id]

    response = await test_async_client.delete(
        f"/api/v1/quests/enrolled/{enrollment.id}", headers=auth_headers(me.id)
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_badges_most_recent_first(test_async_client):
    me = await ProfileFactory()
    now = datetime.utcnow()
    first = await UserBadgeFactory(
        user_id=me.id,
        badge=BadgeFactory(code="first_activity", name="First Steps"),
        awarded_at=now - timedelta(days=10),
    )
    latest = await UserBadgeFactory(
        user_id=me.id,
        badge=BadgeFactory(code="week_streak", name="Consistency Champion"),
        awarded_at=now,
    )

    response = await test_async_client.get("/api/v1/badges", headers=auth_headers(me.id))
    assert response.status_code == 200

    data = response.json()
    assert [b["badge_id"] for b in data] == [latest.badge_id, first.badge_id]
    assert data[0]["code"] == "week_streak"
    assert data[1]["name"] == "First Steps"
