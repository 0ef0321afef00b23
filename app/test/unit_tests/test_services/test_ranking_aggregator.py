"""
Service tests for leaderboard ranking following kkb_fastapi pattern.
"""

import random
import uuid

from app.pydantic_models.leaderboard import ProfileSummary
from app.services.aggregators.ranking_aggregator import rank_profiles

A, B, C, D = (uuid.UUID(int=n) for n in range(1, 5))


def test_private_rows_dropped_and_ranked_by_points():
    profiles = [
        {"id": A, "display_name": "a", "total_points": 100, "is_private": False},
        {"id": B, "display_name": "b", "total_points": 300, "is_private": False},
        {"id": C, "display_name": "c", "total_points": 300, "is_private": True},
    ]

    entries = rank_profiles(profiles, requester_id=A)

    assert [(e.id, e.rank, e.you) for e in entries] == [(B, 1, False), (A, 2, True)]


def test_requester_keeps_own_private_row():
    profiles = [
        ProfileSummary(id=A, total_points=10, is_private=True),
        ProfileSummary(id=B, total_points=20, is_private=True),
    ]

    entries = rank_profiles(profiles, requester_id=A)

    assert [e.id for e in entries] == [A]
    assert entries[0].rank == 1
    assert entries[0].you is True


def test_ties_keep_input_order_with_consecutive_ranks():
    profiles = [
        {"id": C, "total_points": 50},
        {"id": A, "total_points": 50},
        {"id": B, "total_points": 70},
    ]

    entries = rank_profiles(profiles, requester_id=None)

    assert [(e.id, e.rank) for e in entries] == [(B, 1), (C, 2), (A, 3)]


def test_missing_fields_default():
    entries = rank_profiles([{"id": A}], requester_id=B)

    assert entries[0].display_name == "Anon"
    assert entries[0].total_points == 0
    assert entries[0].avatar_url is None
    assert entries[0].you is False


def test_empty_input():
    assert rank_profiles([], requester_id=A) == []


def test_malformed_rows_skipped():
    profiles = [{"display_name": "no id"}, {"id": A, "total_points": 5}]

    entries = rank_profiles(profiles, requester_id=A)

    assert [e.id for e in entries] == [A]


def test_absent_requester_flags_nobody():
    profiles = [{"id": A, "total_points": 1}, {"id": B, "total_points": 2}]

    entries = rank_profiles(profiles, requester_id=D)

    assert not any(e.you for e in entries)


def test_friend_flag_excludes_requester():
    profiles = [{"id": A, "total_points": 1}, {"id": B, "total_points": 2}]

    entries = {e.id: e for e in rank_profiles(profiles, requester_id=A, friend_ids={A, B})}

    assert entries[B].friend is True
    assert entries[A].friend is False


def test_ranking_properties_hold_for_random_input():
    rng = random.Random(7)
    ids = [uuid.uuid4() for _ in range(40)]
    profiles = [
        {
            "id": profile_id,
            "total_points": rng.choice([None, 0, 10, 10, 250, 999]),
            "is_private": rng.random() < 0.3,
        }
        for profile_id in ids
    ]
    requester = ids[0]

    entries = rank_profiles(profiles, requester_id=requester)

    assert len(entries) <= len(profiles)
    assert [e.rank for e in entries] == list(range(1, len(entries) + 1))
    points = [e.total_points for e in entries]
    assert points == sorted(points, reverse=True)
    assert sum(e.you for e in entries) == 1
    hidden = {p["id"] for p in profiles if p["is_private"] and p["id"] != requester}
    assert hidden.isdisjoint(e.id for e in entries)
