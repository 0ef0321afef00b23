"""
Leaderboard ranking.

Turns profile rows of one scope into ranked leaderboard entries. Scope
membership (global, friends, regional) is decided by the caller before the
rows get here; this module only applies privacy, ordering and ranks.
"""

import logging
from typing import Any, Iterable, Mapping, Union
from uuid import UUID

from pydantic import ValidationError

from app.pydantic_models.leaderboard import ProfileSummary, RankedEntry
from app.utils.constants import DEFAULT_DISPLAY_NAME

logger = logging.getLogger(__name__)

ProfileRow = Union[ProfileSummary, Mapping[str, Any]]


def _as_summary(row: ProfileRow) -> ProfileSummary | None:
    if isinstance(row, ProfileSummary):
        return row
    try:
        return ProfileSummary.model_validate(row)
    except ValidationError as e:
        logger.warning(f"Skipping malformed profile row: {e.error_count()} error(s)")
        return None


def rank_profiles(
    profiles: Iterable[ProfileRow],
    requester_id: UUID | None,
    friend_ids: Iterable[UUID] = (),
) -> list[RankedEntry]:
    """
    Rank profiles by points.

    Private profiles are dropped except the requester's own. The sort is
    stable, so equal point totals keep their input order, and ranks are
    consecutive positions (ties are not collapsed).

    Args:
        profiles: Profile rows of the requested scope
        requester_id: Id of the user asking; their row is flagged ``you``
        friend_ids: Accepted friends of the requester, flagged ``friend``

    Returns:
        Entries ordered by rank ascending

    Example:
        >>> entries = rank_profiles(rows, requester_id=me)
        >>> [(e.rank, e.you) for e in entries]
        [(1, False), (2, True)]
    """
    friends = set(friend_ids)

    visible = []
    for row in profiles:
        profile = _as_summary(row)
        if profile is None:
            continue
        if profile.is_private and profile.id != requester_id:
            continue
        visible.append(profile)

    visible.sort(key=lambda p: p.total_points or 0, reverse=True)

    entries = []
    for position, profile in enumerate(visible, start=1):
        you = profile.id == requester_id
        entries.append(
            RankedEntry(
                id=profile.id,
                display_name=profile.display_name or DEFAULT_DISPLAY_NAME,
                avatar_url=profile.avatar_url or None,
                total_points=profile.total_points or 0,
                rank=position,
                state=profile.state,
                you=you,
                friend=profile.id in friends and not you,
            )
        )
    return entries
