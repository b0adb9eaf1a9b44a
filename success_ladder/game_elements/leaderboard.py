"""Leaderboard ranking over exported member scores."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from ..exceptions import InvalidInputError, InvalidPointsError
from ..models import LeaderboardEntry, LeaderboardStats, MemberScore
from .level_calculator import get_current_level, normalize_points

logger = logging.getLogger(__name__)

# Keys the backend uses to wrap ranking lists
_LIST_KEYS = ("leaderboard", "ranking", "members")


def parse_member_score(record: Dict[str, Any]) -> MemberScore:
    """Build a MemberScore from one backend record.

    Accepts the backend field names (``profile_id``, ``full_name``,
    ``success_ladder_score``, ``avatar_url``) as well as ``id``/``name``/``score``.

    Raises:
        InvalidInputError: If the record is not an object, has no id, or its
            score is not a number.
    """
    if not isinstance(record, dict):
        raise InvalidInputError(f"Member record must be an object, got {type(record).__name__}")

    member_id = record.get("profile_id")
    if member_id is None or member_id == "":
        member_id = record.get("id")
    if member_id is None or member_id == "":
        raise InvalidInputError(f"Member record has no id: {record}")

    raw_score = record.get("success_ladder_score", record.get("score"))
    try:
        score = normalize_points(raw_score) if raw_score is not None else 0
    except InvalidPointsError as exc:
        raise InvalidInputError(f"Invalid score for member {member_id}: {exc}") from exc

    return MemberScore(
        member_id=str(member_id),
        name=str(record.get("full_name") or record.get("name") or str(member_id)),
        score=score,
        avatar_url=record.get("avatar_url"),
    )


def load_member_scores(path: Path) -> List[MemberScore]:
    """Read member scores from a JSON export.

    Args:
        path: File holding either a list of member records or an object
            with a ``leaderboard``/``ranking``/``members`` list.

    Returns:
        Parsed member scores in file order

    Raises:
        InvalidInputError: If the file cannot be read or has the wrong shape.
    """
    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except (OSError, json.JSONDecodeError) as exc:
        raise InvalidInputError(f"Failed to read member scores: {exc}", source=str(path)) from exc

    records = payload
    if isinstance(payload, dict):
        records = next((payload[key] for key in _LIST_KEYS if isinstance(payload.get(key), list)), None)

    if not isinstance(records, list):
        raise InvalidInputError(
            "Member scores must be a JSON list or an object with a 'leaderboard' list",
            source=str(path),
        )

    members = [parse_member_score(record) for record in records]
    logger.debug(f"Loaded {len(members)} member scores from {path}")
    return members


def _sorted_members(members: Iterable[MemberScore]) -> List[MemberScore]:
    return sorted(members, key=lambda member: (-member.score, member.name.casefold(), member.member_id))


def _competition_ranks(ordered: Sequence[MemberScore]) -> List[int]:
    """Ranks where equal scores share a position (1, 2, 2, 4)."""
    ranks: List[int] = []
    for index, member in enumerate(ordered):
        if index and member.score == ordered[index - 1].score:
            ranks.append(ranks[-1])
        else:
            ranks.append(index + 1)
    return ranks


def build_leaderboard(
    members: Iterable[MemberScore],
    current_member_id: Optional[str] = None,
    limit: Optional[int] = None,
) -> Tuple[LeaderboardEntry, ...]:
    """Rank members by score and attach their level.

    Args:
        members: Member scores in any order
        current_member_id: Member to flag as the viewing user
        limit: Keep only the first ``limit`` rows; None keeps all

    Returns:
        Leaderboard rows, best score first
    """
    if limit is not None and limit <= 0:
        raise InvalidInputError(f"limit must be positive, got {limit}")

    ordered = _sorted_members(members)
    ranks = _competition_ranks(ordered)

    entries = tuple(
        LeaderboardEntry(
            member_id=member.member_id,
            name=member.name,
            score=member.score,
            level=get_current_level(member.score),
            rank=rank,
            avatar_url=member.avatar_url,
            is_current_user=member.member_id == current_member_id,
        )
        for member, rank in zip(ordered, ranks)
    )
    return entries[:limit] if limit is not None else entries


def summarize_leaderboard(
    members: Iterable[MemberScore],
    current_member_id: Optional[str] = None,
) -> LeaderboardStats:
    """Summary statistics over every member, independent of any display limit."""
    ordered = _sorted_members(members)
    if not ordered:
        return LeaderboardStats(total_members=0, top_score=0, average_score=0.0)

    user_position = None
    if current_member_id is not None:
        for member, rank in zip(ordered, _competition_ranks(ordered)):
            if member.member_id == current_member_id:
                user_position = rank
                break

    total = sum(member.score for member in ordered)
    return LeaderboardStats(
        total_members=len(ordered),
        top_score=ordered[0].score,
        average_score=round(total / len(ordered), 2),
        user_position=user_position,
    )


__all__ = [
    "build_leaderboard",
    "load_member_scores",
    "parse_member_score",
    "summarize_leaderboard",
]
