"""Domain models shared across the success ladder toolkit."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class BadgeCategory(str, Enum):
    """Closed set of badge groups, in catalog order."""

    FREQUENCY = "FREQUENCY"
    LEADERSHIP = "LEADERSHIP"
    LEARNING = "LEARNING"
    SERVICE = "SERVICE"

    @classmethod
    def parse(cls, value: "BadgeCategory | str") -> Optional["BadgeCategory"]:
        """Resolve a category from an enum member or a case-insensitive name.

        Returns:
            The matching category, or None when the name is unknown.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class Level:
    """Named tier of the ladder bounded by an inclusive point range."""

    id: int
    name: str
    min_points: int
    max_points: int
    color: str

    def contains(self, points: int) -> bool:
        return self.min_points <= points <= self.max_points

    @property
    def span(self) -> int:
        return self.max_points - self.min_points + 1

    def to_dict(self) -> Dict[str, Any]:
        """Serialise the level for JSON output."""

        return {
            "id": self.id,
            "name": self.name,
            "min_points": self.min_points,
            "max_points": self.max_points,
            "color": self.color,
        }


@dataclass(frozen=True, slots=True)
class Badge:
    """Achievement marker with display metadata."""

    id: str
    name: str
    description: str
    icon: str
    category: BadgeCategory
    criteria: str

    def to_dict(self) -> Dict[str, Any]:
        """Serialise the badge for JSON output."""

        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "icon": self.icon,
            "category": self.category.value,
            "criteria": self.criteria,
        }


@dataclass(frozen=True, slots=True)
class BadgeStatus:
    """Badge paired with the unlock state supplied by the caller."""

    badge: Badge
    is_unlocked: bool


@dataclass(frozen=True, slots=True)
class MemberLevelStatus:
    """Level information derived from a single point total."""

    points: int
    current_level: Level
    next_level: Optional[Level]
    progress_percent: int
    points_to_next_level: int

    @property
    def is_max_level(self) -> bool:
        return self.next_level is None

    def to_dict(self) -> Dict[str, Any]:
        """Serialise the status for JSON output."""

        return {
            "points": self.points,
            "current_level": self.current_level.to_dict(),
            "next_level": self.next_level.to_dict() if self.next_level else None,
            "progress_percent": self.progress_percent,
            "points_to_next_level": self.points_to_next_level,
        }


@dataclass(frozen=True, slots=True)
class MemberScore:
    """Point total of one member as exported by the backend."""

    member_id: str
    name: str
    score: int
    avatar_url: Optional[str] = None


@dataclass(frozen=True, slots=True)
class LeaderboardEntry:
    """Ranked leaderboard row."""

    member_id: str
    name: str
    score: int
    level: Level
    rank: int
    avatar_url: Optional[str] = None
    is_current_user: bool = False


@dataclass(frozen=True, slots=True)
class LeaderboardStats:
    """Summary figures shown above a leaderboard."""

    total_members: int
    top_score: int
    average_score: float
    user_position: Optional[int] = None


__all__ = [
    "Badge",
    "BadgeCategory",
    "BadgeStatus",
    "LeaderboardEntry",
    "LeaderboardStats",
    "Level",
    "MemberLevelStatus",
    "MemberScore",
]
