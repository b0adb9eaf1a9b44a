"""Level, progress and level-up calculation for the success ladder."""
from __future__ import annotations

import logging
import math
import numbers
from typing import Any, Optional, Sequence, Tuple

from ..constants import LADDER_LEVELS
from ..exceptions import InvalidLevelTableError, InvalidPointsError
from ..models import Level, MemberLevelStatus

logger = logging.getLogger(__name__)


def validate_level_table(levels: Sequence[Level]) -> None:
    """Check that a level table covers every non-negative point total exactly once.

    Args:
        levels: Levels in table order

    Raises:
        InvalidLevelTableError: If the table is empty, does not start at 0,
            has non-increasing ids, an inverted range, or a gap/overlap
            between neighbours.
    """
    if not levels:
        raise InvalidLevelTableError("Level table is empty")

    first = levels[0]
    if first.min_points != 0:
        raise InvalidLevelTableError(
            f"First level '{first.name}' must start at 0 points, starts at {first.min_points}",
            level_id=first.id,
        )

    for level in levels:
        if level.max_points < level.min_points:
            raise InvalidLevelTableError(
                f"Level '{level.name}' has max_points {level.max_points} below min_points {level.min_points}",
                level_id=level.id,
            )

    for previous, current in zip(levels, levels[1:]):
        if current.id <= previous.id:
            raise InvalidLevelTableError(
                f"Level ids must increase: {previous.id} is followed by {current.id}",
                level_id=current.id,
            )
        if previous.max_points + 1 != current.min_points:
            raise InvalidLevelTableError(
                f"Level '{current.name}' must start at {previous.max_points + 1}, "
                f"starts at {current.min_points}",
                level_id=current.id,
            )


def normalize_points(points: Any) -> int:
    """Coerce a point total into the resolver's domain.

    Negative totals clamp to 0 and fractional totals are floored.

    Raises:
        InvalidPointsError: If ``points`` is not a finite real number.
    """
    if isinstance(points, bool) or not isinstance(points, numbers.Real):
        raise InvalidPointsError(f"Point total must be a number, got {type(points).__name__}")
    if isinstance(points, float) and not math.isfinite(points):
        raise InvalidPointsError(f"Point total must be finite, got {points}")

    value = math.floor(points)
    if value < 0:
        logger.debug(f"Clamping negative point total {points} to 0")
        return 0
    if value != points:
        logger.debug(f"Flooring fractional point total {points} to {value}")
    return value


class LevelCalculator:
    """Level and progress calculation over the ladder level table."""

    LEVELS: Tuple[Level, ...] = LADDER_LEVELS

    @staticmethod
    def get_levels() -> Tuple[Level, ...]:
        """Return the level table in ascending order."""
        return LevelCalculator.LEVELS

    @staticmethod
    def get_current_level(points: Any) -> Level:
        """Find the level whose point range contains ``points``.

        Args:
            points: Member point total

        Returns:
            The matching level. Totals past the last level's sentinel
            resolve to the last level; anything else unmatched falls back
            to the first level.
        """
        value = normalize_points(points)
        levels = LevelCalculator.LEVELS

        for level in levels:
            if level.contains(value):
                return level

        if value > levels[-1].max_points:
            return levels[-1]

        logger.warning(f"No level matches {value} points, falling back to '{levels[0].name}'")
        return levels[0]

    @staticmethod
    def get_next_level(current_level: Level) -> Optional[Level]:
        """Return the level after ``current_level``, or None at the top."""
        levels = LevelCalculator.LEVELS
        for index, level in enumerate(levels):
            if level.id == current_level.id:
                return levels[index + 1] if index + 1 < len(levels) else None

        logger.debug(f"Level id {current_level.id} is not in the level table")
        return None

    @staticmethod
    def get_progress_to_next_level(points: Any) -> int:
        """Percentage of the current level's range already covered.

        Rounds half up and clamps to 0-100. Returns 100 at the top level.

        Args:
            points: Member point total

        Returns:
            Integer progress percentage
        """
        value = normalize_points(points)
        current_level = LevelCalculator.get_current_level(value)
        if LevelCalculator.get_next_level(current_level) is None:
            return 100

        points_into_level = value - current_level.min_points
        span = current_level.span
        # floor(100 * into / span + 1/2) in integer arithmetic
        percent = (200 * points_into_level + span) // (2 * span)
        return max(0, min(100, percent))

    @staticmethod
    def get_points_to_next_level(points: Any) -> int:
        """Points still missing to reach the next level (0 at the top)."""
        value = normalize_points(points)
        next_level = LevelCalculator.get_next_level(LevelCalculator.get_current_level(value))
        if next_level is None:
            return 0
        return max(0, next_level.min_points - value)

    @staticmethod
    def get_member_status(points: Any) -> MemberLevelStatus:
        """Build the full level snapshot for one point total.

        Args:
            points: Member point total

        Returns:
            Fresh MemberLevelStatus; nothing is cached between calls.
        """
        value = normalize_points(points)
        current_level = LevelCalculator.get_current_level(value)
        return MemberLevelStatus(
            points=value,
            current_level=current_level,
            next_level=LevelCalculator.get_next_level(current_level),
            progress_percent=LevelCalculator.get_progress_to_next_level(value),
            points_to_next_level=LevelCalculator.get_points_to_next_level(value),
        )

    @staticmethod
    def has_leveled_up(previous_points: Any, current_points: Any) -> bool:
        """Whether moving from ``previous_points`` to ``current_points`` crossed a level."""
        previous_level = LevelCalculator.get_current_level(previous_points)
        current_level = LevelCalculator.get_current_level(current_points)
        return current_level.id > previous_level.id


validate_level_table(LADDER_LEVELS)

get_levels = LevelCalculator.get_levels
get_current_level = LevelCalculator.get_current_level
get_next_level = LevelCalculator.get_next_level
get_progress_to_next_level = LevelCalculator.get_progress_to_next_level
get_points_to_next_level = LevelCalculator.get_points_to_next_level
get_member_status = LevelCalculator.get_member_status
has_leveled_up = LevelCalculator.has_leveled_up


__all__ = [
    "LevelCalculator",
    "get_current_level",
    "get_levels",
    "get_member_status",
    "get_next_level",
    "get_points_to_next_level",
    "get_progress_to_next_level",
    "has_leveled_up",
    "normalize_points",
    "validate_level_table",
]
