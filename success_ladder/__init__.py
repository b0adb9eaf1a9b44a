"""Success ladder toolkit: levels, badges and leaderboards for cell churches."""

from __future__ import annotations

from .game_elements import (
    BadgeCatalog,
    LevelCalculator,
    build_leaderboard,
    get_activity_icon,
    get_all_badges,
    get_category_badges,
    get_current_level,
    get_member_status,
    get_next_level,
    get_progress_to_next_level,
    summarize_leaderboard,
)
from .models import Badge, BadgeCategory, Level, MemberLevelStatus

__version__ = "0.1.0"

__all__ = [
    "Badge",
    "BadgeCatalog",
    "BadgeCategory",
    "Level",
    "LevelCalculator",
    "MemberLevelStatus",
    "build_leaderboard",
    "get_activity_icon",
    "get_all_badges",
    "get_category_badges",
    "get_current_level",
    "get_member_status",
    "get_next_level",
    "get_progress_to_next_level",
    "summarize_leaderboard",
]
