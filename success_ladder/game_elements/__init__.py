"""Success ladder game elements.

This package provides the pure calculations behind the ladder screens:
- level lookup, progress and level-up detection
- the badge catalog and unlock-state merging
- leaderboard ranking
"""
from __future__ import annotations

from .badge_catalog import BadgeCatalog, get_activity_icon, get_all_badges, get_category_badges
from .leaderboard import build_leaderboard, load_member_scores, summarize_leaderboard
from .level_calculator import (
    LevelCalculator,
    get_current_level,
    get_member_status,
    get_next_level,
    get_progress_to_next_level,
)

__all__ = [
    "BadgeCatalog",
    "LevelCalculator",
    "build_leaderboard",
    "get_activity_icon",
    "get_all_badges",
    "get_category_badges",
    "get_current_level",
    "get_member_status",
    "get_next_level",
    "get_progress_to_next_level",
    "load_member_scores",
    "summarize_leaderboard",
]
