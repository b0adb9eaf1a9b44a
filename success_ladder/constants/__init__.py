"""Constants for the success ladder toolkit.

This package organizes constants into logical modules:
- levels: the ladder level table
- badges: badge catalog, category icons and activity icons
- ui_styles: console theme, trophies, progress bar glyphs
"""

from __future__ import annotations

from success_ladder.constants.badges import (
    ACTIVITY_ICONS,
    BADGE_CATEGORIES,
    CATEGORY_ICONS,
    DEFAULT_ACTIVITY_ICON,
)
from success_ladder.constants.levels import LADDER_LEVELS, MAX_POINTS_SENTINEL
from success_ladder.constants.ui_styles import (
    PROGRESS_BAR_CHARS,
    THEME_STYLES,
    TROPHY_ICONS,
)

__all__ = [
    "ACTIVITY_ICONS",
    "BADGE_CATEGORIES",
    "CATEGORY_ICONS",
    "DEFAULT_ACTIVITY_ICON",
    "LADDER_LEVELS",
    "MAX_POINTS_SENTINEL",
    "PROGRESS_BAR_CHARS",
    "THEME_STYLES",
    "TROPHY_ICONS",
]
