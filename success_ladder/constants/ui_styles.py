"""UI styles and display configuration constants."""

from __future__ import annotations

# =============================================================================
# Console Theme
# =============================================================================

THEME_STYLES = {
    "accent": "bold rgb(255,149,0)",
    "muted": "dim",
    "title": "bold rgb(120,200,255)",
    "label": "bold rgb(160,160,160)",
    "value": "rgb(240,240,240)",
    "success": "bold rgb(104,255,203)",
    "warning": "bold rgb(255,213,128)",
    "danger": "bold rgb(255,128,128)",
    "divider": "rgb(85,85,85)",
    "frame": "rgb(112,141,242)",
    "locked": "dim rgb(130,130,130)",
}

# =============================================================================
# Leaderboard
# =============================================================================

# Trophies for the podium; other ranks render as "#n"
TROPHY_ICONS = {
    1: "🥇",
    2: "🥈",
    3: "🥉",
}

PROGRESS_BAR_CHARS = {
    "filled": "█",
    "empty": "░",
}
