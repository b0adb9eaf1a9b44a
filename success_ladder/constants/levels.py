"""Level table of the G12 success ladder."""

from __future__ import annotations

from typing import Tuple

from success_ladder.models import Level

# =============================================================================
# Ladder Levels
# =============================================================================

# Upper bound of the last level; treated as "no upper bound"
MAX_POINTS_SENTINEL = 999999

LADDER_LEVELS: Tuple[Level, ...] = (
    Level(1, "Visitante", 0, 49, "#94A3B8"),
    Level(2, "Membro", 50, 149, "#10B981"),
    Level(3, "Consolidado", 150, 299, "#3B82F6"),
    Level(4, "Discípulo", 300, 599, "#8B5CF6"),
    Level(5, "Timóteo", 600, 999, "#F59E0B"),
    Level(6, "Líder Potencial", 1000, 1999, "#EF4444"),
    Level(7, "Líder", 2000, 3999, "#DC2626"),
    Level(8, "Supervisor", 4000, 7999, "#7C3AED"),
    Level(9, "Pastor", 8000, 15999, "#1D4ED8"),
    Level(10, "Líder Sênior", 16000, MAX_POINTS_SENTINEL, "#0F172A"),
)
