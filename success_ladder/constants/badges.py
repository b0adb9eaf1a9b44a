"""Badge catalog, category icons and activity icons."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

from success_ladder.models import Badge, BadgeCategory

# =============================================================================
# Badge Catalog
# =============================================================================

_F = BadgeCategory.FREQUENCY
_LD = BadgeCategory.LEADERSHIP
_LR = BadgeCategory.LEARNING
_S = BadgeCategory.SERVICE

BADGE_CATEGORIES: Mapping[BadgeCategory, Tuple[Badge, ...]] = MappingProxyType({
    BadgeCategory.FREQUENCY: (
        Badge(
            "perfect_month", "Mês Perfeito", "100% presença em 1 mês", "⭐", _F,
            "Participar de todas as reuniões durante um mês",
        ),
        Badge(
            "consistent_quarter", "Consistência", "90%+ presença em 3 meses", "🔥", _F,
            "Manter 90% ou mais de presença por 3 meses consecutivos",
        ),
        Badge(
            "year_warrior", "Guerreiro Anual", "80%+ presença no ano", "🏆", _F,
            "Manter 80% ou mais de presença durante todo o ano",
        ),
    ),
    BadgeCategory.LEADERSHIP: (
        Badge(
            "first_timoteo", "Primeiro Timóteo", "Tornar-se Timóteo", "🌱", _LD,
            "Alcançar o nível Timóteo pela primeira vez",
        ),
        Badge(
            "mentor", "Mentor", "Treinar 3 Timóteos", "👨‍🏫", _LD,
            "Ajudar 3 pessoas a se tornarem Timóteos",
        ),
        Badge(
            "multiplier", "Multiplicador", "Liderar multiplicação", "🌟", _LD,
            "Liderar uma célula que se multiplicou",
        ),
    ),
    BadgeCategory.LEARNING: (
        Badge(
            "student", "Estudante", "Completar 5 módulos", "📚", _LR,
            "Completar 5 módulos de estudo",
        ),
        Badge(
            "graduate", "Graduado", "Completar Universidade da Vida", "🎓", _LR,
            "Completar todos os módulos da Universidade da Vida",
        ),
        Badge(
            "teacher", "Mestre", "Completar Capacitação Destino", "👑", _LR,
            "Completar a Capacitação Destino",
        ),
    ),
    BadgeCategory.SERVICE: (
        Badge(
            "volunteer", "Voluntário", "10 serviços", "🤝", _S,
            "Participar de 10 atividades de serviço",
        ),
        Badge(
            "servant", "Servo", "50 serviços", "❤️", _S,
            "Participar de 50 atividades de serviço",
        ),
        Badge(
            "minister", "Ministro", "Liderar um ministério", "⚡", _S,
            "Liderar ou coordenar um ministério",
        ),
    ),
})

# Icons for the category filter; "ALL" is the unfiltered view
CATEGORY_ICONS = {
    "ALL": "🏆",
    BadgeCategory.FREQUENCY.value: "📅",
    BadgeCategory.LEADERSHIP.value: "👑",
    BadgeCategory.LEARNING.value: "📚",
    BadgeCategory.SERVICE.value: "🤝",
}

# =============================================================================
# Activity Icons
# =============================================================================

ACTIVITY_ICONS = {
    "PRESENCE": "👥",
    "LEADERSHIP": "👑",
    "LEARNING": "📚",
    "SERVICE": "🤝",
    "EVANGELISM": "💒",
    "DISCIPLESHIP": "🌱",
    "MULTIPLICATION": "🌟",
    "CONSOLIDATION": "🤗",
    "TRAINING": "🎯",
    "MEETING": "🗣️",
    "PRAYER": "🙏",
    "WORSHIP": "🎵",
}

DEFAULT_ACTIVITY_ICON = "📋"
