"""Badge catalog lookups and unlock-state merging."""
from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional, Set, Tuple, Union

from ..constants import ACTIVITY_ICONS, BADGE_CATEGORIES, CATEGORY_ICONS, DEFAULT_ACTIVITY_ICON
from ..exceptions import InvalidBadgeCatalogError
from ..models import Badge, BadgeCategory, BadgeStatus

logger = logging.getLogger(__name__)

CategoryLike = Union[BadgeCategory, str]


def _as_id_set(unlocked_ids: Union[str, Iterable[str]]) -> Set[str]:
    """A single id passed as a plain string counts as one id, not its characters."""
    if isinstance(unlocked_ids, str):
        return {unlocked_ids}
    return set(unlocked_ids)


def validate_badge_catalog(catalog: Mapping[BadgeCategory, Tuple[Badge, ...]]) -> None:
    """Check that badge ids are unique and every badge sits under its own category.

    Raises:
        InvalidBadgeCatalogError: On a duplicate id or a misfiled badge.
    """
    seen = set()
    for category, badges in catalog.items():
        for badge in badges:
            if badge.id in seen:
                raise InvalidBadgeCatalogError(f"Duplicate badge id '{badge.id}'")
            if badge.category is not category:
                raise InvalidBadgeCatalogError(
                    f"Badge '{badge.id}' is declared under {category.value} "
                    f"but has category {badge.category.value}"
                )
            seen.add(badge.id)


class BadgeCatalog:
    """Read-only access to the static badge catalog."""

    CATEGORIES: Mapping[BadgeCategory, Tuple[Badge, ...]] = BADGE_CATEGORIES

    @staticmethod
    def get_all_badges() -> Tuple[Badge, ...]:
        """All badges, category by category in declaration order."""
        badges: Tuple[Badge, ...] = ()
        for category in BadgeCategory:
            badges += BadgeCatalog.CATEGORIES.get(category, ())
        return badges

    @staticmethod
    def get_category_badges(category: CategoryLike) -> Tuple[Badge, ...]:
        """Badges declared under ``category``.

        Args:
            category: BadgeCategory member or its name (case-insensitive)

        Returns:
            The category's badges in declaration order; empty for an
            unknown category.
        """
        resolved = BadgeCategory.parse(category)
        if resolved is None:
            logger.debug(f"Unknown badge category {category!r}")
            return ()
        return BadgeCatalog.CATEGORIES.get(resolved, ())

    @staticmethod
    def get_badge(badge_id: str) -> Optional[Badge]:
        for badge in BadgeCatalog.get_all_badges():
            if badge.id == badge_id:
                return badge
        return None

    @staticmethod
    def _select(category: Optional[CategoryLike]) -> Tuple[Badge, ...]:
        if category is None:
            return BadgeCatalog.get_all_badges()
        return BadgeCatalog.get_category_badges(category)

    @staticmethod
    def get_badges_with_status(
        unlocked_ids: Union[str, Iterable[str]],
        category: Optional[CategoryLike] = None,
    ) -> Tuple[BadgeStatus, ...]:
        """Pair catalog badges with unlock state decided elsewhere.

        Args:
            unlocked_ids: Ids of the badges the member has unlocked, or a single id
            category: Restrict to one category; None for the whole catalog

        Returns:
            BadgeStatus tuple in catalog order
        """
        unlocked = _as_id_set(unlocked_ids)
        known = {badge.id for badge in BadgeCatalog.get_all_badges()}
        unknown = unlocked - known
        if unknown:
            logger.debug(f"Ignoring unknown badge ids: {', '.join(sorted(unknown))}")

        return tuple(
            BadgeStatus(badge=badge, is_unlocked=badge.id in unlocked)
            for badge in BadgeCatalog._select(category)
        )

    @staticmethod
    def count_unlocked(unlocked_ids: Union[str, Iterable[str]], category: Optional[CategoryLike] = None) -> int:
        unlocked = _as_id_set(unlocked_ids)
        return sum(1 for badge in BadgeCatalog._select(category) if badge.id in unlocked)

    @staticmethod
    def count_total(category: Optional[CategoryLike] = None) -> int:
        return len(BadgeCatalog._select(category))

    @staticmethod
    def get_category_icon(category: Optional[CategoryLike] = None) -> str:
        """Filter icon for a category; the "all badges" icon for None."""
        if category is None:
            return CATEGORY_ICONS["ALL"]
        resolved = BadgeCategory.parse(category)
        if resolved is None:
            return CATEGORY_ICONS["ALL"]
        return CATEGORY_ICONS[resolved.value]


def get_activity_icon(activity_category: str) -> str:
    """Icon for an activity category such as ``prayer`` or ``MEETING``."""
    return ACTIVITY_ICONS.get(activity_category.upper(), DEFAULT_ACTIVITY_ICON)


validate_badge_catalog(BADGE_CATEGORIES)

get_all_badges = BadgeCatalog.get_all_badges
get_category_badges = BadgeCatalog.get_category_badges
get_badge = BadgeCatalog.get_badge
get_badges_with_status = BadgeCatalog.get_badges_with_status
count_unlocked = BadgeCatalog.count_unlocked
count_total = BadgeCatalog.count_total
get_category_icon = BadgeCatalog.get_category_icon


__all__ = [
    "BadgeCatalog",
    "count_total",
    "count_unlocked",
    "get_activity_icon",
    "get_all_badges",
    "get_badge",
    "get_badges_with_status",
    "get_category_badges",
    "get_category_icon",
    "validate_badge_catalog",
]
