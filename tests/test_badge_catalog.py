"""Tests for the badge catalog."""

import pytest

from success_ladder.exceptions import InvalidBadgeCatalogError
from success_ladder.game_elements.badge_catalog import (
    BadgeCatalog,
    count_total,
    count_unlocked,
    get_activity_icon,
    get_all_badges,
    get_badge,
    get_badges_with_status,
    get_category_badges,
    get_category_icon,
    validate_badge_catalog,
)
from success_ladder.models import Badge, BadgeCategory


def test_all_badges_is_sum_of_categories():
    total = sum(len(get_category_badges(category)) for category in BadgeCategory)
    assert len(get_all_badges()) == total == 12


def test_badge_ids_are_unique():
    ids = [badge.id for badge in get_all_badges()]
    assert len(ids) == len(set(ids))


def test_all_badges_follow_category_order():
    categories = [badge.category for badge in get_all_badges()]
    expected = [category for category in BadgeCategory for _ in range(3)]
    assert categories == expected


def test_all_badges_is_restartable():
    assert get_all_badges() == get_all_badges()


def test_service_badges_in_declared_order():
    service = get_category_badges(BadgeCategory.SERVICE)
    assert [badge.id for badge in service] == ["volunteer", "servant", "minister"]

    others = {badge.id for badge in get_all_badges() if badge.category is not BadgeCategory.SERVICE}
    assert not others & {badge.id for badge in service}


@pytest.mark.parametrize("name", ["SERVICE", "service", " Service "])
def test_category_accepts_names(name):
    assert get_category_badges(name) == get_category_badges(BadgeCategory.SERVICE)


def test_unknown_category_is_empty():
    assert get_category_badges("PRAYER") == ()


def test_get_badge_by_id():
    badge = get_badge("first_timoteo")
    assert badge.name == "Primeiro Timóteo"
    assert badge.category is BadgeCategory.LEADERSHIP
    assert get_badge("missing") is None


def test_badges_with_status_marks_unlocked_ids():
    statuses = get_badges_with_status(["mentor", "volunteer", "not_a_badge"])
    unlocked = [status.badge.id for status in statuses if status.is_unlocked]

    assert len(statuses) == 12
    assert unlocked == ["mentor", "volunteer"]


def test_badges_with_status_filters_category():
    statuses = get_badges_with_status({"student"}, category="learning")
    assert [status.badge.id for status in statuses] == ["student", "graduate", "teacher"]
    assert [status.is_unlocked for status in statuses] == [True, False, False]


def test_unlock_counts():
    unlocked = ["perfect_month", "year_warrior", "servant"]
    assert count_unlocked(unlocked) == 3
    assert count_unlocked(unlocked, BadgeCategory.FREQUENCY) == 2
    assert count_unlocked(unlocked, "LEADERSHIP") == 0
    assert count_total() == 12
    assert count_total("frequency") == 3


def test_single_id_string_is_one_id():
    statuses = get_badges_with_status("mentor")
    unlocked = [status.badge.id for status in statuses if status.is_unlocked]
    assert unlocked == ["mentor"]
    assert count_unlocked("mentor") == 1
    assert count_unlocked("mentor", "learning") == 0


def test_category_icons():
    assert get_category_icon() == "🏆"
    assert get_category_icon(BadgeCategory.FREQUENCY) == "📅"
    assert get_category_icon("service") == "🤝"
    assert get_category_icon("unknown") == "🏆"


def test_activity_icons_are_case_insensitive():
    assert get_activity_icon("prayer") == "🙏"
    assert get_activity_icon("MEETING") == "🗣️"
    assert get_activity_icon("gardening") == "📋"


def test_catalog_cannot_be_mutated():
    with pytest.raises(TypeError):
        BadgeCatalog.CATEGORIES[BadgeCategory.SERVICE] = ()  # type: ignore[index]


class TestValidateBadgeCatalog:
    def _badge(self, badge_id: str, category: BadgeCategory) -> Badge:
        return Badge(badge_id, badge_id.title(), "desc", "*", category, "criteria")

    def test_rejects_duplicate_ids_across_categories(self):
        catalog = {
            BadgeCategory.FREQUENCY: (self._badge("dup", BadgeCategory.FREQUENCY),),
            BadgeCategory.SERVICE: (self._badge("dup", BadgeCategory.SERVICE),),
        }
        with pytest.raises(InvalidBadgeCatalogError):
            validate_badge_catalog(catalog)

    def test_rejects_misfiled_badge(self):
        catalog = {BadgeCategory.LEARNING: (self._badge("x", BadgeCategory.SERVICE),)}
        with pytest.raises(InvalidBadgeCatalogError):
            validate_badge_catalog(catalog)
