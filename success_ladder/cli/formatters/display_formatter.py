"""Display formatting utilities for CLI output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional, Sequence

from rich import box
from rich.markup import escape
from rich.table import Table

from ...constants import PROGRESS_BAR_CHARS, TROPHY_ICONS
from ...game_elements.badge_catalog import BadgeCatalog
from ...models import BadgeCategory, BadgeStatus, LeaderboardEntry, LeaderboardStats, Level, MemberLevelStatus

if TYPE_CHECKING:
    from ...config import Config
    from ...console import Console


def render_progress_bar(percent: int, width: int) -> str:
    """Text progress bar, e.g. ``█████░░░░░`` for 50% at width 10."""
    filled = percent * width // 100
    return PROGRESS_BAR_CHARS["filled"] * filled + PROGRESS_BAR_CHARS["empty"] * (width - filled)


def _level_label(level: Level) -> str:
    return f"[{level.color}]●[/] [bold]{escape(level.name)}[/]"


def _range_label(level: Level, last: bool) -> str:
    if last:
        return f"{level.min_points}+"
    return f"{level.min_points}-{level.max_points}"


def print_level_status(console: Console, status: MemberLevelStatus, bar_width: int) -> None:
    """Render one member's level card.

    Args:
        console: Console instance for output
        status: Level snapshot to show
        bar_width: Width of the progress bar in characters
    """
    level = status.current_level
    console.print(f"[label]Level {level.id}:[/] {_level_label(level)}  [value]{status.points} points[/]")

    bar = render_progress_bar(status.progress_percent, bar_width)
    console.print(f"[accent]{bar}[/] [value]{status.progress_percent}%[/]")

    if status.next_level is None:
        console.print("[success]Maximum level reached[/]")
    else:
        console.print(
            f"[label]Next level:[/] {_level_label(status.next_level)} "
            f"[muted]({status.points_to_next_level} points to go)[/]"
        )


def print_level_table(console: Console, levels: Sequence[Level], highlight_id: Optional[int] = None) -> None:
    """Render the level table, marking the highlighted level."""
    table = Table(
        title="Success Ladder Levels",
        box=box.ROUNDED,
        title_style="title",
        border_style="frame",
    )
    table.add_column("#", style="muted", justify="right")
    table.add_column("Level")
    table.add_column("Points", style="value", justify="right")
    table.add_column("Color", style="muted")

    for index, level in enumerate(levels):
        marker = " [accent]◀[/]" if level.id == highlight_id else ""
        table.add_row(
            str(level.id),
            f"{_level_label(level)}{marker}",
            _range_label(level, last=index == len(levels) - 1),
            level.color,
        )

    console.print(table)


def print_badges(console: Console, statuses: Iterable[BadgeStatus], show_criteria: bool = True) -> None:
    """Render badges with their unlock state."""
    table = Table(
        title="Badges",
        box=box.ROUNDED,
        title_style="title",
        border_style="frame",
    )
    table.add_column("", no_wrap=True)
    table.add_column("Badge")
    table.add_column("Category", style="label")
    table.add_column("Status", no_wrap=True)
    if show_criteria:
        table.add_column("Criteria", style="muted")

    for status in statuses:
        badge = status.badge
        state = "[success]✓ unlocked[/]" if status.is_unlocked else "[locked]locked[/]"
        name_style = "bold" if status.is_unlocked else "locked"
        row = [
            badge.icon,
            f"[{name_style}]{escape(badge.name)}[/]\n[muted]{escape(badge.description)}[/]",
            badge.category.value,
            state,
        ]
        if show_criteria:
            row.append(escape(badge.criteria))
        table.add_row(*row)

    console.print(table)


def print_badge_summary(console: Console, unlocked_ids: Iterable[str]) -> None:
    """Per-category unlocked/total counts."""
    unlocked = set(unlocked_ids)
    parts = []
    for category in BadgeCategory:
        icon = BadgeCatalog.get_category_icon(category)
        done = BadgeCatalog.count_unlocked(unlocked, category)
        total = BadgeCatalog.count_total(category)
        parts.append(f"{icon} {category.value} {done}/{total}")

    console.print(
        f"[label]Unlocked:[/] [value]{BadgeCatalog.count_unlocked(unlocked)}/{BadgeCatalog.count_total()}[/]  "
        + "  ".join(parts)
    )


def _rank_label(rank: int) -> str:
    return TROPHY_ICONS.get(rank, f"#{rank}")


def print_leaderboard(console: Console, entries: Sequence[LeaderboardEntry], stats: LeaderboardStats) -> None:
    """Render the ranking table followed by summary statistics."""
    table = Table(
        title="Leaderboard",
        box=box.ROUNDED,
        title_style="title",
        border_style="frame",
    )
    table.add_column("Rank", justify="right", no_wrap=True)
    table.add_column("Member")
    table.add_column("Level")
    table.add_column("Score", style="value", justify="right")

    for entry in entries:
        name = escape(entry.name)
        if entry.is_current_user:
            name = f"[accent]{name} (you)[/]"
        table.add_row(_rank_label(entry.rank), name, _level_label(entry.level), str(entry.score))

    console.print(table)

    position = stats.user_position if stats.user_position is not None else "-"
    console.print(
        f"[label]Members:[/] [value]{stats.total_members}[/]  "
        f"[label]Top score:[/] [value]{stats.top_score}[/]  "
        f"[label]Average:[/] [value]{stats.average_score:.2f}[/]  "
        f"[label]Your position:[/] [value]{position}[/]"
    )


def print_config_summary(console: Console, config: Config) -> None:
    """Render the current configuration as a table.

    Args:
        console: Console instance for output
        config: Loaded configuration
    """
    table = Table(
        title="Success Ladder Configuration",
        box=box.ROUNDED,
        title_style="title",
        border_style="frame",
        expand=True,
        show_lines=True,
    )
    table.add_column("Section", style="label", no_wrap=True)
    table.add_column("Values", style="value")

    for section, values in config.to_display_dict().items():
        rendered_values = "\n".join(f"[label]{k}[/]: [value]{v}[/]" for k, v in values.items())
        table.add_row(f"[accent]{section}[/]", rendered_values)

    console.print(table)
