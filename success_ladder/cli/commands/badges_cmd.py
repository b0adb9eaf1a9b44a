"""Badge command for the success ladder CLI."""

from __future__ import annotations

import json
from typing import List, Optional

import typer

from ...game_elements.badge_catalog import BadgeCatalog
from ...models import BadgeCategory
from ..formatters.display_formatter import print_badge_summary, print_badges
from ..shared import console
from ..utils.config_utils import load_config


def _split_ids(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def badges(
    category: Optional[str] = typer.Option(
        None,
        "--category",
        "-c",
        help="Only show one category (frequency, leadership, learning, service)",
    ),
    unlocked: Optional[str] = typer.Option(
        None,
        "--unlocked",
        "-u",
        help="Comma-separated ids of badges the member has unlocked",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the badges as JSON"),
) -> None:
    """Show the badge catalog with unlock state.

    Examples:
        ladder badges
        ladder badges --category service --unlocked volunteer,servant
    """
    config = load_config()

    if category is not None and BadgeCategory.parse(category) is None:
        valid = ", ".join(member.value.lower() for member in BadgeCategory)
        console.print_error(f"Unknown category '{category}'. Valid categories: {valid}")
        raise typer.Exit(code=1)

    unlocked_ids = _split_ids(unlocked)
    unknown = [badge_id for badge_id in unlocked_ids if BadgeCatalog.get_badge(badge_id) is None]
    if unknown:
        console.print_warning(f"Ignoring unknown badge ids: {', '.join(unknown)}")

    statuses = BadgeCatalog.get_badges_with_status(unlocked_ids, category)

    if as_json:
        payload = [
            {**status.badge.to_dict(), "is_unlocked": status.is_unlocked}
            for status in statuses
        ]
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    print_badges(console, statuses, show_criteria=config.display.show_criteria)
    print_badge_summary(console, unlocked_ids)


def register_command(app: typer.Typer) -> None:
    """Register the badges command with the CLI app."""
    app.command(name="badges")(badges)
