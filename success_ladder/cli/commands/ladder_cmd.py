"""Level commands for the success ladder CLI.

This module contains the ``level`` command, which resolves a point total,
and the ``levels`` command, which lists the whole ladder.
"""

from __future__ import annotations

import json
from typing import Optional

import typer

from ...exceptions import LadderError
from ...game_elements.level_calculator import LevelCalculator
from ..formatters.display_formatter import print_level_status, print_level_table
from ..shared import console
from ..utils.config_utils import load_config


def level(
    points: int = typer.Argument(..., help="Member point total (success_ladder_score)"),
    previous: Optional[int] = typer.Option(
        None,
        "--previous",
        "-p",
        help="Earlier point total; announces a level-up when a level was crossed",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Show the level, next level and progress for a point total.

    Examples:
        ladder level 100
        ladder level 640 --previous 580
        ladder level -5          # clamps to 0
    """
    config = load_config()

    try:
        status = LevelCalculator.get_member_status(points)
        leveled_up = previous is not None and LevelCalculator.has_leveled_up(previous, points)
    except LadderError as exc:
        console.print_error(exc)
        raise typer.Exit(code=1) from exc

    if as_json:
        payload = status.to_dict()
        payload["leveled_up"] = leveled_up
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    if leveled_up:
        console.print_success(f"🎉 Level up! Reached {status.current_level.name}")
    print_level_status(console, status, config.display.progress_bar_width)


def levels(
    points: Optional[int] = typer.Option(
        None,
        "--points",
        "-p",
        help="Highlight the level for this point total",
    ),
) -> None:
    """List every level of the success ladder."""
    highlight_id = None
    if points is not None:
        try:
            highlight_id = LevelCalculator.get_current_level(points).id
        except LadderError as exc:
            console.print_error(exc)
            raise typer.Exit(code=1) from exc

    print_level_table(console, LevelCalculator.get_levels(), highlight_id)


def register_commands(app: typer.Typer) -> None:
    """Register level commands with the main CLI app."""
    # Negative totals such as "-5" are read as the POINTS argument, not an option
    app.command(name="level", context_settings={"ignore_unknown_options": True})(level)
    app.command(name="levels")(levels)
