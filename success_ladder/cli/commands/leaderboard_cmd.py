"""Leaderboard command for the success ladder CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ...exceptions import LadderError
from ...game_elements.leaderboard import build_leaderboard, load_member_scores, summarize_leaderboard
from ..formatters.display_formatter import print_leaderboard
from ..shared import console
from ..utils.config_utils import load_config


def leaderboard(
    scores_file: Path = typer.Argument(
        ...,
        help="JSON export of member scores (list, or object with a 'leaderboard' list)",
    ),
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        "-l",
        help="Maximum number of members to display (default: defaults.leaderboard_limit)",
    ),
    me: Optional[str] = typer.Option(
        None,
        "--me",
        help="Member id to highlight as the current user",
    ),
) -> None:
    """Rank members by success ladder score.

    Examples:
        ladder leaderboard scores.json
        ladder leaderboard scores.json --limit 5 --me 3f2a
    """
    config = load_config()
    effective_limit = limit if limit is not None else config.defaults.leaderboard_limit

    try:
        members = load_member_scores(scores_file)
        entries = build_leaderboard(members, current_member_id=me, limit=effective_limit)
    except LadderError as exc:
        console.print_error(exc, context="Invalid leaderboard input:")
        raise typer.Exit(code=1) from exc

    if not entries:
        console.print_warning("No members to rank.")
        return

    stats = summarize_leaderboard(members, current_member_id=me)
    print_leaderboard(console, entries, stats)


def register_command(app: typer.Typer) -> None:
    """Register the leaderboard command with the CLI app."""
    app.command(name="leaderboard")(leaderboard)
