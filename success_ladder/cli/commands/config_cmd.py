"""Configuration commands for the success ladder CLI.

This module contains commands for viewing and changing settings stored in
``~/.config/success_ladder/config.toml``.
"""

from __future__ import annotations

import typer

from ...config import Config
from ..formatters.display_formatter import print_config_summary
from ..shared import console
from ..utils.config_utils import load_config

config_app = typer.Typer(help="Manage configuration settings")


@config_app.command("show")
def show_config() -> None:
    """Display current configuration settings."""

    print_config_summary(console, load_config())


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help="Configuration key in dot notation (e.g. defaults.leaderboard_limit)"),
    value: str = typer.Argument(..., help="Value to set"),
) -> None:
    """Set a configuration value.

    Examples:
        ladder config set defaults.leaderboard_limit 20
        ladder config set display.show_criteria false
    """
    try:
        config = Config.load()
        config.set_value(key, value)
        config.dump()
        console.print(f"[success]✓ Configuration updated:[/] {key} = {value}")
    except ValueError as exc:
        console.print_error(exc)
        raise typer.Exit(code=1) from exc


@config_app.command("get")
def config_get(
    key: str = typer.Argument(..., help="Configuration key in dot notation (e.g. display.progress_bar_width)"),
) -> None:
    """Get a configuration value."""
    try:
        value = Config.load().get_value(key)
    except ValueError as exc:
        console.print_error(exc)
        raise typer.Exit(code=1) from exc

    console.print(f"{key} = {value}")


def register_commands(app: typer.Typer) -> None:
    """Register config commands with the main CLI app."""
    app.add_typer(config_app, name="config")
