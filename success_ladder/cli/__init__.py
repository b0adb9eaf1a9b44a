"""Command line interface for the success ladder toolkit.

The implementation is split into modular components:
- commands/    - Command handlers
- formatters/  - Rich renderers
- utils/       - Utility functions
"""

from __future__ import annotations

import logging
import os

import typer

from .commands import badges_cmd, config_cmd, ladder_cmd, leaderboard_cmd
from .shared import console

__all__ = ["app", "console", "main"]

app = typer.Typer(help="Levels, badges and leaderboards for the success ladder.")


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output for debugging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress non-essential output",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
) -> None:
    """CLI entry-point callback for shared initialisation."""
    console.set_verbose(verbose)
    console.set_quiet(quiet)

    if no_color:
        os.environ["NO_COLOR"] = "1"
        console.no_color = True

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


ladder_cmd.register_commands(app)
badges_cmd.register_command(app)
leaderboard_cmd.register_command(app)
config_cmd.register_commands(app)


def main() -> None:
    """Console script entry point."""
    app()
