"""Rich console pre-configured with the success ladder theme."""

from __future__ import annotations

from typing import Any

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.theme import Theme

from .constants import THEME_STYLES

_default_theme = Theme(THEME_STYLES)


class Console(RichConsole):
    """Rich console with quiet/verbose switches and message helpers."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:  # noqa: D401 - mirror rich API
        theme = kwargs.pop("theme", None) or _default_theme
        super().__init__(*args, theme=theme, **kwargs)
        self._verbose = False
        self._quiet = False

    def set_verbose(self, verbose: bool) -> None:
        """Enable or disable verbose output."""
        self._verbose = verbose

    def set_quiet(self, quiet: bool) -> None:
        """Enable or disable quiet mode."""
        self._quiet = quiet

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Print with respect to quiet mode."""
        if not self._quiet:
            super().print(*args, **kwargs)

    def log(self, *args: Any, **kwargs: Any) -> None:
        """Log with respect to verbose mode."""
        if self._verbose and not self._quiet:
            super().log(*args, **kwargs)

    def print_error(self, error: Exception | str, context: str = "") -> None:
        """Print error message with consistent formatting.

        Errors are shown even in quiet mode.

        Args:
            error: Exception instance or error message string
            context: Optional context prefix (e.g., "Invalid leaderboard file:")
        """
        prefix = context or "Error:"
        super().print(f"[danger]{prefix}[/] {escape(str(error))}")

    def print_success(self, message: str) -> None:
        self.print(f"[success]{message}[/]")

    def print_warning(self, message: str) -> None:
        self.print(f"[warning]{message}[/]")


__all__ = ["Console"]
