"""Console instance shared by the CLI entry point and its commands."""

from __future__ import annotations

from ..console import Console

console = Console()

__all__ = ["console"]
