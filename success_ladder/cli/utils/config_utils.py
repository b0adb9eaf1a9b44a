"""Configuration helpers shared by CLI commands."""

from __future__ import annotations

import logging

import typer

from ...config import Config
from ...exceptions import ConfigurationError
from ..shared import console

logger = logging.getLogger(__name__)


def load_config() -> Config:
    """Load configuration, exiting the CLI with a readable error on failure."""
    try:
        config = Config.load()
    except ValueError as exc:
        error = ConfigurationError(str(exc))
        console.print_error(error, context="Configuration error:")
        raise typer.Exit(code=1) from error

    logger.debug(f"Loaded configuration version {config.version}")
    console.log(f"Loaded configuration version {config.version}")
    return config
