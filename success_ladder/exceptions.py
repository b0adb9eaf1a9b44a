"""Custom exceptions for the success ladder toolkit."""

from __future__ import annotations


class LadderError(Exception):
    """Base exception for all success ladder errors."""
    pass


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(LadderError):
    """Raised when there's a configuration problem."""
    pass


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(LadderError):
    """Base exception for validation errors."""
    pass


class InvalidInputError(ValidationError):
    """Raised when user input is invalid."""

    def __init__(self, message: str, source: str | None = None):
        """Initialize input error.

        Args:
            message: Error message
            source: Where the bad input came from (e.g., a file path)
        """
        super().__init__(message)
        self.source = source


class InvalidPointsError(ValidationError):
    """Raised when a point total is not a number at all."""
    pass


class InvalidLevelTableError(ValidationError):
    """Raised when a level table breaks ordering or contiguity."""

    def __init__(self, message: str, level_id: int | None = None):
        """Initialize level table error.

        Args:
            message: Error message
            level_id: Id of the level where the table went wrong
        """
        super().__init__(message)
        self.level_id = level_id


class InvalidBadgeCatalogError(ValidationError):
    """Raised when the badge catalog contains duplicate or misfiled badges."""
    pass
