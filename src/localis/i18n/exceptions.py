"""
Localisation Exception Hierarchy.

Defines all exceptions raised while configuring the locale store
and loading string resources.
"""

from enum import Enum


class LocalisationErrorCode(str, Enum):
    """Error codes for localisation operations."""

    # Configuration errors
    INVALID_DIRECTORY = "INVALID_DIRECTORY"
    ALREADY_CONFIGURED = "ALREADY_CONFIGURED"
    NOT_CONFIGURED = "NOT_CONFIGURED"
    INVALID_SETTINGS = "INVALID_SETTINGS"

    # Resource errors
    MISSING_RESOURCE = "MISSING_RESOURCE"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class LocalisationError(Exception):
    """Base exception for all localisation errors."""

    def __init__(
        self,
        message: str,
        code: LocalisationErrorCode = LocalisationErrorCode.INTERNAL_ERROR,
        details: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert exception to dictionary for serialization."""
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(LocalisationError):
    """Raised when the store is configured incorrectly or out of order."""

    def __init__(
        self,
        message: str,
        code: LocalisationErrorCode = LocalisationErrorCode.INVALID_DIRECTORY,
        details: dict | None = None,
    ) -> None:
        super().__init__(message, code, details)


class NotConfiguredError(ConfigurationError):
    """Raised when the store is used before it has been configured."""

    def __init__(
        self,
        message: str = (
            "The locale store has not been configured. "
            "Call configure() before using it."
        ),
        code: LocalisationErrorCode = LocalisationErrorCode.NOT_CONFIGURED,
        details: dict | None = None,
    ) -> None:
        super().__init__(message, code, details)


class ResourceLoadError(LocalisationError):
    """Raised when no string resources exist for a locale or its fallbacks."""

    def __init__(
        self,
        message: str,
        code: LocalisationErrorCode = LocalisationErrorCode.MISSING_RESOURCE,
        details: dict | None = None,
    ) -> None:
        super().__init__(message, code, details)
