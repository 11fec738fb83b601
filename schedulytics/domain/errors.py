"""
Error Handling Module

Defines domain exceptions and error categories for the application.
Domain exceptions are pure and have no external dependencies.
Application exceptions carry a category that the API layer maps to a
gRPC status code.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCategory(Enum):
    """Error category enumeration for structured error handling."""

    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"
    UNAVAILABLE = "unavailable"


# User-facing titles and messages per category
ERROR_MESSAGES: Dict[ErrorCategory, Dict[str, str]] = {
    ErrorCategory.INVALID_ARGUMENT: {
        "title": "Invalid Argument",
        "message": "The request contains an identifier that could not be parsed.",
    },
    ErrorCategory.NOT_FOUND: {
        "title": "Job Not Found",
        "message": "The requested job does not exist.",
    },
    ErrorCategory.INTERNAL: {
        "title": "Internal Error",
        "message": "The job store could not complete the operation.",
    },
    ErrorCategory.UNAVAILABLE: {
        "title": "Stream Unavailable",
        "message": "A stored job could not be decoded while streaming.",
    },
}


# ============================================================================
# Domain Exceptions (Pure - No External Dependencies)
# ============================================================================

class DomainError(Exception):
    """
    Base exception for all domain errors.

    Domain exceptions can optionally wrap original errors for context.
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        """
        Initialize domain error.

        Args:
            message: Error message
            original_error: Optional original exception that caused this error
        """
        super().__init__(message)
        self.original_error = original_error


class InvalidJobIdError(DomainError):
    """
    Raised when a string cannot be parsed into a job identifier.

    Raised by the JobId value object.
    """
    pass


class JobDecodeError(DomainError):
    """Raised when a stored document cannot be turned into a Job."""
    pass


class RepositoryError(DomainError):
    """
    Raised when the job store fails (connectivity, timeouts, write errors).

    Wraps the driver exception so the domain does not depend on it.
    """
    pass


# ============================================================================
# Application Layer Exceptions
# ============================================================================

class ApplicationError(Exception):
    """
    Base application error with category and user-facing messaging.

    ``str(error)`` is the technical message, which wraps the underlying
    store error so callers see what actually went wrong.
    """

    category = ErrorCategory.INTERNAL

    def __init__(
        self,
        technical_message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        category: Optional[ErrorCategory] = None,
    ):
        """
        Initialize application error.

        Args:
            technical_message: Technical error details returned to the caller
            context: Additional context information for logging
            category: Overrides the class-level category
        """
        if category is not None:
            self.category = category
        self.technical_message = technical_message or ""
        self.context = context or {}

        error_info = ERROR_MESSAGES.get(
            self.category, ERROR_MESSAGES[ErrorCategory.INTERNAL]
        )
        self.title = error_info["title"]
        self.message = error_info["message"]

        super().__init__(self.technical_message or self.message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error to dictionary for logging and debugging.

        Returns:
            Dictionary with error information
        """
        return {
            "error": self.category.value,
            "title": self.title,
            "message": self.message,
            "detail": self.technical_message,
        }


class InvalidArgumentError(ApplicationError):
    """Raised when a client-supplied identifier cannot be parsed."""

    category = ErrorCategory.INVALID_ARGUMENT


class JobNotFoundError(ApplicationError):
    """Raised when an operation targets a job that does not exist."""

    category = ErrorCategory.NOT_FOUND


class InternalError(ApplicationError):
    """Raised on store connectivity or unexpected failures."""

    category = ErrorCategory.INTERNAL


class StreamUnavailableError(ApplicationError):
    """Raised when a record fails decoding in the middle of a stream."""

    category = ErrorCategory.UNAVAILABLE


class ConfigurationError(Exception):
    """Raised when required environment configuration is missing or invalid."""
    pass
