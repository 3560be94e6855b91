"""Custom exception classes for the finance tracker.

Each exception carries an error_code that maps to the catalog in errors.py
and the HTTP status it surfaces as.
"""

from typing import Any

from fastapi import status


class FinanceTrackerError(Exception):
    """Base exception for all domain errors.

    Attributes:
        error_code: Code from the error catalog (e.g., "CAT_001")
        details: Additional context about the error (for logging)
        http_status: HTTP status code to return (default: 500)
    """

    default_status = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        error_code: str,
        details: dict[str, Any] | None = None,
        http_status: int | None = None,
    ):
        self.error_code = error_code
        self.details = details or {}
        self.http_status = http_status or self.default_status
        super().__init__(error_code)


class NotFoundError(FinanceTrackerError):
    """Raised when a resource, or a resource type, does not exist."""

    default_status = status.HTTP_404_NOT_FOUND


class BadRequestError(FinanceTrackerError):
    """Raised for ownership violations, duplicates and failed persistence."""

    default_status = status.HTTP_400_BAD_REQUEST


class AuthenticationError(FinanceTrackerError):
    """Raised when credentials cannot be verified."""

    default_status = status.HTTP_401_UNAUTHORIZED
