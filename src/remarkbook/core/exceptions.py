"""Domain exceptions raised by services and mapped to HTTP responses.

Each exception carries an error code from the catalog in errors.py and the
HTTP status it should be answered with.
"""

from typing import Any


class RemarkbookError(Exception):
    """Base exception for all domain errors.

    Attributes:
        error_code: Code from the error catalog (e.g., "REM_001")
        details: Additional context about the error (for logging only)
        http_status: HTTP status code to return
        message: Optional override of the catalog message
    """

    default_status = 500

    def __init__(
        self,
        error_code: str,
        details: dict[str, Any] | None = None,
        http_status: int | None = None,
        message: str | None = None,
    ):
        self.error_code = error_code
        self.details = details or {}
        self.http_status = http_status or self.default_status
        self.message = message
        super().__init__(message or error_code)


class BadRequestError(RemarkbookError):
    """Malformed or invalid input (bad enum token, unparseable date, missing field)."""

    default_status = 400


class AuthenticationError(RemarkbookError):
    """Missing, invalid or expired credential, or failed login."""

    default_status = 401


class AccessDeniedError(RemarkbookError):
    """The record exists but belongs to another user."""

    default_status = 403


class NotFoundError(RemarkbookError):
    default_status = 404


class ConflictError(RemarkbookError):
    """Duplicate email. Answered with 400 to keep the established contract."""

    default_status = 400


class UploadError(BadRequestError):
    """Rejected profile image (wrong type, too large, missing)."""

    pass


class StorageError(RemarkbookError):
    """Writing an uploaded file to disk failed."""

    default_status = 500
