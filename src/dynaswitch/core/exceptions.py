"""DynaSwitch exception hierarchy.

Each class carries the HTTP status it maps to at the API boundary.
"""

from __future__ import annotations


class DynaSwitchError(Exception):
    """Base exception for all DynaSwitch errors."""

    status_code: int = 500

    def __init__(self, message: str, detail: str | None = None) -> None:
        self.message = message
        self.detail = detail
        super().__init__(message)


class ValidationError(DynaSwitchError):
    """A required field is missing or malformed."""

    status_code = 400


class NotFoundError(DynaSwitchError):
    """No record exists for the requested key."""

    status_code = 404


class ForbiddenError(DynaSwitchError):
    """The active identifier may not perform the operation."""

    status_code = 403


class ConflictError(DynaSwitchError):
    """The table being created already exists."""

    status_code = 409


class ConfigurationError(DynaSwitchError):
    """No usable identifier or credentials for this request."""

    status_code = 500


class RemoteStoreError(DynaSwitchError):
    """Uncategorized failure reported by DynamoDB."""

    status_code = 500
