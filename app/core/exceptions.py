"""
Domain errors raised by the validation, store and service layers.

Each error knows the HTTP status and error code it maps to, so the
exception handler registered in ``main.py`` can render it without the
core layers knowing about HTTP.
"""
from typing import Any, Dict, Optional

from fastapi import status


class FleetError(Exception):
    """Base class for every error the core layers raise."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(FleetError):
    """Request payload breaks a domain rule; raised before any database call."""

    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "VALIDATION_ERROR"


class InvalidArgumentError(FleetError):
    """Malformed identifier, e.g. a path parameter that is not a UUID."""

    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "INVALID_ARGUMENT"


class NotFoundError(FleetError):
    status_code = status.HTTP_404_NOT_FOUND
    error_code = "NOT_FOUND"


class ReferentialIntegrityError(FleetError):
    """A referenced row (engine, user, car, driver) does not exist."""

    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "INVALID_REFERENCE"


class UnauthorizedError(FleetError):
    status_code = status.HTTP_401_UNAUTHORIZED
    error_code = "UNAUTHORIZED"


class StorageError(FleetError):
    """Unclassified database or driver failure."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code = "DATABASE_ERROR"


class ConflictError(StorageError):
    """Unique constraint violation (duplicate registration number, username)."""

    status_code = status.HTTP_409_CONFLICT
    error_code = "DUPLICATE_RESOURCE"
