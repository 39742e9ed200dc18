import re
from typing import Any, Dict, List, Optional
from fastapi.encoders import jsonable_encoder
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from app.schemas.base import (
    create_success_response,
    create_error_response,
)
from app.core.exceptions import (
    ConflictError,
    FleetError,
    ReferentialIntegrityError,
    StorageError,
)
from app.core.logging_config import get_logger

logger = get_logger(__name__)


class ResponseWrapper:
    """Utility class for wrapping responses in standard format"""

    @staticmethod
    def success(data: Any = None, message: str = "Success") -> Dict[str, Any]:
        return create_success_response(jsonable_encoder(data), message)

    @staticmethod
    def error(
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Wrap error response and make it JSON-safe"""
        raw = create_error_response(message, error_code, details)
        return jsonable_encoder(raw)

    @staticmethod
    def created(data: Any = None, message: str = "Resource created successfully") -> Dict[str, Any]:
        return ResponseWrapper.success(data, message)

    @staticmethod
    def updated(data: Any = None, message: str = "Resource updated successfully") -> Dict[str, Any]:
        return ResponseWrapper.success(data, message)

    @staticmethod
    def deleted(data: Any = None, message: str = "Resource deleted successfully") -> Dict[str, Any]:
        return ResponseWrapper.success(data, message)

    @staticmethod
    def from_error(error: FleetError) -> Dict[str, Any]:
        return ResponseWrapper.error(
            message=error.message,
            error_code=error.error_code,
            details=error.details,
        )


def _conflicting_fields(error_msg: str) -> List[str]:
    # Postgres: Key (col_a, col_b)=(val_a, val_b); SQLite: constraint failed: users.username
    match = re.search(r"Key \((.*?)\)=", error_msg)
    if match:
        return [col.strip() for col in match.group(1).split(",")]
    match = re.search(r"constraint failed: ([\w., ]+)", error_msg)
    if match:
        return [col.strip().split(".")[-1] for col in match.group(1).split(",")]
    return []


def handle_db_error(error: SQLAlchemyError) -> FleetError:
    """
    Convert a database error into the matching domain error.

    The driver message is logged server-side. Response details carry column
    names only, never the statement or its bound parameters.
    """
    orig = getattr(error, "orig", None)
    error_msg = str(orig if orig is not None else error).strip().replace("\n", " ")
    lowered = error_msg.lower()

    if isinstance(error, IntegrityError):
        if "foreign key" in lowered:
            logger.warning(f"Foreign key violation: {error_msg}")
            return ReferentialIntegrityError(
                "Referenced resource not found",
                {"conflicting_fields": _conflicting_fields(error_msg)},
            )
        if "duplicate key" in lowered or "unique constraint" in lowered:
            logger.warning(f"Unique constraint violation: {error_msg}")
            return ConflictError(
                "Resource already exists with the same values",
                {"conflicting_fields": _conflicting_fields(error_msg)},
            )

    logger.error(f"Unclassified database error: {error}")
    return StorageError("Database operation failed")
