"""
Custom Exception Classes for Metabox

This module defines the exceptions raised by the field registry, renderer
and saver, and the error codes the HTTP layer reports them with.
"""

from enum import Enum
from typing import Any

from fastapi import status


class ErrorCode(str, Enum):
    """Machine-readable error codes."""

    FIELD_INVALID = "FIELD_INVALID"
    FIELD_RENDER_FAILED = "FIELD_RENDER_FAILED"
    QUEUE_NOT_FOUND = "QUEUE_NOT_FOUND"
    ITEM_ID_MISSING = "ITEM_ID_MISSING"
    DATA_TYPE_UNKNOWN = "DATA_TYPE_UNKNOWN"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class MetaBoxError(Exception):
    """Base exception class for all Metabox exceptions"""

    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


# ============================================================================
# Field Definition Exceptions
# ============================================================================


class InvalidFieldError(MetaBoxError):
    """Raised when a field descriptor lacks a required attribute"""

    error_code = ErrorCode.FIELD_INVALID

    def __init__(self, message: str, missing: str | None = None):
        details = {"missing": missing} if missing else {}
        super().__init__(message=message, status_code=status.HTTP_400_BAD_REQUEST, details=details)


class FieldRenderError(MetaBoxError):
    """Raised when a single field cannot be rendered"""

    error_code = ErrorCode.FIELD_RENDER_FAILED

    def __init__(self, field_name: str | None, reason: str):
        super().__init__(
            message=f"Cannot render field '{field_name}': {reason}",
            details={"field": field_name, "reason": reason},
        )


# ============================================================================
# Queue Exceptions
# ============================================================================


class UnknownQueueError(MetaBoxError):
    """Raised when a queue name has no registered fields"""

    error_code = ErrorCode.QUEUE_NOT_FOUND

    def __init__(self, queue_name: str):
        super().__init__(
            message=f"Queue '{queue_name}' not found",
            status_code=status.HTTP_404_NOT_FOUND,
            details={"queue": queue_name},
        )


class MissingItemIdError(MetaBoxError):
    """Raised when a queue operation has no content item to act on"""

    error_code = ErrorCode.ITEM_ID_MISSING

    def __init__(self, queue_name: str):
        super().__init__(
            message=f"Cannot process queue '{queue_name}' without a content item id",
            status_code=status.HTTP_400_BAD_REQUEST,
            details={"queue": queue_name},
        )


# ============================================================================
# Coercion Exceptions
# ============================================================================


class UnknownDataTypeError(MetaBoxError):
    """Raised when a field declares a data type coercion does not support"""

    error_code = ErrorCode.DATA_TYPE_UNKNOWN

    def __init__(self, data_type: Any, field_name: str | None = None):
        details: dict[str, Any] = {"data_type": str(data_type)}
        if field_name:
            details["field"] = field_name
        super().__init__(
            message=f'Attempted to sanitize unknown type: "{data_type}"',
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
        )
