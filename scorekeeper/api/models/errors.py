"""Error response models for consistent API error handling."""

from enum import Enum

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Standardized error codes for API responses."""

    INVALID_REQUEST = "INVALID_REQUEST"
    """Request validation failed (malformed JSON, missing fields, etc.)."""

    RECORD_NOT_FOUND = "RECORD_NOT_FOUND"
    """No record exists with the requested name."""

    STORE_FORBIDDEN = "STORE_FORBIDDEN"
    """The backend denied the operation for lack of permission."""

    STORE_MISCONFIGURED = "STORE_MISCONFIGURED"
    """The configured table, region or endpoint is unusable."""

    CREDENTIALS_UNAVAILABLE = "CREDENTIALS_UNAVAILABLE"
    """No backend credentials could be resolved."""

    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"
    """The backend is throttling, timing out or failing."""

    SCAN_DISABLED = "SCAN_DISABLED"
    """Listing all records is not enabled for this deployment."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    """An unexpected internal error occurred."""


class ErrorDetail(BaseModel):
    """Field-level error information for validation errors."""

    field: str | None = None
    message: str


class ErrorBody(BaseModel):
    """Error body content for API error responses."""

    code: ErrorCode
    message: str
    details: list[ErrorDetail] | None = None


class ErrorResponse(BaseModel):
    """Standard error response format for all API errors.

    Example:
        {"error": {"code": "RECORD_NOT_FOUND", "message": "Record 'alice' not found"}}
    """

    error: ErrorBody
