"""API exception hierarchy and store error translation.

API exceptions carry status_code and error_code attributes used by the
global exception handler. Record store errors are translated by kind
through STORE_ERROR_RESPONSES.
"""

from scorekeeper.api.models.errors import ErrorCode
from scorekeeper.records.errors import (
    CredentialsUnavailableError,
    FullScanDisabledError,
    InvalidRecordNameError,
    InvalidRecordValueError,
    RecordStoreError,
    StoreAuthorizationError,
    StoreConfigurationError,
    StoreUnavailableError,
)


class ScorekeeperAPIError(Exception):
    """Base exception for all API errors."""

    status_code: int = 500
    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class RecordNotFoundError(ScorekeeperAPIError):
    """Raised when no record exists with the requested name."""

    status_code = 404
    error_code = ErrorCode.RECORD_NOT_FOUND


# Checked in order, so subclasses come before RecordStoreError
STORE_ERROR_RESPONSES: list[tuple[type[RecordStoreError], int, ErrorCode]] = [
    (InvalidRecordNameError, 400, ErrorCode.INVALID_REQUEST),
    (InvalidRecordValueError, 400, ErrorCode.INVALID_REQUEST),
    (StoreAuthorizationError, 403, ErrorCode.STORE_FORBIDDEN),
    (FullScanDisabledError, 403, ErrorCode.SCAN_DISABLED),
    (StoreConfigurationError, 500, ErrorCode.STORE_MISCONFIGURED),
    (CredentialsUnavailableError, 500, ErrorCode.CREDENTIALS_UNAVAILABLE),
    (StoreUnavailableError, 503, ErrorCode.STORE_UNAVAILABLE),
    (RecordStoreError, 500, ErrorCode.INTERNAL_ERROR),
]


def store_error_response(exc: RecordStoreError) -> tuple[int, ErrorCode]:
    """Return the HTTP status and error code for a store error."""
    for exc_type, status_code, error_code in STORE_ERROR_RESPONSES:
        if isinstance(exc, exc_type):
            return status_code, error_code
    return 500, ErrorCode.INTERNAL_ERROR
