"""Record store exception hierarchy.

Absent records are not errors: lookups return None and removals
return False. Everything else surfaces as a RecordStoreError subclass
so callers can tell authorization, configuration, credential and
availability failures apart.
"""


class RecordStoreError(Exception):
    """Base exception for record store failures.

    Attributes:
        operation: Store operation that failed
        code: Backend error code, when the backend supplied one
    """

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        code: str | None = None,
    ) -> None:
        self.message = message
        self.operation = operation
        self.code = code
        super().__init__(message)


class StoreAuthorizationError(RecordStoreError):
    """The backend refused the request for lack of permission."""


class StoreConfigurationError(RecordStoreError):
    """The configured table, region or endpoint is unusable."""


class CredentialsUnavailableError(RecordStoreError):
    """No credentials could be resolved from the provider chain."""


class StoreUnavailableError(RecordStoreError):
    """Transient failure: throttling, timeouts or service errors."""


class FullScanDisabledError(RecordStoreError):
    """A full scan was requested from a store that did not opt in."""


class InvalidRecordNameError(RecordStoreError, ValueError):
    """The record name is empty or not a string."""


class InvalidRecordValueError(RecordStoreError, ValueError):
    """A score, delta or attribute holds a number the store cannot represent."""
