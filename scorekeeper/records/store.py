"""RecordStore abstract interface."""

import math
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from decimal import Decimal
from types import TracebackType
from typing import Any

from scorekeeper.records.errors import InvalidRecordNameError, InvalidRecordValueError
from scorekeeper.records.models import Record

# Numbers every backend must be able to hold: DynamoDB's N type keeps
# 38 significant digits with magnitudes from 1E-130 up to 9.99...E+125.
MAX_NUMBER_DIGITS = 38
MIN_NUMBER_EXPONENT = -130
MAX_NUMBER_EXPONENT = 125


def validate_name(name: str, operation: str) -> str:
    """Return name unchanged, or raise if it cannot be a record key."""
    if not isinstance(name, str) or not name:
        raise InvalidRecordNameError(
            "Record name must be a non-empty string",
            operation=operation,
        )
    return name


def number_in_range(value: int | float) -> bool:
    """Check that a number can be stored without rounding or overflow."""
    if isinstance(value, bool):
        return True
    if isinstance(value, int):
        return abs(value) < 10**MAX_NUMBER_DIGITS
    if not math.isfinite(value):
        return False
    if value == 0:
        return True
    return MIN_NUMBER_EXPONENT <= Decimal(str(value)).adjusted() <= MAX_NUMBER_EXPONENT


def validate_number(value: int | float, operation: str, field: str) -> int | float:
    """Return value unchanged, or raise if no backend can store it."""
    if not number_in_range(value):
        raise InvalidRecordValueError(
            f"{field} is outside the storable number range",
            operation=operation,
        )
    return value


def _check_numbers(value: Any, operation: str, field: str) -> None:
    if isinstance(value, int | float):
        validate_number(value, operation, field)
    elif isinstance(value, dict):
        for key, item in value.items():
            _check_numbers(item, operation, f"{field}.{key}")
    elif isinstance(value, list | tuple | set):
        for item in value:
            _check_numbers(item, operation, field)


def validate_record(record: Record, operation: str) -> Record:
    """Check the name and every number a record carries."""
    validate_name(record.name, operation)
    for field, value in record.model_dump().items():
        _check_numbers(value, operation, field)
    return record


class RecordStore(ABC):
    """Abstract interface for record storage keyed by name.

    Implementations hold no cached record state: every call goes to the
    backend. A store is connected once at startup, shared by all
    callers, and closed at shutdown. It can also be used as an async
    context manager.
    """

    backend: str = "abstract"

    async def connect(self) -> None:
        """Acquire backend resources and validate configuration."""

    async def close(self) -> None:
        """Release backend resources."""

    async def __aenter__(self) -> "RecordStore":
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    @abstractmethod
    async def get_by_name(self, name: str) -> Record | None:
        """Get a record by name, or None when absent."""
        pass

    @abstractmethod
    async def save(self, record: Record) -> Record:
        """Write a full record, replacing any record with the same name."""
        pass

    @abstractmethod
    async def update_score(self, name: str, delta: int) -> Record | None:
        """Add delta to the score of an existing record.

        Returns the updated record, or None without writing anything
        when no record has this name.
        """
        pass

    @abstractmethod
    async def remove_by_name(self, name: str) -> bool:
        """Delete a record. Returns False when it did not exist."""
        pass

    @abstractmethod
    def list_all(self) -> AsyncIterator[Record]:
        """Iterate over every stored record.

        Cost and latency grow with the table size. Stores refuse to
        scan unless constructed with allow_full_scan=True.
        """
        pass
