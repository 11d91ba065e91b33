"""Records: scored entities keyed by name and the stores that hold them."""

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
from scorekeeper.records.factory import create_record_store
from scorekeeper.records.models import Record, ScoreUpdate
from scorekeeper.records.store import RecordStore
from scorekeeper.records.stores import DynamoDBRecordStore, InMemoryRecordStore

__all__ = [
    # Models
    "Record",
    "ScoreUpdate",
    # Stores
    "RecordStore",
    "InMemoryRecordStore",
    "DynamoDBRecordStore",
    "create_record_store",
    # Errors
    "RecordStoreError",
    "StoreAuthorizationError",
    "StoreConfigurationError",
    "CredentialsUnavailableError",
    "StoreUnavailableError",
    "FullScanDisabledError",
    "InvalidRecordNameError",
    "InvalidRecordValueError",
]
