"""Record store implementations."""

from scorekeeper.records.stores.dynamodb import DynamoDBRecordStore
from scorekeeper.records.stores.inmemory import InMemoryRecordStore

__all__ = [
    "DynamoDBRecordStore",
    "InMemoryRecordStore",
]
