"""Tests for create_record_store."""

import pytest

from scorekeeper.config.models.storage import RecordStoreConfig
from scorekeeper.records.factory import create_record_store
from scorekeeper.records.stores import DynamoDBRecordStore, InMemoryRecordStore


class TestCreateRecordStore:
    """Tests for backend selection."""

    def test_inmemory(self) -> None:
        store = create_record_store(RecordStoreConfig(backend="inmemory"))
        assert isinstance(store, InMemoryRecordStore)

    def test_dynamodb(self) -> None:
        store = create_record_store(
            RecordStoreConfig(backend="dynamodb", table_name="scores-qa")
        )
        assert isinstance(store, DynamoDBRecordStore)
        assert store.table_name == "scores-qa"

    def test_unknown_backend(self) -> None:
        config = RecordStoreConfig.model_construct(backend="postgres")
        with pytest.raises(ValueError, match="Unsupported"):
            create_record_store(config)
