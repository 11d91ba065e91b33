"""Unit tests for configuration models."""

import pytest
from pydantic import ValidationError

from scorekeeper.config.models.storage import RecordStoreConfig


class TestRecordStoreConfig:
    """Tests for RecordStoreConfig validation."""

    @pytest.mark.parametrize("name", ["scores", "scores-dev", "team_scores.v2"])
    def test_accepts_valid_table_names(self, name: str) -> None:
        assert RecordStoreConfig(table_name=name).table_name == name

    @pytest.mark.parametrize("name", ["", "ab", "scores table", "scores/prod", "x" * 256])
    def test_rejects_invalid_table_names(self, name: str) -> None:
        with pytest.raises(ValidationError, match="Invalid table name"):
            RecordStoreConfig(table_name=name)

    def test_rejects_unknown_backend(self) -> None:
        with pytest.raises(ValidationError):
            RecordStoreConfig(backend="postgres")

    def test_rejects_zero_read_attempts(self) -> None:
        with pytest.raises(ValidationError):
            RecordStoreConfig(read_max_attempts=0)

    def test_rejects_non_positive_timeouts(self) -> None:
        with pytest.raises(ValidationError):
            RecordStoreConfig(read_timeout=0)

    def test_rejects_backoff_cap_below_base(self) -> None:
        with pytest.raises(ValidationError, match="retry_max_delay"):
            RecordStoreConfig(retry_base_delay=1.0, retry_max_delay=0.5)
