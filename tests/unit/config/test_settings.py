"""Unit tests for Settings class and get_settings function."""

from pathlib import Path

import pytest

from scorekeeper.config import get_settings, reload_settings
from scorekeeper.config.settings import Settings


class TestSettings:
    """Tests for Settings model."""

    def test_default_values(self) -> None:
        settings = Settings()
        assert settings.app_name == "scorekeeper"
        assert settings.debug is False
        assert settings.log_level == "INFO"

    def test_record_store_defaults(self) -> None:
        """The table name is configuration with a documented default."""
        records = Settings().storage.records
        assert records.backend == "dynamodb"
        assert records.table_name == "scores"
        assert records.region is None
        assert records.endpoint_url is None
        assert records.allow_full_scan is False

    def test_nested_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """SCOREKEEPER_* variables reach nested sections."""
        monkeypatch.setenv("SCOREKEEPER_STORAGE__RECORDS__TABLE_NAME", "scores-qa")
        monkeypatch.setenv("SCOREKEEPER_STORAGE__RECORDS__ENDPOINT_URL", "http://localhost:8001")
        records = Settings().storage.records
        assert records.table_name == "scores-qa"
        assert records.endpoint_url == "http://localhost:8001"


class TestGetSettings:
    """Tests for get_settings function."""

    @pytest.fixture
    def config_env(
        self, test_config_dir: Path, mock_toml_files, monkeypatch: pytest.MonkeyPatch
    ) -> Path:
        mock_toml_files({
            "default.toml": (
                "app_name = 'test'\n"
                "[storage.records]\n"
                "backend = 'inmemory'\n"
                "table_name = 'scores-from-toml'\n"
            ),
        })
        monkeypatch.setenv("SCOREKEEPER_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("SCOREKEEPER_ENV", "nonexistent")
        return test_config_dir

    def test_reads_toml(self, config_env: Path) -> None:
        settings = get_settings()
        assert settings.app_name == "test"
        assert settings.storage.records.backend == "inmemory"
        assert settings.storage.records.table_name == "scores-from-toml"

    def test_env_beats_toml(self, config_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCOREKEEPER_STORAGE__RECORDS__TABLE_NAME", "scores-from-env")
        settings = get_settings()
        assert settings.storage.records.table_name == "scores-from-env"
        # Untouched TOML values in the same section survive
        assert settings.storage.records.backend == "inmemory"

    def test_settings_cached(self, config_env: Path) -> None:
        assert get_settings() is get_settings()

    def test_reload_settings(self, config_env: Path, mock_toml_files) -> None:
        first = get_settings()
        mock_toml_files({"default.toml": "app_name = 'reloaded'"})
        second = reload_settings()
        assert second is not first
        assert second.app_name == "reloaded"

    def test_missing_config_uses_defaults(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        empty = tmp_path / "empty"
        empty.mkdir()
        monkeypatch.setenv("SCOREKEEPER_CONFIG_DIR", str(empty))
        settings = get_settings()
        assert settings.storage.records.table_name == "scores"
