"""Configuration models for each settings section."""

from scorekeeper.config.models.api import APIConfig
from scorekeeper.config.models.observability import ObservabilityConfig
from scorekeeper.config.models.storage import RecordStoreConfig, StorageConfig

__all__ = [
    "APIConfig",
    "ObservabilityConfig",
    "RecordStoreConfig",
    "StorageConfig",
]
