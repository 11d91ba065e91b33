"""Configuration loading for Scorekeeper.

Configuration is loaded from TOML files with environment variable overrides.

Usage:
    from scorekeeper.config import get_settings

    settings = get_settings()
    table = settings.storage.records.table_name
"""

from functools import lru_cache

from scorekeeper.config.loader import load_config
from scorekeeper.config.settings import Settings, set_toml_config
from scorekeeper.observability.logging import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the singleton settings instance.

    Configuration is loaded in this order:
    1. Pydantic model defaults (in code)
    2. config/default.toml (base configuration)
    3. config/{SCOREKEEPER_ENV}.toml (environment overrides)
    4. SCOREKEEPER_* environment variables (runtime overrides)

    The result is cached for the lifetime of the process.
    Call `get_settings.cache_clear()` to reload configuration.
    """
    try:
        config_dict = load_config()
    except FileNotFoundError as e:
        logger.warning("config_file_not_found", error=str(e))
        config_dict = {}
    set_toml_config(config_dict)

    # pydantic-settings gives env vars priority over the TOML source
    return Settings()


def reload_settings() -> Settings:
    """Clear the settings cache and reload configuration."""
    get_settings.cache_clear()
    return get_settings()


__all__ = ["get_settings", "reload_settings", "Settings"]
