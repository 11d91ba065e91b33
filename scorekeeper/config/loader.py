"""Read the layered TOML files under config/.

Layout of the config directory::

    config/
        default.toml       shared by every environment (required)
        development.toml   local runs against DynamoDB Local
        production.toml    deployed service

The directory is ./config relative to the working directory unless
SCOREKEEPER_CONFIG_DIR points elsewhere. SCOREKEEPER_ENV picks the
environment file.
"""

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_DIR_ENV = "SCOREKEEPER_CONFIG_DIR"
ENVIRONMENT_ENV = "SCOREKEEPER_ENV"
DEFAULT_ENVIRONMENT = "development"


def get_config_dir() -> Path:
    """Return the config directory.

    Raises:
        FileNotFoundError: SCOREKEEPER_CONFIG_DIR names a missing directory
    """
    override = os.environ.get(CONFIG_DIR_ENV)
    if not override:
        return Path.cwd() / "config"

    path = Path(override)
    if not path.is_dir():
        raise FileNotFoundError(f"{CONFIG_DIR_ENV} is not a directory: {override}")
    return path


def get_environment() -> str:
    return os.environ.get(ENVIRONMENT_ENV, DEFAULT_ENVIRONMENT)


def load_toml(file_path: Path) -> dict[str, Any]:
    """Parse one TOML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    if not file_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    with file_path.open("rb") as f:
        return tomllib.load(f)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into a copy of base.

    Tables merge key by key, so an environment file only lists what it
    changes; any other value replaces the base value outright.
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def load_config() -> dict[str, Any]:
    """Return default.toml overlaid with the current environment's file.

    The environment file is optional; a missing default.toml is an error
    the caller decides how to handle.
    """
    config_dir = get_config_dir()

    default_path = config_dir / "default.toml"
    if not default_path.exists():
        raise FileNotFoundError(
            f"Default configuration file not found: {default_path}. "
            f"Run from the project root or set {CONFIG_DIR_ENV}."
        )
    config = load_toml(default_path)

    env_path = config_dir / f"{get_environment()}.toml"
    if env_path.exists():
        config = deep_merge(config, load_toml(env_path))

    return config
