"""Configuration loading utilities."""

import json
import os
from pathlib import Path
from typing import Any

from loguru import logger

from passwordguard.config.schema import PasswordGuardConfig
from passwordguard.utils.helpers import ensure_dir, get_data_path

CONFIG_VERSION = 1


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return get_data_path() / "config.json"


def load_config(config_path: Path | None = None) -> PasswordGuardConfig:
    """
    Load configuration from file or create default.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Loaded configuration object. Unreadable or malformed files fall back to defaults.

    Raises:
        ValidationError: a ``PASSWORDGUARD_*`` environment variable is invalid.
            There is no default to fall back to for those.
    """
    path = config_path or get_config_path()
    try:
        return read_config(path)
    except (OSError, ValueError) as e:
        logger.warning("config_load_failed path={} error={}; using defaults", path, e)

    return PasswordGuardConfig()


def read_config(config_path: Path | None = None) -> PasswordGuardConfig:
    """Load configuration, letting read and validation errors propagate."""
    path = config_path or get_config_path()
    if not path.exists():
        return PasswordGuardConfig()
    with open(path) as f:
        raw = json.load(f)
    return parse_config(raw)


def parse_config(raw: Any) -> PasswordGuardConfig:
    """Validate a camelCase JSON payload into a config object."""
    if not isinstance(raw, dict):
        raise ValueError("Config root must be a JSON object")
    return PasswordGuardConfig(**convert_keys(raw))


def save_config(config: PasswordGuardConfig, config_path: Path | None = None) -> None:
    """
    Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Optional path to save to. Uses default if not provided.
    """
    path = config_path or get_config_path()
    _atomic_write_config(path, config)


def _atomic_write_config(path: Path, config: PasswordGuardConfig) -> None:
    """Atomically write config as camelCase JSON with secure permissions."""
    ensure_dir(path.parent)
    payload = config.model_dump(exclude_none=True)
    payload["config_version"] = CONFIG_VERSION
    data = convert_to_camel(payload)
    tmp_path = path.with_name(f".{path.name}.tmp-{os.getpid()}")
    with open(tmp_path, "w") as f:
        json.dump(data, f, indent=2)
    try:
        tmp_path.chmod(0o600)
    except OSError:
        pass
    os.replace(tmp_path, path)


def convert_keys(data: Any, *, _depth: int = 0, _parent: str | None = None) -> Any:
    """Convert camelCase keys to snake_case for Pydantic.

    Keys of the ``roles`` mapping are account names and are left untouched.
    """
    if isinstance(data, dict):
        if _parent == "roles":
            return {k: convert_keys(v, _depth=_depth + 1) for k, v in data.items()}
        converted = {}
        for k, v in data.items():
            key = camel_to_snake(k)
            converted[key] = convert_keys(v, _depth=_depth + 1, _parent=key if _depth == 0 else None)
        return converted
    if isinstance(data, list):
        return [convert_keys(item, _depth=_depth + 1) for item in data]
    return data


def convert_to_camel(data: Any, *, _depth: int = 0, _parent: str | None = None) -> Any:
    """Convert snake_case keys to camelCase (``roles`` keys untouched)."""
    if isinstance(data, dict):
        if _parent == "roles":
            return {k: convert_to_camel(v, _depth=_depth + 1) for k, v in data.items()}
        converted = {}
        for k, v in data.items():
            converted[snake_to_camel(k)] = convert_to_camel(v, _depth=_depth + 1, _parent=k if _depth == 0 else None)
        return converted
    if isinstance(data, list):
        return [convert_to_camel(item, _depth=_depth + 1) for item in data]
    return data


def camel_to_snake(name: str) -> str:
    """Convert camelCase to snake_case."""
    result = []
    for i, char in enumerate(name):
        if char.isupper() and i > 0:
            result.append("_")
        result.append(char.lower())
    return "".join(result)


def snake_to_camel(name: str) -> str:
    """Convert snake_case to camelCase."""
    components = name.split("_")
    return components[0] + "".join(x.title() for x in components[1:])
