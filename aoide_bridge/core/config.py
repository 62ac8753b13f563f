"""
Configuration management for aoide-bridge.

This module handles loading, validating, and providing access to the
application configuration stored in config.yaml.

The configuration file contains:
    - Storage directory that holds the aoide collection database
    - Optional connection pool tuning for the storage backend
    - Collection identity (identifier and kind)
    - Optional initial music directory as a file URL

Configuration File Location:
    The config.yaml file is looked up in the current working directory
    unless an explicit path is passed to load_config().

Example config.yaml:
    storage:
      directory: "~/.local/share/org.example.musicplayer"
      pool_size: 8                          # Optional
      acquire_read_timeout_millis: 5000     # Optional
      acquire_write_timeout_millis: 10000   # Optional

    collection:
      identifier: "org.example.musicplayer"  # Optional
      kind: null                             # Optional, defaults to identifier
      music_directory: "file:///home/me/Music"  # Optional
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from aoide_bridge.core.database import (
    POOL_ACQUIRE_READ_TIMEOUT_MILLIS,
    POOL_ACQUIRE_WRITE_TIMEOUT_MILLIS,
    POOL_SIZE,
)
from aoide_bridge.core.exceptions import ConfigError


# Default configuration file name (in current working directory)
CONFIG_FILENAME = "config.yaml"

DEFAULT_IDENTIFIER = "org.example.musicplayer"


@dataclass(frozen=True)
class StorageConfig:
    """
    Storage backend configuration.

    Attributes:
        directory: Absolute path to the directory holding the database file.
                   Path expansion is performed (~ is expanded to home directory).
        pool_size: Maximum number of pooled database connections.
        acquire_read_timeout_millis: Timeout for acquiring a read connection.
        acquire_write_timeout_millis: Timeout for acquiring a write connection.
    """
    directory: Path
    pool_size: int = POOL_SIZE
    acquire_read_timeout_millis: int = POOL_ACQUIRE_READ_TIMEOUT_MILLIS
    acquire_write_timeout_millis: int = POOL_ACQUIRE_WRITE_TIMEOUT_MILLIS


@dataclass(frozen=True)
class CollectionConfig:
    """
    Collection identity and initial settings.

    Attributes:
        identifier: Application identifier, used as default collection kind.
        kind: Collection kind. Defaults to the identifier.
        music_directory: Optional file URL of the music directory that is
                         applied when the collection session starts.
    """
    identifier: str = DEFAULT_IDENTIFIER
    kind: str = DEFAULT_IDENTIFIER
    music_directory: str | None = None


@dataclass(frozen=True)
class Config:
    """
    Complete application configuration.

    Created by load_config() and treated as immutable (frozen dataclass).

    Example:
        config = load_config()
        print(f"Database in: {config.storage.directory}")
        print(f"Collection kind: {config.collection.kind}")
    """
    storage: StorageConfig
    collection: CollectionConfig


def load_config(config_path: Path | None = None) -> Config:
    """
    Load and validate configuration from config.yaml.

    Args:
        config_path: Optional explicit path to config file.
                     If None, looks for config.yaml in current working directory.

    Returns:
        Config: A frozen dataclass containing all configuration values.

    Raises:
        ConfigError: If the config file is not found, has invalid YAML syntax,
                     is missing required fields, or contains invalid values.

    Thread Safety:
        This function is NOT thread-safe. Call it once at startup.
    """
    # Resolve config path
    if config_path is None:
        config_path = Path.cwd() / CONFIG_FILENAME

    if not config_path.exists():
        raise ConfigError(
            f"Configuration file not found: {config_path}",
            details={"file_path": str(config_path)}
        )

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            content = f.read()
    except IOError as e:
        raise ConfigError(
            f"Failed to read configuration file: {e}",
            details={"file_path": str(config_path), "original_error": str(e)}
        ) from e

    try:
        raw_config = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(
            f"Invalid YAML syntax in configuration file: {e}",
            details={"file_path": str(config_path), "original_error": str(e)}
        ) from e

    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a YAML dictionary",
            details={"file_path": str(config_path)}
        )

    _validate_config(raw_config)

    return Config(
        storage=_parse_storage_config(raw_config["storage"]),
        collection=_parse_collection_config(raw_config.get("collection")),
    )


def _validate_config(raw_config: dict[str, Any]) -> None:
    """Check that the required sections exist and are dictionaries."""
    if "storage" not in raw_config:
        raise ConfigError(
            "Missing required section: 'storage'",
            details={"missing_section": "storage"}
        )

    for section in ("storage", "collection"):
        value = raw_config.get(section)
        if value is not None and not isinstance(value, dict):
            raise ConfigError(
                f"Section '{section}' must be a dictionary",
                details={"section": section}
            )

    if raw_config["storage"] is None:
        raise ConfigError(
            "Section 'storage' must be a dictionary",
            details={"section": "storage"}
        )


def _parse_positive_int(section: dict[str, Any], key: str, default: int) -> int:
    raw = section.get(key)
    if raw is None:
        return default
    # bool is a subclass of int
    if isinstance(raw, bool) or not isinstance(raw, int) or raw < 1:
        raise ConfigError(
            f"'storage.{key}' must be a positive integer",
            details={"field": f"storage.{key}", "value": raw}
        )
    return raw


def _parse_storage_config(storage_section: dict[str, Any]) -> StorageConfig:
    """
    Parse and validate the storage configuration section.

    Expands ~ to home directory and converts to absolute Path.
    Does NOT create the directory.

    Raises:
        ConfigError: If directory is missing or empty, or a pool
                     setting is not a positive integer.
    """
    directory = storage_section.get("directory", "")

    if not isinstance(directory, str) or not directory.strip():
        raise ConfigError(
            "'storage.directory' must be a non-empty string",
            details={"field": "storage.directory"}
        )

    return StorageConfig(
        directory=Path(directory.strip()).expanduser().resolve(),
        pool_size=_parse_positive_int(storage_section, "pool_size", POOL_SIZE),
        acquire_read_timeout_millis=_parse_positive_int(
            storage_section, "acquire_read_timeout_millis", POOL_ACQUIRE_READ_TIMEOUT_MILLIS
        ),
        acquire_write_timeout_millis=_parse_positive_int(
            storage_section, "acquire_write_timeout_millis", POOL_ACQUIRE_WRITE_TIMEOUT_MILLIS
        ),
    )


def _parse_optional_string(section: dict[str, Any], key: str) -> str | None:
    raw = section.get(key)
    if raw is None:
        return None
    if not isinstance(raw, str) or not raw.strip():
        raise ConfigError(
            f"'collection.{key}' must be a non-empty string or null",
            details={"field": f"collection.{key}"}
        )
    return raw.strip()


def _parse_collection_config(collection_section: dict[str, Any] | None) -> CollectionConfig:
    """
    Parse and validate the collection configuration section.

    Applies defaults if the section is missing. The kind falls back
    to the identifier when not given.
    """
    if collection_section is None:
        return CollectionConfig()

    identifier = _parse_optional_string(collection_section, "identifier") or DEFAULT_IDENTIFIER
    kind = _parse_optional_string(collection_section, "kind") or identifier
    music_directory = _parse_optional_string(collection_section, "music_directory")

    return CollectionConfig(
        identifier=identifier,
        kind=kind,
        music_directory=music_directory,
    )
