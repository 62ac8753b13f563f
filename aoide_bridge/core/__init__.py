"""
Core module for aoide-bridge.

This module provides the foundational components used throughout the package:
    - exceptions: Custom exception classes for error handling
    - config: Configuration loading and validation
    - database: Storage-engine configuration for the collection database
    - logger: Logging system with multiple outputs

Usage:
    from aoide_bridge.core import (
        Config, load_config,
        default_database_config,
        setup_logging, get_logger,
        AoideBridgeError, ConfigError
    )
"""

from aoide_bridge.core.config import (
    CollectionConfig,
    Config,
    StorageConfig,
    load_config,
)
from aoide_bridge.core.database import DatabaseConfig, default_database_config
from aoide_bridge.core.exceptions import (
    AoideBridgeError,
    CollectionStateError,
    ConfigError,
    EntityImportError,
    MissingFieldError,
    SynchronizationConflictError,
    UnsupportedLocatorError,
)
from aoide_bridge.core.logger import (
    get_logger,
    log_import_failure,
    setup_logging,
    shutdown_logging,
)

__all__ = [
    # Config
    "Config",
    "StorageConfig",
    "CollectionConfig",
    "load_config",
    # Database
    "DatabaseConfig",
    "default_database_config",
    # Exceptions
    "AoideBridgeError",
    "ConfigError",
    "EntityImportError",
    "UnsupportedLocatorError",
    "MissingFieldError",
    "SynchronizationConflictError",
    "CollectionStateError",
    # Logger
    "setup_logging",
    "get_logger",
    "log_import_failure",
    "shutdown_logging",
]
