"""
Storage-engine configuration for the aoide collection database.

The database itself is owned by the embedded aoide backend. This module only
describes how the backend should open it: one SQLite file inside the
application's local data directory, a bounded connection pool, and separate
acquire timeouts for readers and writers.

Usage:
    db_config = default_database_config(storage_dir)
    print(db_config.connection.storage.path)  # storage_dir / "aoide.sqlite"
"""

from dataclasses import dataclass
from pathlib import Path


# Database file name (always inside the storage directory)
FILE_NAME = "aoide.sqlite"

POOL_SIZE = 8

POOL_ACQUIRE_READ_TIMEOUT_MILLIS = 5_000

POOL_ACQUIRE_WRITE_TIMEOUT_MILLIS = 10_000


@dataclass(frozen=True)
class FileStorage:
    """
    File-backed SQLite storage.

    Attributes:
        path: Absolute path of the SQLite database file.
    """
    path: Path


@dataclass(frozen=True)
class GatekeeperConfig:
    """
    Acquire timeouts of the connection pool gatekeeper.

    Writers get a longer timeout than readers because SQLite only admits
    a single writer at a time.
    """
    acquire_read_timeout_millis: int
    acquire_write_timeout_millis: int


@dataclass(frozen=True)
class PoolConfig:
    max_size: int
    gatekeeper: GatekeeperConfig


@dataclass(frozen=True)
class ConnectionConfig:
    storage: FileStorage
    pool: PoolConfig


@dataclass(frozen=True)
class DatabaseConfig:
    """
    Complete database configuration handed to the storage backend.

    Attributes:
        connection: Storage location and pool settings.
        migrate_schema: Schema migration mode. None leaves the decision
                        to the backend.
    """
    connection: ConnectionConfig
    migrate_schema: str | None = None


def _non_zero(value: int) -> int:
    # Pool sizes and timeouts must never be zero
    return max(1, value)


def default_database_config(
    dir_path: Path,
    pool_size: int = POOL_SIZE,
    acquire_read_timeout_millis: int = POOL_ACQUIRE_READ_TIMEOUT_MILLIS,
    acquire_write_timeout_millis: int = POOL_ACQUIRE_WRITE_TIMEOUT_MILLIS,
) -> DatabaseConfig:
    """
    Build the database configuration for a storage directory.

    No connection is opened and the directory is not created here.

    Args:
        dir_path: Directory that holds the database file.
        pool_size: Maximum number of pooled connections.
        acquire_read_timeout_millis: Timeout for acquiring a read connection.
        acquire_write_timeout_millis: Timeout for acquiring a write connection.

    Returns:
        DatabaseConfig: Frozen configuration. All numeric values are at least 1.
    """
    return DatabaseConfig(
        connection=ConnectionConfig(
            storage=FileStorage(path=dir_path / FILE_NAME),
            pool=PoolConfig(
                max_size=_non_zero(pool_size),
                gatekeeper=GatekeeperConfig(
                    acquire_read_timeout_millis=_non_zero(acquire_read_timeout_millis),
                    acquire_write_timeout_millis=_non_zero(acquire_write_timeout_millis),
                ),
            ),
        ),
        migrate_schema=None,
    )
