"""
Collection session lifecycle.

A CollectionSession exists from the moment the host opens a collection until
it shuts down. It owns the storage configuration and the guarded state
(synchronization flag and settings). Commands take the session as argument
and refuse to run once it has been closed.

Usage:
    config = load_config()
    with CollectionSession.open(config) as session:
        set_music_directory(session, "file:///home/me/Music")
"""

from pathlib import Path

from aoide_bridge.collection.state import CollectionState, SettingsState
from aoide_bridge.core.config import DEFAULT_IDENTIFIER, Config
from aoide_bridge.core.database import DatabaseConfig, default_database_config
from aoide_bridge.core.exceptions import CollectionStateError
from aoide_bridge.core.logger import get_logger


logger = get_logger(__name__)


class CollectionSession:
    """
    One open collection.

    Attributes:
        database: Configuration for the storage backend.
        kind: Collection kind, defaults to the application identifier.
        settings: Guarded music directory setting.
        collection: Synchronization state.
    """

    def __init__(
        self,
        storage_dir: Path,
        kind: str = DEFAULT_IDENTIFIER,
        database: DatabaseConfig | None = None,
    ) -> None:
        self.storage_dir = storage_dir
        self.kind = kind
        self.database = database or default_database_config(storage_dir)
        self.settings = SettingsState()
        self.collection = CollectionState()
        self._closed = False

    @classmethod
    def open(cls, config: Config) -> "CollectionSession":
        """
        Create a session from the loaded configuration.

        The configured music directory, if any, is applied through the
        regular guarded command.

        Raises:
            UnsupportedLocatorError: If the configured music directory is
                                     not a local file URL.
        """
        # Imported here, commands depend on this module
        from aoide_bridge.collection.commands import set_music_directory

        storage = config.storage
        session = cls(
            storage_dir=storage.directory,
            kind=config.collection.kind,
            database=default_database_config(
                storage.directory,
                pool_size=storage.pool_size,
                acquire_read_timeout_millis=storage.acquire_read_timeout_millis,
                acquire_write_timeout_millis=storage.acquire_write_timeout_millis,
            ),
        )
        logger.debug(f"Opened collection session in {storage.directory} (kind: {session.kind})")

        if config.collection.music_directory is not None:
            set_music_directory(session, config.collection.music_directory)

        return session

    @property
    def closed(self) -> bool:
        return self._closed

    def ensure_open(self) -> None:
        if self._closed:
            raise CollectionStateError(
                "collection session is closed",
                details={"storage_dir": str(self.storage_dir)}
            )

    def close(self) -> None:
        """Tear down the session. Safe to call multiple times."""
        if not self._closed:
            self._closed = True
            logger.debug(f"Closed collection session in {self.storage_dir}")

    def __enter__(self) -> "CollectionSession":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
