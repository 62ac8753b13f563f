"""
aoide-bridge: Flatten aoide collection entities into library records.

This package sits between an aoide music collection and a music player.
It converts the richly tagged track and playlist entities stored by aoide
into simple records for browsing, search indexing and playback, and it
guards changes of the collection's music directory against a running
synchronization.

Modules:
    core/        - Configuration, storage config, logging, exceptions
    aoide/       - Entity models, locator resolution, normalization, import
    library/     - Flattened Track and Playlist records
    collection/  - Collection session, guarded settings, commands

Usage:
    from aoide_bridge import (
        load_config, setup_logging,
        CollectionSession, set_music_directory,
        TrackEntity, import_track_from_entity,
    )

    config = load_config()
    setup_logging(config.storage.directory)

    with CollectionSession.open(config) as session:
        set_music_directory(session, "file:///home/me/Music")

    track = import_track_from_entity(
        TrackEntity.from_dict(raw),
        missing_title=lambda: "Untitled",
    )

Configuration:
    See aoide_bridge.core.config for the config.yaml layout.

Dependencies:
    - pyyaml: Configuration file parsing
    - tqdm: Progress bars and tqdm-aware console logging
"""

__version__ = "0.1.0"
__author__ = "aoide-bridge"
__license__ = "MIT"

from aoide_bridge.aoide import (
    ImportResult,
    PlaylistEntity,
    PlaylistEntry,
    TrackEntity,
    import_playlist_from_entity,
    import_playlist_track_entries,
    import_track_from_entity,
    import_tracks_from_entities,
)
from aoide_bridge.collection import CollectionSession, UpdateOutcome, set_music_directory
from aoide_bridge.core import (
    AoideBridgeError,
    CollectionStateError,
    Config,
    ConfigError,
    EntityImportError,
    MissingFieldError,
    SynchronizationConflictError,
    UnsupportedLocatorError,
    get_logger,
    load_config,
    setup_logging,
)
from aoide_bridge.library import NumberOf, Playlist, Track

__all__ = [
    # Version
    "__version__",
    # Core
    "Config",
    "load_config",
    "setup_logging",
    "get_logger",
    # Exceptions
    "AoideBridgeError",
    "ConfigError",
    "EntityImportError",
    "UnsupportedLocatorError",
    "MissingFieldError",
    "SynchronizationConflictError",
    "CollectionStateError",
    # Import
    "TrackEntity",
    "PlaylistEntity",
    "PlaylistEntry",
    "ImportResult",
    "import_track_from_entity",
    "import_playlist_from_entity",
    "import_playlist_track_entries",
    "import_tracks_from_entities",
    # Records
    "Track",
    "Playlist",
    "NumberOf",
    # Collection
    "CollectionSession",
    "UpdateOutcome",
    "set_music_directory",
]
