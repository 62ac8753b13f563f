"""
aoide entity import.

    models:     Raw track and playlist entities as stored by aoide
    locator:    Content URL to local path conversion
    normalizer: Metadata precedence rules
    importer:   Entity to flattened record conversion, single and batch
"""

from aoide_bridge.aoide.importer import (
    ImportResult,
    import_playlist_from_entity,
    import_playlist_track_entries,
    import_track_from_entity,
    import_tracks_from_entities,
)
from aoide_bridge.aoide.locator import content_url_to_file_path
from aoide_bridge.aoide.models import PlaylistEntity, PlaylistEntry, TrackEntity

__all__ = [
    "TrackEntity",
    "PlaylistEntity",
    "PlaylistEntry",
    "content_url_to_file_path",
    "ImportResult",
    "import_track_from_entity",
    "import_playlist_from_entity",
    "import_playlist_track_entries",
    "import_tracks_from_entities",
]
