"""
Flattened library records for external consumption.

These are the simplified track and playlist representations produced by
the importer. They are what the player UI browses, what the search index
ingests and what playback resolves to a file.

Usage:
    from aoide_bridge.library.models import Track, Playlist

    track = import_track_from_entity(entity, missing_title)
    payload = track.to_dict()
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class NumberOf:
    """
    Position within a set, e.g. track 3 of 12 or disc 1 of 2.

    Attributes:
        no: Position, if known.
        of: Total count, if known.
    """
    no: int | None = None
    of: int | None = None

    def to_dict(self) -> dict[str, int | None]:
        return {"no": self.no, "of": self.of}


@dataclass(frozen=True)
class Track:
    """
    Immutable flattened track record.

    Attributes:
        _id: Entity uid as string.
        title: Track title. Never empty by default: it comes from the
               entity's main title or from the caller's fallback.
        artists: Artist names in credit order. May be empty.
        album: Main album title, or "" if the album has none.
        genres: Genre labels in source order, duplicates preserved.
        year: Earliest year among the recorded/released/original
              release dates, or None.
        duration: Duration in whole seconds.
        track: Track number within the album.
        disk: Disc number within the release.
        path: Local file path of the audio content.
    """
    _id: str
    title: str
    artists: tuple[str, ...]
    album: str
    genres: tuple[str, ...]
    year: int | None
    duration: int
    track: NumberOf
    disk: NumberOf
    path: Path

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to a JSON-compatible dict.

        Tuples become lists and the path becomes a string.
        """
        return {
            "_id": self._id,
            "title": self.title,
            "artists": list(self.artists),
            "album": self.album,
            "genres": list(self.genres),
            "year": self.year,
            "duration": self.duration,
            "track": self.track.to_dict(),
            "disk": self.disk.to_dict(),
            "path": str(self.path),
        }


@dataclass(frozen=True)
class Playlist:
    """
    Immutable flattened playlist record.

    Attributes:
        _id: Entity uid as string.
        name: Playlist title.
        tracks: Track ids in playlist order. Filled in by a separate step
                (see import_playlist_track_entries).
        import_path: File the playlist was imported from, if any.
    """
    _id: str
    name: str
    tracks: tuple[str, ...] = field(default_factory=tuple)
    import_path: Path | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "_id": self._id,
            "name": self.name,
            "tracks": list(self.tracks),
            "import_path": None if self.import_path is None else str(self.import_path),
        }
