"""
Import of aoide entities into flattened library records.

Combines the locator resolver and the metadata normalizer. Each import
function handles exactly one entity and raises an EntityImportError
subclass when a required field cannot be resolved. The batch helper
import_tracks_from_entities() catches these per entity, logs them and
continues, so one broken entity never aborts a whole import.

Usage:
    from aoide_bridge.aoide.importer import import_track_from_entity

    def missing_title() -> str:
        return path_stem_of(entity)

    track = import_track_from_entity(entity, missing_title)
"""

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field

from tqdm import tqdm

from aoide_bridge.aoide.locator import content_url_to_file_path
from aoide_bridge.aoide.models import (
    AudioContentMetadata,
    PlaylistEntity,
    PlaylistEntry,
    TrackEntity,
    TrackItem,
)
from aoide_bridge.aoide.normalizer import (
    collect_artists,
    collect_genres,
    find_main_title,
    number_of,
    resolve_duration,
    resolve_year,
)
from aoide_bridge.core.exceptions import EntityImportError, MissingFieldError
from aoide_bridge.core.logger import get_logger, log_import_failure
from aoide_bridge.library.models import Playlist, Track


logger = get_logger(__name__)

MissingTitle = Callable[[], str]


def import_track_from_entity(entity: TrackEntity, missing_title: MissingTitle) -> Track:
    """
    Build a flattened Track from a track entity.

    Args:
        entity: The raw track entity. Not modified.
        missing_title: Called at most once, only when the entity has no
                       MAIN title. Returns the title to use or raises.

    Returns:
        Track: The flattened record.

    Raises:
        MissingFieldError: If the entity has no content URL, or the
                           fallback failed or returned an empty title.
        UnsupportedLocatorError: If the content URL is not a local file URL.
    """
    if entity.content_url is None:
        raise MissingFieldError(
            "missing content URL",
            field="content_url",
            details={"uid": entity.uid}
        )
    path = content_url_to_file_path(entity.content_url)

    track = entity.track

    title = find_main_title(track.titles)
    if title is None:
        try:
            title = missing_title()
        except EntityImportError:
            raise
        except Exception as e:
            raise MissingFieldError(
                f"missing title: {e}",
                field="title",
                details={"uid": entity.uid, "original_error": str(e)}
            ) from e
        if not title:
            raise MissingFieldError(
                "missing title",
                field="title",
                details={"uid": entity.uid}
            )

    metadata = track.media_source.content_metadata
    if not isinstance(metadata, AudioContentMetadata):
        raise EntityImportError(
            f"unsupported content metadata: {type(metadata).__name__}",
            details={"uid": entity.uid}
        )

    return Track(
        _id=entity.uid,
        title=title,
        artists=tuple(collect_artists(track.actors)),
        album=find_main_title(track.album.titles) or "",
        genres=tuple(collect_genres(track.tags)),
        year=resolve_year(track.recorded_at, track.released_at, track.released_orig_at),
        duration=resolve_duration(metadata),
        track=number_of(track.indexes.track),
        disk=number_of(track.indexes.disc),
        path=path,
    )


def import_playlist_from_entity(entity: PlaylistEntity) -> Playlist:
    """
    Build a flattened Playlist from a playlist entity.

    The track list is left empty; fill it from the playlist entries with
    import_playlist_track_entries().
    """
    return Playlist(
        _id=entity.uid,
        name=entity.title,
        tracks=(),
        import_path=None,
    )


def import_playlist_track_entries(entries: Iterable[PlaylistEntry]) -> Iterator[str]:
    """Yield the track uids referenced by the entries, skipping separators."""
    for entry in entries:
        if isinstance(entry.item, TrackItem):
            yield entry.item.uid


@dataclass
class ImportResult:
    """
    Outcome of a batch import.

    Attributes:
        tracks: Successfully imported tracks, in input order.
        failed: (uid, error) pairs of entities that could not be imported.
    """
    tracks: list[Track] = field(default_factory=list)
    failed: list[tuple[str, EntityImportError]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.tracks) + len(self.failed)


def import_tracks_from_entities(
    entities: Iterable[TrackEntity],
    missing_title_factory: Callable[[TrackEntity], MissingTitle],
    show_progress: bool = False,
) -> ImportResult:
    """
    Import many track entities, continuing past per-entity failures.

    Args:
        entities: Track entities to import.
        missing_title_factory: Returns the title fallback for one entity.
        show_progress: Show a tqdm progress bar.

    Returns:
        ImportResult with the imported tracks and the failures.

    Note:
        Failing fallbacks surface as MissingFieldError, so every per-entity
        failure is an EntityImportError and the batch always continues.
    """
    result = ImportResult()

    for entity in tqdm(entities, desc="Importing tracks", unit="track", disable=not show_progress):
        try:
            result.tracks.append(
                import_track_from_entity(entity, missing_title_factory(entity))
            )
        except EntityImportError as e:
            log_import_failure(logger, entity.uid, entity.content_url, e.message)
            result.failed.append((entity.uid, e))

    logger.info(f"Imported {len(result.tracks)}/{result.total} tracks ({len(result.failed)} failed)")
    return result
