"""
Data models for aoide collection entities.

This module defines immutable dataclasses representing the raw track and
playlist entities supplied by the aoide storage layer. They carry several,
sometimes redundant, representations of the same fact: multiple titles,
a summary artist next to individual artists, genres stored in generic
tag facets, and three different dates.

Design Decisions:
    - All dataclasses are frozen (immutable); the importer never modifies them
    - Every tagged kind is a closed IntEnum, values match aoide's encoding
    - from_dict() factories accept the JSON-shaped dicts returned by a
      storage query, so callers hand over already-materialized entities

Usage:
    from aoide_bridge.aoide.models import TrackEntity

    entity = TrackEntity.from_dict(query_result)
    print(entity.uid, entity.content_url)
"""

import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import Any, Union


# Reserved facet id of genre tags
FACET_ID_GENRE = "genre"

_CAMEL_BOUNDARY_RE = re.compile(r"(?<!^)(?=[A-Z])")


class _KindEnum(IntEnum):
    """IntEnum that also parses member names like 'main' or 'DjMixer'."""

    @classmethod
    def parse(cls, value: Any, default: "_KindEnum") -> "_KindEnum":
        if value is None:
            return default
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)
        key = str(value).strip().replace("-", "_")
        if key.upper() in cls.__members__:
            return cls[key.upper()]
        # CamelCase spelling, e.g. "DjMixer"
        return cls[_CAMEL_BOUNDARY_RE.sub("_", key).upper()]


class TitleKind(_KindEnum):
    MAIN = 0
    SUB = 1
    SORTING = 2
    WORK = 3
    MOVEMENT = 4


class ActorRole(_KindEnum):
    ARTIST = 0
    ARRANGER = 1
    COMPOSER = 2
    CONDUCTOR = 3
    DJ_MIXER = 4
    ENGINEER = 5
    LYRICIST = 6
    MIXER = 7
    PERFORMER = 8
    PRODUCER = 9
    DIRECTOR = 10
    REMIXER = 11
    WRITER = 12


class ActorKind(_KindEnum):
    """
    Kind of an actor credit.

    SUMMARY: One combined credit, e.g. "Calvin Harris feat. Dua Lipa".
    INDIVIDUAL: One credit per person, e.g. "Calvin Harris" and "Dua Lipa".
    SORTING: Name variant used only for sorting, e.g. "Harris, Calvin".
    """
    SUMMARY = 0
    INDIVIDUAL = 1
    SORTING = 2


@dataclass(frozen=True)
class Title:
    name: str
    kind: TitleKind = TitleKind.MAIN

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Title":
        return cls(
            name=data["name"],
            kind=TitleKind.parse(data.get("kind"), TitleKind.MAIN),
        )


@dataclass(frozen=True)
class Actor:
    name: str
    role: ActorRole = ActorRole.ARTIST
    kind: ActorKind = ActorKind.SUMMARY

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Actor":
        return cls(
            name=data["name"],
            role=ActorRole.parse(data.get("role"), ActorRole.ARTIST),
            kind=ActorKind.parse(data.get("kind"), ActorKind.SUMMARY),
        )


@dataclass(frozen=True)
class Album:
    titles: tuple[Title, ...] = field(default_factory=tuple)
    actors: tuple[Actor, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Album":
        if not data:
            return cls()
        return cls(
            titles=tuple(Title.from_dict(t) for t in data.get("titles") or ()),
            actors=tuple(Actor.from_dict(a) for a in data.get("actors") or ()),
        )


@dataclass(frozen=True)
class Tag:
    """
    A single tag. Either the label or the score may be missing:
    some facets only carry scores (e.g. "energy" = 0.8).
    """
    label: str | None = None
    score: float = 1.0

    @classmethod
    def from_dict(cls, data: dict[str, Any] | str) -> "Tag":
        if isinstance(data, str):
            return cls(label=data)
        score = data.get("score")
        return cls(
            label=data.get("label"),
            score=1.0 if score is None else float(score),
        )


@dataclass(frozen=True)
class FacetedTags:
    facet_id: str
    tags: tuple[Tag, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FacetedTags":
        return cls(
            facet_id=data["facet_id"],
            tags=tuple(Tag.from_dict(t) for t in data.get("tags") or ()),
        )


@dataclass(frozen=True)
class Tags:
    plain: tuple[Tag, ...] = field(default_factory=tuple)
    facets: tuple[FacetedTags, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Tags":
        if not data:
            return cls()
        return cls(
            plain=tuple(Tag.from_dict(t) for t in data.get("plain") or ()),
            facets=tuple(FacetedTags.from_dict(f) for f in data.get("facets") or ()),
        )


@dataclass(frozen=True)
class DateOrDateTime:
    """
    Either a full timestamp or a calendar date with optional month/day.

    Calendar dates are encoded as a single YYYYMMDD integer where month
    and day may be zero, e.g. 19990000 for "1999" or 19990600 for "1999-06".
    The year may be negative.

    Attributes:
        value: A datetime, or the YYYYMMDD integer.
    """
    value: datetime | int

    def year(self) -> int:
        if isinstance(self.value, datetime):
            return self.value.year
        # Truncate toward zero so that negative years keep their sign
        return int(self.value / 10_000)

    @classmethod
    def parse(cls, raw: Any) -> "DateOrDateTime | None":
        """
        Parse a date from its JSON representation.

        Accepts a datetime, a YYYYMMDD or YYYY integer, or a string in one
        of the forms "YYYY", "YYYY-MM", "YYYY-MM-DD" or an ISO 8601 timestamp.

        Raises:
            ValueError: If the value cannot be interpreted as a date.
        """
        if raw is None:
            return None
        if isinstance(raw, datetime):
            return cls(raw)
        if isinstance(raw, int) and not isinstance(raw, bool):
            # Plain years are stored without month/day digits
            return cls(raw * 10_000 if -10_000 < raw < 10_000 else raw)
        if isinstance(raw, str):
            text = raw.strip()
            if "T" in text or " " in text:
                return cls(datetime.fromisoformat(text.replace("Z", "+00:00")))
            parts = text.split("-")
            negative = text.startswith("-")
            if negative:
                parts = parts[1:]
                parts[0] = "-" + parts[0]
            if not 1 <= len(parts) <= 3:
                raise ValueError(f"invalid date: {raw!r}")
            year = int(parts[0])
            month = int(parts[1]) if len(parts) > 1 else 0
            day = int(parts[2]) if len(parts) > 2 else 0
            sign = -1 if year < 0 else 1
            return cls(sign * (abs(year) * 10_000 + month * 100 + day))
        raise ValueError(f"invalid date: {raw!r}")


@dataclass(frozen=True)
class DurationMs:
    millis: float

    def value(self) -> float:
        return self.millis


@dataclass(frozen=True)
class AudioContentMetadata:
    """Audio properties of the media source. All fields are optional."""
    duration: DurationMs | None = None
    channels: int | None = None
    sample_rate_hz: float | None = None
    bitrate_bps: float | None = None
    loudness_lufs: float | None = None
    encoder: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "AudioContentMetadata":
        if not data:
            return cls()
        duration_ms = data.get("duration_ms")
        return cls(
            duration=None if duration_ms is None else DurationMs(float(duration_ms)),
            channels=data.get("channels"),
            sample_rate_hz=data.get("sample_rate_hz"),
            bitrate_bps=data.get("bitrate_bps"),
            loudness_lufs=data.get("loudness_lufs"),
            encoder=data.get("encoder"),
        )


# Closed set of content metadata variants; audio is the only one so far
ContentMetadata = Union[AudioContentMetadata]


@dataclass(frozen=True)
class MediaSource:
    content_type: str = "audio/mpeg"
    content_metadata: ContentMetadata = field(default_factory=AudioContentMetadata)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "MediaSource":
        if not data:
            return cls()
        content = data.get("content") or {}
        metadata = content.get("metadata") or {}
        unknown = set(metadata) - {"audio"}
        if unknown:
            raise ValueError(f"unknown content metadata: {sorted(unknown)!r}")
        return cls(
            content_type=content.get("type", "audio/mpeg"),
            content_metadata=AudioContentMetadata.from_dict(metadata.get("audio")),
        )


@dataclass(frozen=True)
class Index:
    number: int | None = None
    total: int | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Index":
        if not data:
            return cls()
        return cls(number=data.get("number"), total=data.get("total"))


@dataclass(frozen=True)
class Indexes:
    track: Index = field(default_factory=Index)
    disc: Index = field(default_factory=Index)
    movement: Index = field(default_factory=Index)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Indexes":
        if not data:
            return cls()
        return cls(
            track=Index.from_dict(data.get("track")),
            disc=Index.from_dict(data.get("disc")),
            movement=Index.from_dict(data.get("movement")),
        )


@dataclass(frozen=True)
class TrackBody:
    titles: tuple[Title, ...] = field(default_factory=tuple)
    actors: tuple[Actor, ...] = field(default_factory=tuple)
    album: Album = field(default_factory=Album)
    tags: Tags = field(default_factory=Tags)
    recorded_at: DateOrDateTime | None = None
    released_at: DateOrDateTime | None = None
    released_orig_at: DateOrDateTime | None = None
    indexes: Indexes = field(default_factory=Indexes)
    media_source: MediaSource = field(default_factory=MediaSource)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TrackBody":
        return cls(
            titles=tuple(Title.from_dict(t) for t in data.get("titles") or ()),
            actors=tuple(Actor.from_dict(a) for a in data.get("actors") or ()),
            album=Album.from_dict(data.get("album")),
            tags=Tags.from_dict(data.get("tags")),
            recorded_at=DateOrDateTime.parse(data.get("recorded_at")),
            released_at=DateOrDateTime.parse(data.get("released_at")),
            released_orig_at=DateOrDateTime.parse(data.get("released_orig_at")),
            indexes=Indexes.from_dict(data.get("indexes")),
            media_source=MediaSource.from_dict(data.get("media_source")),
        )


def _split_entity(data: dict[str, Any]) -> tuple[str, dict[str, Any]]:
    # Entities come either as {"hdr": {"uid": ...}, "body": {...}} or flat
    if "hdr" in data:
        return str(data["hdr"]["uid"]), data.get("body") or {}
    return str(data["uid"]), data


@dataclass(frozen=True)
class TrackEntity:
    """
    Immutable representation of a stored track.

    Attributes:
        uid: Unique entity identifier.
        content_url: Locator of the audio content, usually a file:// URL.
                     None if the track has no content location.
        track: The track metadata.

    Example:
        entity = TrackEntity.from_dict({
            "hdr": {"uid": "01HXYZ"},
            "body": {
                "content_url": "file:///music/song.flac",
                "track": {"titles": [{"name": "Song", "kind": "main"}]},
            },
        })
    """
    uid: str
    content_url: str | None
    track: TrackBody

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TrackEntity":
        uid, body = _split_entity(data)
        return cls(
            uid=uid,
            content_url=body.get("content_url"),
            track=TrackBody.from_dict(body.get("track") or {}),
        )


@dataclass(frozen=True)
class PlaylistEntity:
    uid: str
    title: str
    kind: str | None = None
    notes: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PlaylistEntity":
        uid, body = _split_entity(data)
        return cls(
            uid=uid,
            title=body["title"],
            kind=body.get("kind"),
            notes=body.get("notes"),
        )


@dataclass(frozen=True)
class TrackItem:
    uid: str


@dataclass(frozen=True)
class SeparatorItem:
    kind: str | None = None


PlaylistItem = Union[TrackItem, SeparatorItem]


@dataclass(frozen=True)
class PlaylistEntry:
    """
    One entry of a playlist: a track reference or a separator.

    Attributes:
        item: The entry payload.
        added_at: When the entry was added, if known.
        title: Optional entry title (e.g. a separator caption).
    """
    item: PlaylistItem
    added_at: DateOrDateTime | None = None
    title: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PlaylistEntry":
        raw_item = data.get("item") or {}
        item: PlaylistItem
        if "track" in raw_item:
            item = TrackItem(uid=str(raw_item["track"]["uid"]))
        elif "separator" in raw_item:
            item = SeparatorItem(kind=(raw_item["separator"] or {}).get("kind"))
        else:
            raise ValueError(f"unknown playlist item: {raw_item!r}")
        return cls(
            item=item,
            added_at=DateOrDateTime.parse(data.get("added_at")),
            title=data.get("title"),
        )
