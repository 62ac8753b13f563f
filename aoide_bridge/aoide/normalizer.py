"""
Metadata normalization for aoide track entities.

Pure functions that pick a single value out of the redundant representations
an aoide track carries. None of them fails: absent data degrades to an empty
or default value. The one required field, the track title, is resolved by
the importer because it needs the caller's fallback.

Precedence rules:
    Artists:  Individual artist credits in source order. The summary
              artist is used only when there is no individual artist.
              Sorting credits are ignored.
    Titles:   The first title of kind MAIN.
    Genres:   All labels of the "genre" facet in source order.
    Year:     The earliest year of recorded_at, released_at and
              released_orig_at.
    Duration: Milliseconds rounded to whole seconds, clamped to
              DEFAULT_DURATION.
"""

import math
from collections.abc import Iterable

from aoide_bridge.aoide.models import (
    FACET_ID_GENRE,
    Actor,
    ActorKind,
    ActorRole,
    AudioContentMetadata,
    DateOrDateTime,
    Index,
    Tags,
    Title,
    TitleKind,
)
from aoide_bridge.library.models import NumberOf


DEFAULT_DURATION = 0


def collect_artists(actors: Iterable[Actor]) -> list[str]:
    """
    Resolve the artist names of a track or album.

    Args:
        actors: Actor credits in source order.

    Returns:
        The individual artists if there are any, otherwise a list with
        the summary artist, otherwise an empty list.

    Raises:
        AssertionError: If more than one summary artist is credited.
    """
    summary_artist: str | None = None
    individual_artists: list[str] = []

    for actor in actors:
        if actor.role != ActorRole.ARTIST:
            continue
        if actor.kind == ActorKind.SUMMARY:
            assert summary_artist is None, "multiple summary artists"
            summary_artist = actor.name
        elif actor.kind == ActorKind.INDIVIDUAL:
            individual_artists.append(actor.name)
        # SORTING credits are ignored

    if individual_artists:
        return individual_artists

    # The common case: only a summary artist is credited
    return [] if summary_artist is None else [summary_artist]


def find_main_title(titles: Iterable[Title]) -> str | None:
    """Return the name of the first MAIN title, or None."""
    return next((title.name for title in titles if title.kind == TitleKind.MAIN), None)


def collect_genres(tags: Tags) -> list[str]:
    """
    Collect the genre labels of a track.

    Tags without a label are skipped, facets other than "genre" are ignored.
    """
    return [
        tag.label
        for facet in tags.facets
        if facet.facet_id == FACET_ID_GENRE
        for tag in facet.tags
        if tag.label is not None
    ]


def year_of(date: DateOrDateTime | None) -> int | None:
    """Return the year of a date, or None if absent or negative."""
    if date is None:
        return None
    year = date.year()
    return year if year >= 0 else None


def resolve_year(
    recorded_at: DateOrDateTime | None,
    released_at: DateOrDateTime | None,
    released_orig_at: DateOrDateTime | None,
) -> int | None:
    """
    Return the earliest year of the given dates.

    Recording and release dates are often inconsistent; the earliest
    year is the best guess for when the track was created.

    Example:
        recorded 2001, released 1999, no original release -> 1999
    """
    years = [
        year
        for year in map(year_of, (recorded_at, released_at, released_orig_at))
        if year is not None
    ]
    return min(years, default=None)


def _round_half_away_from_zero(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def resolve_duration(audio: AudioContentMetadata) -> int:
    """
    Convert the audio duration into whole seconds.

    The rounded value is clamped so that it never exceeds DEFAULT_DURATION
    and is never negative. NaN and infinite durations yield DEFAULT_DURATION.
    With DEFAULT_DURATION = 0 every known duration therefore becomes 0.

    Example:
        2500.4 ms -> 3 s -> clamped to 0
    """
    if audio.duration is None:
        return DEFAULT_DURATION
    millis = audio.duration.value()
    if not math.isfinite(millis):
        return DEFAULT_DURATION
    seconds = _round_half_away_from_zero(millis / 1000.0)
    return max(0, int(min(seconds, float(DEFAULT_DURATION))))


def number_of(index: Index) -> NumberOf:
    return NumberOf(no=index.number, of=index.total)
