"""Test metadata normalization rules"""

from datetime import datetime

import pytest

from aoide_bridge.aoide.models import (
    Actor,
    ActorKind,
    ActorRole,
    AudioContentMetadata,
    DateOrDateTime,
    DurationMs,
    FacetedTags,
    Index,
    Tag,
    Tags,
    Title,
    TitleKind,
)
from aoide_bridge.aoide.normalizer import (
    DEFAULT_DURATION,
    collect_artists,
    collect_genres,
    find_main_title,
    number_of,
    resolve_duration,
    resolve_year,
)
from aoide_bridge.library.models import NumberOf


def artist(name, kind):
    return Actor(name=name, role=ActorRole.ARTIST, kind=kind)


class TestCollectArtists:
    """Test artist precedence"""

    def test_individual_artists_win_over_summary(self):
        """Individual artists are returned in source order, summary dropped"""
        actors = [
            artist('B', ActorKind.INDIVIDUAL),
            artist('A feat. B', ActorKind.SUMMARY),
            artist('A', ActorKind.INDIVIDUAL),
        ]
        assert collect_artists(actors) == ['B', 'A']

    def test_summary_artist_used_without_individuals(self):
        """Summary artist is the fallback"""
        actors = [
            artist('Queen', ActorKind.SUMMARY),
            artist('Queen, The', ActorKind.SORTING),
        ]
        assert collect_artists(actors) == ['Queen']

    def test_no_artists(self):
        """Empty and non-artist credits yield no artists"""
        assert collect_artists([]) == []
        actors = [Actor(name='Composer', role=ActorRole.COMPOSER, kind=ActorKind.INDIVIDUAL)]
        assert collect_artists(actors) == []

    def test_sorting_only(self):
        """Sorting credits are ignored"""
        assert collect_artists([artist('Harris, Calvin', ActorKind.SORTING)]) == []

    def test_other_roles_ignored(self):
        """Only the artist role is considered"""
        actors = [
            Actor(name='Producer', role=ActorRole.PRODUCER, kind=ActorKind.SUMMARY),
            artist('Artist', ActorKind.SUMMARY),
        ]
        assert collect_artists(actors) == ['Artist']

    def test_multiple_summary_artists_is_programming_error(self):
        """A second summary artist trips the assertion"""
        actors = [artist('A', ActorKind.SUMMARY), artist('B', ActorKind.SUMMARY)]
        with pytest.raises(AssertionError):
            collect_artists(actors)


class TestTitles:
    """Test main title lookup"""

    def test_first_main_title(self):
        titles = [
            Title('Sub', TitleKind.SUB),
            Title('First', TitleKind.MAIN),
            Title('Second', TitleKind.MAIN),
        ]
        assert find_main_title(titles) == 'First'

    def test_no_main_title(self):
        assert find_main_title([Title('Sort', TitleKind.SORTING)]) is None
        assert find_main_title([]) is None


class TestGenres:
    """Test genre facet extraction"""

    def test_only_genre_facet(self):
        """Labels of the genre facet in order"""
        tags = Tags(facets=(
            FacetedTags('mood', (Tag('dark'),)),
            FacetedTags('genre', (Tag('house'), Tag('techno'))),
        ))
        assert collect_genres(tags) == ['house', 'techno']

    def test_unlabeled_tags_skipped_and_duplicates_kept(self):
        tags = Tags(facets=(
            FacetedTags('genre', (Tag('house'), Tag(None, 0.4), Tag('house'))),
        ))
        assert collect_genres(tags) == ['house', 'house']

    def test_no_genre_facet(self):
        assert collect_genres(Tags(plain=(Tag('genre'),))) == []
        assert collect_genres(Tags()) == []


class TestYear:
    """Test year resolution"""

    def test_minimum_of_present_years(self):
        year = resolve_year(
            DateOrDateTime.parse(2001),
            DateOrDateTime.parse(1999),
            None,
        )
        assert year == 1999

    def test_all_absent(self):
        assert resolve_year(None, None, None) is None

    @pytest.mark.parametrize('recorded, released, original, expected', [
        (None, None, '1975', 1975),
        ('2010-05-01', None, None, 2010),
        (20200101, '2019', '2021-01', 2019),
        (datetime(1980, 3, 1, 12, 0), 19850000, None, 1980),
    ])
    def test_mixed_dates(self, recorded, released, original, expected):
        year = resolve_year(
            DateOrDateTime.parse(recorded),
            DateOrDateTime.parse(released),
            DateOrDateTime.parse(original),
        )
        assert year == expected

    def test_negative_year_ignored(self):
        """Negative years cannot be represented and are dropped"""
        year = resolve_year(DateOrDateTime(-440000), DateOrDateTime.parse(1999), None)
        assert year == 1999


class TestDuration:
    """Test duration conversion"""

    def test_absent_duration(self):
        assert resolve_duration(AudioContentMetadata()) == DEFAULT_DURATION

    def test_duration_is_clamped_to_default(self):
        """2500.4 ms rounds to 3 s and is then clamped to the default"""
        audio = AudioContentMetadata(duration=DurationMs(2500.4))
        assert resolve_duration(audio) == 0

    def test_long_duration_is_clamped(self):
        audio = AudioContentMetadata(duration=DurationMs(354_320.0))
        assert resolve_duration(audio) == DEFAULT_DURATION

    @pytest.mark.parametrize('millis', [float('nan'), float('inf'), float('-inf')])
    def test_non_finite_duration(self, millis):
        audio = AudioContentMetadata(duration=DurationMs(millis))
        assert resolve_duration(audio) == DEFAULT_DURATION

    def test_negative_duration_is_not_negative(self):
        audio = AudioContentMetadata(duration=DurationMs(-5000.0))
        assert resolve_duration(audio) == 0


class TestNumberOf:
    """Test index copying"""

    def test_copies_fields(self):
        assert number_of(Index(3, 12)) == NumberOf(no=3, of=12)
        assert number_of(Index(None, 2)) == NumberOf(no=None, of=2)
        assert number_of(Index()) == NumberOf()
