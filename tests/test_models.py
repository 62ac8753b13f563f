"""Test aoide entity models"""

from datetime import datetime, timezone

import pytest

from aoide_bridge.aoide.models import (
    ActorKind,
    ActorRole,
    DateOrDateTime,
    PlaylistEntry,
    TitleKind,
    TrackEntity,
)


class TestKinds:
    """Test enum parsing"""

    def test_parse_names_and_values(self):
        assert TitleKind.parse('main', TitleKind.SUB) is TitleKind.MAIN
        assert TitleKind.parse(2, TitleKind.MAIN) is TitleKind.SORTING
        assert ActorRole.parse('DjMixer', ActorRole.ARTIST) is ActorRole.DJ_MIXER
        assert ActorRole.parse('dj-mixer', ActorRole.ARTIST) is ActorRole.DJ_MIXER
        assert ActorKind.parse(None, ActorKind.SUMMARY) is ActorKind.SUMMARY

    def test_parse_unknown(self):
        with pytest.raises(KeyError):
            ActorKind.parse('bogus', ActorKind.SUMMARY)


class TestDateOrDateTime:
    """Test date parsing"""

    @pytest.mark.parametrize('raw, year', [
        (1999, 1999),
        (19990615, 1999),
        ('2004', 2004),
        ('2004-07', 2004),
        ('2004-07-21', 2004),
        ('2004-07-21T10:00:00Z', 2004),
        ('-0044-03-15', -44),
    ])
    def test_year(self, raw, year):
        assert DateOrDateTime.parse(raw).year() == year

    def test_datetime(self):
        value = datetime(2010, 1, 1, tzinfo=timezone.utc)
        assert DateOrDateTime.parse(value).value == value

    def test_none(self):
        assert DateOrDateTime.parse(None) is None

    def test_invalid(self):
        with pytest.raises(ValueError):
            DateOrDateTime.parse('yesterday')


class TestTrackEntity:
    """Test entity construction from query results"""

    def test_from_dict(self, sample_track_entity):
        track = sample_track_entity.track

        assert sample_track_entity.uid == 'track_uid_123'
        assert track.titles[1].kind is TitleKind.MAIN
        assert track.actors[4].role is ActorRole.COMPOSER
        assert track.tags.facets[1].tags[1].score == 0.5
        assert track.media_source.content_type == 'audio/flac'
        assert track.media_source.content_metadata.duration.value() == 2500.4
        assert track.indexes.disc.total is None
        assert track.released_orig_at is None

    def test_flat_entity(self):
        entity = TrackEntity.from_dict({'uid': 'flat', 'content_url': None})
        assert entity.uid == 'flat'
        assert entity.content_url is None
        assert entity.track.titles == ()

    def test_unknown_playlist_item(self):
        with pytest.raises(ValueError):
            PlaylistEntry.from_dict({'item': {'bogus': {}}})

    def test_unknown_content_metadata(self, sample_track_data):
        """Only audio content metadata is understood"""
        sample_track_data['body']['track']['media_source']['content']['metadata'] = {'video': {}}

        with pytest.raises(ValueError, match='video'):
            TrackEntity.from_dict(sample_track_data)
