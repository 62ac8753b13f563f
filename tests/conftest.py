"""Test configuration and fixtures"""

import logging
import tempfile
from pathlib import Path

import pytest

from aoide_bridge.aoide.models import TrackEntity


@pytest.fixture
def temp_dir():
    """Create temporary directory for tests"""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def sample_track_data():
    """Sample track entity as returned by a storage query"""
    return {
        'hdr': {'uid': 'track_uid_123', 'rev': 1},
        'body': {
            'content_url': 'file:///music/Test%20Artist/Test%20Song.flac',
            'track': {
                'titles': [
                    {'name': 'Song, Test', 'kind': 'sorting'},
                    {'name': 'Test Song', 'kind': 'main'},
                ],
                'actors': [
                    {'name': 'Test Artist feat. Guest', 'role': 'artist', 'kind': 'summary'},
                    {'name': 'Test Artist', 'role': 'artist', 'kind': 'individual'},
                    {'name': 'Guest', 'role': 'artist', 'kind': 'individual'},
                    {'name': 'Artist, Test', 'role': 'artist', 'kind': 'sorting'},
                    {'name': 'Some Composer', 'role': 'composer', 'kind': 'individual'},
                ],
                'album': {
                    'titles': [{'name': 'Test Album', 'kind': 'main'}],
                },
                'tags': {
                    'plain': [{'label': 'favorite'}],
                    'facets': [
                        {'facet_id': 'mood', 'tags': [{'label': 'happy'}]},
                        {'facet_id': 'genre', 'tags': [
                            {'label': 'house'},
                            {'label': 'techno', 'score': 0.5},
                        ]},
                    ],
                },
                'recorded_at': 2001,
                'released_at': '1999-06-01',
                'indexes': {
                    'track': {'number': 3, 'total': 12},
                    'disc': {'number': 1},
                },
                'media_source': {
                    'content': {
                        'type': 'audio/flac',
                        'metadata': {'audio': {'duration_ms': 2500.4}},
                    },
                },
            },
        },
    }


@pytest.fixture
def sample_track_entity(sample_track_data):
    """Sample track entity"""
    return TrackEntity.from_dict(sample_track_data)


@pytest.fixture(autouse=True)
def reset_root_logger():
    """Keep handlers added by setup_logging from leaking into other tests"""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            handler.close()
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)
