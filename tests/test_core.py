"""Test configuration, storage config and logging"""

import logging

import pytest

from aoide_bridge.core.config import DEFAULT_IDENTIFIER, load_config
from aoide_bridge.core.database import default_database_config
from aoide_bridge.core.exceptions import ConfigError
from aoide_bridge.core.logger import (
    get_logger,
    log_import_failure,
    setup_logging,
    shutdown_logging,
)


def write_config(temp_dir, content):
    path = temp_dir / 'config.yaml'
    path.write_text(content, encoding='utf-8')
    return path


class TestConfig:
    """Test config.yaml loading"""

    def test_minimal(self, temp_dir):
        path = write_config(temp_dir, f'storage:\n  directory: "{temp_dir}"\n')
        config = load_config(path)

        assert config.storage.directory == temp_dir.resolve()
        assert config.storage.pool_size == 8
        assert config.storage.acquire_read_timeout_millis == 5000
        assert config.storage.acquire_write_timeout_millis == 10000
        assert config.collection.identifier == DEFAULT_IDENTIFIER
        assert config.collection.kind == DEFAULT_IDENTIFIER
        assert config.collection.music_directory is None

    def test_full(self, temp_dir):
        path = write_config(temp_dir, (
            'storage:\n'
            f'  directory: "{temp_dir}"\n'
            '  pool_size: 4\n'
            'collection:\n'
            '  identifier: org.example.player\n'
            '  music_directory: "file:///music"\n'
        ))
        config = load_config(path)

        assert config.storage.pool_size == 4
        assert config.collection.kind == 'org.example.player'
        assert config.collection.music_directory == 'file:///music'

    def test_missing_file(self, temp_dir):
        with pytest.raises(ConfigError) as exc_info:
            load_config(temp_dir / 'missing.yaml')
        assert 'not found' in exc_info.value.message

    @pytest.mark.parametrize('content', [
        'storage: [unclosed',
        '- just\n- a list\n',
        'collection: {}\n',
        'storage:\n  directory: ""\n',
        'storage:\n  directory: /x\n  pool_size: 0\n',
        'storage:\n  directory: /x\n  pool_size: true\n',
        'storage:\n  directory: /x\ncollection: nope\n',
    ])
    def test_invalid(self, temp_dir, content):
        with pytest.raises(ConfigError):
            load_config(write_config(temp_dir, content))


class TestDatabaseConfig:
    """Test storage backend defaults"""

    def test_defaults(self, temp_dir):
        config = default_database_config(temp_dir)

        assert config.connection.storage.path == temp_dir / 'aoide.sqlite'
        assert config.connection.pool.max_size == 8
        assert config.connection.pool.gatekeeper.acquire_read_timeout_millis == 5_000
        assert config.connection.pool.gatekeeper.acquire_write_timeout_millis == 10_000
        assert config.migrate_schema is None

    def test_never_zero(self, temp_dir):
        config = default_database_config(temp_dir, pool_size=0, acquire_read_timeout_millis=0)

        assert config.connection.pool.max_size == 1
        assert config.connection.pool.gatekeeper.acquire_read_timeout_millis == 1


class TestLogging:
    """Test logging setup"""

    def test_log_files(self, temp_dir):
        setup_logging(temp_dir)
        logger = get_logger('aoide_bridge.test')

        logger.debug('debug message')
        logger.error('error message')
        log_import_failure(logger, 'uid1', 'https://example.com/a.mp3', 'unsupported content URL')
        shutdown_logging()

        logs_dir = temp_dir / 'logs'
        full_log = next(logs_dir.glob('log_full_*.log')).read_text(encoding='utf-8')
        error_log = next(logs_dir.glob('log_errors_*.log')).read_text(encoding='utf-8')
        failures = next(logs_dir.glob('import_failures_*.log')).read_text(encoding='utf-8')

        assert 'debug message' in full_log
        assert 'error message' in error_log
        assert 'debug message' not in error_log
        assert failures == 'uid1\nhttps://example.com/a.mp3\nunsupported content URL\n\n'
        assert logging.getLogger().handlers == []
