"""Tests for configuration module."""

import json

from gugotik.config import Config
from gugotik.constants import CHUNK_SIZE


def test_config_creates_default_file(tmp_path):
    """Test that config file is created with defaults if missing."""
    config_path = tmp_path / '.gugotik' / 'config.json'
    config = Config(config_path)

    assert config_path.exists()

    assert config.data['timeout'] == 30
    assert config.data['max_retries'] == 3
    assert config.data['retry_backoff_multiplier'] == 2
    assert config.get_chunk_size() == Config.DEFAULT_CONFIG['chunk_size']
    assert 'token' not in config.data


def test_default_chunk_size_is_5mib():
    assert CHUNK_SIZE == 5 * 1024 * 1024


def test_config_loads_existing_file(tmp_path):
    """Test loading existing config file."""
    config_path = tmp_path / '.gugotik' / 'config.json'
    config_path.parent.mkdir(parents=True)

    existing_data = {
        'token': 'tok_test123',
        'endpoint': 'https://api.example.com/',
        'chunk_size': 1024,
    }
    with open(config_path, 'w') as f:
        json.dump(existing_data, f)

    config = Config(config_path)

    assert config.get_token() == 'tok_test123'
    assert config.get_endpoint() == 'https://api.example.com'
    assert config.get_chunk_size() == 1024

    assert config.data['timeout'] == 30
    assert config.data['max_retries'] == 3


def test_config_session_round_trip(temp_config):
    """Test saving and clearing the login session."""
    assert temp_config.get_token() is None
    assert temp_config.get_user_id() is None

    temp_config.set_session(42, 'tok_abc')

    assert temp_config.get_user_id() == 42
    assert temp_config.get_token() == 'tok_abc'
    with open(temp_config.config_path, 'r') as f:
        data = json.load(f)
    assert data['token'] == 'tok_abc'
    assert data['user_id'] == 42

    temp_config.clear_session()
    assert temp_config.get_token() is None
    assert temp_config.get_user_id() is None


def test_config_set_endpoint_persists(temp_config):
    temp_config.set_endpoint('https://api.example.com/')

    assert temp_config.get_endpoint() == 'https://api.example.com'
    with open(temp_config.config_path, 'r') as f:
        assert json.load(f)['endpoint'] == 'https://api.example.com/'


def test_config_handles_corrupted_file(tmp_path):
    """Test recovery from corrupted config file."""
    config_path = tmp_path / '.gugotik' / 'config.json'
    config_path.parent.mkdir(parents=True)

    with open(config_path, 'w') as f:
        f.write('{ invalid json content')

    config = Config(config_path)
    assert config.data == Config.DEFAULT_CONFIG

    backup_path = config_path.with_suffix('.json.bak')
    assert backup_path.exists()


def test_config_get_retry_config(temp_config):
    """Test retry configuration retrieval."""
    temp_config.data['max_retries'] = 5
    temp_config.data['retry_backoff_multiplier'] = 3

    retry_config = temp_config.get_retry_config()
    assert retry_config['max_retries'] == 5
    assert retry_config['retry_backoff_multiplier'] == 3


def test_config_self_signed_flag(temp_config):
    assert temp_config.is_self_signed() is False
    temp_config.data['self_signed'] = True
    assert temp_config.is_self_signed() is True


def test_config_directory_created_if_missing(tmp_path):
    """Test that config directory is created if it doesn't exist."""
    config_path = tmp_path / 'nested' / 'deep' / '.gugotik' / 'config.json'

    assert not config_path.parent.exists()

    Config(config_path)
    assert config_path.parent.exists()
    assert config_path.exists()
