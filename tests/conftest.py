"""Shared pytest fixtures for all tests."""

import re

import httpx
import pytest

from gugotik.client import Client
from gugotik.config import Config

MIB = 1024 * 1024

CONTENT_RANGE_PATTERN = re.compile(r'bytes (\d+)-(\d+)/(\d+)')


class FakeBackend:
    """
    Stand-in for the GuGoTik publish endpoint.

    Acknowledges chunks the way the real backend does and records every
    request it receives. Each acknowledgement carries a fresh continuation
    id so tests can check the client echoes the previous one.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.fail_on: dict[int, object] = {}
        self.size_uploaded = 0
        self.chunks_uploaded = 0

    @property
    def calls(self) -> int:
        return len(self.requests)

    @property
    def content_ranges(self) -> list:
        return [r.headers.get('Content-Range') for r in self.requests]

    @property
    def upload_ids(self) -> list:
        return [r.headers.get('X-Upload-Id') for r in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        failure = self.fail_on.get(self.calls)
        if isinstance(failure, Exception):
            raise failure
        if isinstance(failure, httpx.Response):
            return failure

        content_range = request.headers.get('Content-Range')
        if content_range is None or content_range.startswith('bytes */'):
            return httpx.Response(200, json={'status_code': 0, 'status_msg': 'success', 'video_id': 99})

        start, end, total = (int(g) for g in CONTENT_RANGE_PATTERN.match(content_range).groups())
        self.size_uploaded += end - start + 1
        self.chunks_uploaded += 1

        if end == total - 1:
            return httpx.Response(200, json={'status_code': 0, 'status_msg': 'success', 'video_id': 99})

        return httpx.Response(200, json={
            'status_code': 0,
            'status_msg': 'chunk received',
            'upload_id': f'cont-{self.calls}',
            'chunks_uploaded': self.chunks_uploaded,
            'size_uploaded': self.size_uploaded,
        })

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def temp_config_dir(tmp_path):
    """
    Create temporary config directory.

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path to temporary .gugotik directory
    """
    config_dir = tmp_path / '.gugotik'
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def temp_config(temp_config_dir):
    """
    Create temporary config instance.

    Args:
        temp_config_dir: Temporary config directory fixture

    Returns:
        Config instance with temp config file
    """
    config = Config(temp_config_dir / 'config.json')
    config.data['endpoint'] = 'http://test'
    config.data['retry_backoff_multiplier'] = 0.01
    return config


@pytest.fixture
def backend():
    """Fake publish endpoint recording every request."""
    return FakeBackend()


@pytest.fixture
def client(temp_config, backend):
    """Client whose requests all go to the fake backend."""
    client = Client(temp_config, transport=backend.transport)
    yield client
    client.close()


@pytest.fixture
def payload_12mib():
    """12 MiB payload with a position-dependent byte pattern."""
    return bytes(i % 251 for i in range(256)) * (12 * MIB // 256)


@pytest.fixture
def sample_video(tmp_path):
    """
    Create a small video file for CLI publish tests.

    Returns:
        Path to sample .mp4 file
    """
    file_path = tmp_path / 'clip.mp4'
    file_path.write_bytes(b'\x00\x00\x00\x18ftypmp42' + b'\x01' * 2048)
    return file_path
