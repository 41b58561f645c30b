"""Tests for CLI command handlers."""

import io

import httpx

from gugotik.client import Client
from gugotik_cli.commands import (
    handle_delete_video,
    handle_endpoint,
    handle_feed,
    handle_login,
    handle_logout,
    handle_publish,
    handle_videos,
)
from gugotik_cli.models import (
    DeleteVideoCommand,
    EndpointCommand,
    FeedCommand,
    LoginCommand,
    LogoutCommand,
    PublishCommand,
    VideosCommand,
)
from gugotik_cli.utils import format_file_size, render_progress_bar

VIDEO = {
    'id': 3,
    'title': 'Cats',
    'author': {'name': 'alice'},
    'play_url': 'http://cdn/3.mp4',
    'favorite_count': 4,
    'comment_count': 1,
}


def make_client(config, handler) -> Client:
    return Client(config, transport=httpx.MockTransport(handler))


def test_handle_login_success(temp_config):
    """Test login handler stores the session."""
    client = make_client(temp_config, lambda request: httpx.Response(
        200, json={'status_code': 0, 'user_id': 1, 'token': 'tok'}
    ))

    result = handle_login(LoginCommand(username='alice', password='pw'), client=client)

    assert 'Login successful' in result
    assert temp_config.get_token() == 'tok'


def test_handle_login_rejected(temp_config):
    client = make_client(temp_config, lambda request: httpx.Response(
        200, json={'status_code': 2, 'status_msg': 'wrong password'}
    ))

    result = handle_login(LoginCommand(username='alice', password='bad'), client=client)

    assert 'Login failed' in result
    assert 'wrong password' in result


def test_handle_logout(temp_config):
    temp_config.set_session(1, 'tok')
    client = make_client(temp_config, lambda request: httpx.Response(200))

    assert handle_logout(LogoutCommand(), client=client) == 'Logged out.'
    assert temp_config.get_token() is None


def test_handle_endpoint_show_and_set(temp_config):
    """Test endpoint handler shows and persists the backend URL."""
    client = make_client(temp_config, lambda request: httpx.Response(200))

    assert handle_endpoint(EndpointCommand(), client=client) == 'Endpoint: http://test'

    result = handle_endpoint(EndpointCommand(url='https://api.example.com/'), client=client)

    assert result == 'Endpoint set to https://api.example.com'
    assert temp_config.get_endpoint() == 'https://api.example.com'


def test_handle_publish_not_logged_in(client, backend, sample_video):
    result = handle_publish(PublishCommand(file_path=str(sample_video), title='t'), client=client)

    assert 'Not logged in' in result
    assert backend.calls == 0


def test_handle_publish_file_not_found(client, backend, temp_config):
    temp_config.set_session(1, 'tok')

    result = handle_publish(PublishCommand(file_path='/nonexistent/clip.mp4', title='t'), client=client)

    assert 'File not found' in result
    assert backend.calls == 0


def test_handle_publish_success_shows_progress(client, backend, temp_config, sample_video):
    """Test publish uploads in chunks and draws a progress line."""
    temp_config.set_session(1, 'tok')
    temp_config.data['chunk_size'] = 1024
    out = io.StringIO()

    result = handle_publish(PublishCommand(file_path=str(sample_video), title='Clip'), client=client, stream=out)

    assert 'Published: Clip' in result
    assert backend.calls == 3
    assert '100%' in out.getvalue()
    assert 'chunk 3/3' in out.getvalue()


def test_handle_publish_chunk_failure(client, backend, temp_config, sample_video):
    temp_config.set_session(1, 'tok')
    temp_config.data['chunk_size'] = 1024
    backend.fail_on[2] = httpx.Response(502)

    result = handle_publish(
        PublishCommand(file_path=str(sample_video), title='Clip'), client=client, stream=io.StringIO()
    )

    assert 'at chunk 2' in result
    assert 'Run publish again' in result
    assert backend.calls == 2


def test_handle_videos_defaults_to_logged_in_user(temp_config):
    seen = []

    def handler(request):
        seen.append(request.url.params['user_id'])
        return httpx.Response(200, json={'status_code': 0, 'video_list': [VIDEO]})

    temp_config.set_session(8, 'tok')
    result = handle_videos(VideosCommand(), client=make_client(temp_config, handler))

    assert seen == ['8']
    assert 'Found 1 video(s)' in result
    assert 'Cats' in result
    assert 'alice' in result


def test_handle_feed_empty(temp_config):
    client = make_client(temp_config, lambda request: httpx.Response(200, json={'status_code': 0}))

    assert handle_feed(FeedCommand(), client=client) == 'No videos found.'


def test_handle_delete_video_error(temp_config):
    temp_config.set_session(8, 'tok')
    client = make_client(temp_config, lambda request: httpx.Response(
        200, json={'status_code': 5, 'status_msg': 'not owner'}
    ))

    result = handle_delete_video(DeleteVideoCommand(video_id=3), client=client)

    assert result.startswith('Error:')
    assert 'not owner' in result


def test_format_file_size():
    assert format_file_size(512) == '512 B'
    assert format_file_size(1536) == '1.50 KiB'
    assert format_file_size(5 * 1024 * 1024) == '5.00 MiB'


def test_render_progress_bar():
    assert render_progress_bar(0, width=10) == '[' + '░' * 10 + ']'
    assert render_progress_bar(50, width=10) == '[' + '█' * 5 + '░' * 5 + ']'
    assert render_progress_bar(100, width=10) == '[' + '█' * 10 + ']'
