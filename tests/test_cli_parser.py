"""Tests for CLI command parsing."""

import pytest

from gugotik_cli.models import (
    DeleteVideoCommand,
    EndpointCommand,
    FeedCommand,
    LoginCommand,
    LogoutCommand,
    PublishCommand,
    RegisterCommand,
    VideosCommand,
)
from gugotik_cli.parser import ParseError, parse_command


def test_parse_register():
    assert parse_command('register alice pw123') == RegisterCommand(username='alice', password='pw123')


def test_parse_login():
    assert parse_command('login alice pw123') == LoginCommand(username='alice', password='pw123')


def test_parse_login_wrong_arity():
    with pytest.raises(ParseError, match='exactly 2 arguments'):
        parse_command('login alice')


def test_parse_logout_and_feed():
    assert parse_command('logout') == LogoutCommand()
    assert parse_command('feed') == FeedCommand()


def test_parse_publish_joins_title():
    cmd = parse_command('publish videos/a.mp4 My summer trip')
    assert cmd == PublishCommand(file_path='videos/a.mp4', title='My summer trip')


def test_parse_publish_quoted_title():
    cmd = parse_command('publish "my clip.mp4" "Quoted title"')
    assert cmd == PublishCommand(file_path='my clip.mp4', title='Quoted title')


def test_parse_publish_requires_title():
    with pytest.raises(ParseError):
        parse_command('publish a.mp4')


def test_parse_videos():
    assert parse_command('videos') == VideosCommand()
    assert parse_command('videos 12') == VideosCommand(user_id=12)


def test_parse_videos_non_numeric():
    with pytest.raises(ParseError, match='must be a number'):
        parse_command('videos bob')


def test_parse_delete_video():
    assert parse_command('delete-video 5') == DeleteVideoCommand(video_id=5)


def test_parse_unknown_command():
    with pytest.raises(ParseError, match='Unknown command'):
        parse_command('frobnicate')


def test_parse_empty():
    with pytest.raises(ParseError):
        parse_command('   ')


def test_parse_unbalanced_quotes():
    with pytest.raises(ParseError, match='Invalid syntax'):
        parse_command('publish "unterminated')


def test_parse_endpoint():
    assert parse_command('endpoint') == EndpointCommand()
    assert parse_command('endpoint https://api.example.com') == EndpointCommand(url='https://api.example.com')


def test_parse_endpoint_requires_scheme():
    with pytest.raises(ParseError, match='http:// or https://'):
        parse_command('endpoint localhost:37000')
