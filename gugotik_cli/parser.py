"""Command parser for CLI input."""

import shlex

from gugotik_cli.models import (
    CommandRequest,
    DeleteVideoCommand,
    EndpointCommand,
    FeedCommand,
    LoginCommand,
    LogoutCommand,
    PublishCommand,
    RegisterCommand,
    VideosCommand,
)


class ParseError(Exception):
    """Raised when command parsing fails."""

    pass


def parse_command(input_line: str) -> CommandRequest:
    """Parse user input into a CommandRequest object.

    Args:
        input_line: Raw user input from REPL

    Returns:
        CommandRequest object

    Raises:
        ParseError: If command syntax is invalid
    """
    if not input_line.strip():
        raise ParseError("Empty command")

    try:
        tokens = shlex.split(input_line)
    except ValueError as e:
        raise ParseError(f"Invalid syntax: {e}")

    if not tokens:
        raise ParseError("Empty command")

    command_name = tokens[0]
    args = tokens[1:]

    if command_name == "register":
        return _parse_credentials("register", args, RegisterCommand)
    elif command_name == "login":
        return _parse_credentials("login", args, LoginCommand)
    elif command_name == "logout":
        return LogoutCommand()
    elif command_name == "publish":
        return _parse_publish(args)
    elif command_name == "videos":
        return _parse_videos(args)
    elif command_name == "feed":
        return FeedCommand()
    elif command_name == "delete-video":
        return _parse_delete_video(args)
    elif command_name == "endpoint":
        return _parse_endpoint(args)
    else:
        raise ParseError(f"Unknown command: {command_name}")


def _parse_credentials(name: str, args: list[str], command_type):
    """Parse '<name> <username> <password>'."""
    if len(args) != 2:
        raise ParseError(f"{name} requires exactly 2 arguments: <username> <password>")

    username, password = args
    return command_type(username=username, password=password)


def _parse_publish(args: list[str]) -> PublishCommand:
    """Parse 'publish <file> <title...>' command."""
    if len(args) < 2:
        raise ParseError("publish requires a file and a title")

    return PublishCommand(file_path=args[0], title=" ".join(args[1:]))


def _parse_videos(args: list[str]) -> VideosCommand:
    """Parse 'videos [user_id]' command."""
    if not args:
        return VideosCommand()
    if len(args) > 1:
        raise ParseError("videos takes at most 1 argument: [user_id]")
    return VideosCommand(user_id=_parse_int("user_id", args[0]))


def _parse_delete_video(args: list[str]) -> DeleteVideoCommand:
    """Parse 'delete-video <video_id>' command."""
    if len(args) != 1:
        raise ParseError("delete-video requires exactly 1 argument: <video_id>")
    return DeleteVideoCommand(video_id=_parse_int("video_id", args[0]))


def _parse_endpoint(args: list[str]) -> EndpointCommand:
    """Parse 'endpoint [url]' command."""
    if not args:
        return EndpointCommand()
    if len(args) > 1:
        raise ParseError("endpoint takes at most 1 argument: [url]")
    if not args[0].startswith(("http://", "https://")):
        raise ParseError(f"endpoint must start with http:// or https://, got '{args[0]}'")
    return EndpointCommand(url=args[0])


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ParseError(f"{name} must be a number, got '{value}'")
