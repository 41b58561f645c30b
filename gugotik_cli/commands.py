"""Command handler functions for CLI operations."""

from pathlib import Path
from typing import Optional

from gugotik.client import Client
from gugotik.config import Config
from gugotik.exceptions import (
    BackendRejectionError,
    CallbackError,
    ChunkTransportError,
    GuGoTikException,
    InvalidCallError,
)
from gugotik.logging_config import get_logger
from gugotik.services import Auth, Feed, Publish
from gugotik.types import as_payload
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
from gugotik_cli.utils import ProgressPrinter, format_file_size

logger = get_logger(__name__)

NOT_LOGGED_IN = "Not logged in. Please run: login <username> <password>"

_client: Optional[Client] = None


def get_client() -> Client:
    """
    Get or create global Client instance.

    Returns:
        Client instance
    """
    global _client
    if _client is None:
        logger.debug("Creating new Client instance")
        _client = Client(Config())
    return _client


def _session(client: Client) -> tuple[Optional[int], Optional[str]]:
    return client.config.get_user_id(), client.config.get_token()


def _format_videos(videos: list) -> str:
    if not videos:
        return "No videos found."
    output = [f"Found {len(videos)} video(s):\n"]
    for video in videos:
        author = (video.get('author') or {}).get('name', 'unknown')
        output.append(
            f"  - [{video.get('id')}] {video.get('title', '')}\n"
            f"    Author: {author}  Likes: {video.get('favorite_count', 0)}  "
            f"Comments: {video.get('comment_count', 0)}\n"
            f"    URL: {video.get('play_url', '')}"
        )
    return '\n'.join(output)


def handle_register(cmd: RegisterCommand, client: Optional[Client] = None) -> str:
    """
    Handle 'register' command.

    Args:
        cmd: RegisterCommand with username and password
        client: Optional Client for dependency injection (testing)

    Returns:
        Success or error message
    """
    if client is None:
        client = get_client()
    try:
        result = Auth(client).register(cmd.username, cmd.password)
    except GuGoTikException as e:
        return f"Registration failed: {e}"
    return f"Registration successful!\nUser ID: {result.get('user_id')}\nToken saved to config."


def handle_login(cmd: LoginCommand, client: Optional[Client] = None) -> str:
    """
    Handle 'login' command.

    Args:
        cmd: LoginCommand with username and password
        client: Optional Client for dependency injection (testing)

    Returns:
        Success or error message
    """
    if client is None:
        client = get_client()
    try:
        Auth(client).login(cmd.username, cmd.password)
    except GuGoTikException as e:
        return f"Login failed: {e}"
    return "Login successful!\nToken updated in config."


def handle_logout(cmd: LogoutCommand, client: Optional[Client] = None) -> str:
    """Handle 'logout' command."""
    if client is None:
        client = get_client()
    client.config.clear_session()
    return "Logged out."


def handle_publish(cmd: PublishCommand, client: Optional[Client] = None, stream=None) -> str:
    """
    Handle 'publish' command.

    Args:
        cmd: PublishCommand with file_path and title
        client: Optional Client for dependency injection (testing)
        stream: Optional output stream for the progress line

    Returns:
        Success or error message
    """
    logger.info(f"Executing publish command: file={cmd.file_path} title={cmd.title}")
    if client is None:
        client = get_client()

    user_id, token = _session(client)
    if not token or user_id is None:
        return f"Error: {NOT_LOGGED_IN}"

    try:
        payload = as_payload(Path(cmd.file_path))
    except InvalidCallError as e:
        return f"Error: {e}"

    printer = ProgressPrinter(payload.filename, payload.size, stream=stream)
    try:
        result = Publish(client).publish_video(user_id, token, payload, cmd.title, on_progress=printer)
    except BackendRejectionError as e:
        return f"Publish rejected by server: {e.status_msg}"
    except ChunkTransportError as e:
        where = f" at chunk {e.chunk_index + 1}" if e.chunk_index is not None else ""
        return f"Error uploading {cmd.file_path}{where}: {e}\nRun publish again to restart the upload."
    except CallbackError as e:
        return f"Upload aborted: {e}"
    except GuGoTikException as e:
        return f"Error: {e}"

    logger.debug("Publish command completed")
    return (
        f"Published: {cmd.title} ({format_file_size(payload.size)})\n"
        f"Server: {result.get('status_msg') or 'ok'}"
    )


def handle_videos(cmd: VideosCommand, client: Optional[Client] = None) -> str:
    """
    Handle 'videos' command.

    Args:
        cmd: VideosCommand with optional user_id (defaults to the logged-in user)
        client: Optional Client for dependency injection (testing)

    Returns:
        Formatted list of videos
    """
    if client is None:
        client = get_client()

    actor_id, token = _session(client)
    if not token or actor_id is None:
        return f"Error: {NOT_LOGGED_IN}"

    user_id = cmd.user_id if cmd.user_id is not None else actor_id
    try:
        result = Publish(client).list_published_videos(user_id, actor_id, token)
    except GuGoTikException as e:
        return f"Error: {e}"
    return _format_videos(result.get('video_list') or [])


def handle_feed(cmd: FeedCommand, client: Optional[Client] = None) -> str:
    """Handle 'feed' command."""
    if client is None:
        client = get_client()
    actor_id, _ = _session(client)
    try:
        result = Feed(client).list_videos(actor_id=actor_id)
    except GuGoTikException as e:
        return f"Error: {e}"
    return _format_videos(result.get('video_list') or [])


def handle_delete_video(cmd: DeleteVideoCommand, client: Optional[Client] = None) -> str:
    """Handle 'delete-video' command."""
    if client is None:
        client = get_client()

    actor_id, token = _session(client)
    if not token or actor_id is None:
        return f"Error: {NOT_LOGGED_IN}"

    try:
        Publish(client).delete_video(actor_id, cmd.video_id, token)
    except GuGoTikException as e:
        return f"Error: {e}"
    return f"Deleted video {cmd.video_id}."


def handle_endpoint(cmd: EndpointCommand, client: Optional[Client] = None) -> str:
    """
    Handle 'endpoint' command.

    Without a URL shows the configured backend. With one, saves it; the
    shared client is recreated so later commands use the new URL.

    Args:
        cmd: EndpointCommand with optional url
        client: Optional Client for dependency injection (testing)

    Returns:
        Current or updated endpoint message
    """
    global _client
    if client is None:
        client = get_client()

    if cmd.url is None:
        return f"Endpoint: {client.config.get_endpoint()}"

    client.config.set_endpoint(cmd.url)
    logger.info(f"Endpoint changed to {client.config.get_endpoint()}")
    if client is _client:
        _client.close()
        _client = None
    return f"Endpoint set to {client.config.get_endpoint()}"
