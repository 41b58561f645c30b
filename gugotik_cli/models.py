"""Command request data types for CLI."""

from dataclasses import dataclass
from typing import Literal, Optional


@dataclass(frozen=True)
class RegisterCommand:
    """Register a new user account."""

    username: str
    password: str
    command: Literal["register"] = "register"


@dataclass(frozen=True)
class LoginCommand:
    """Login with username and password."""

    username: str
    password: str
    command: Literal["login"] = "login"


@dataclass(frozen=True)
class LogoutCommand:
    """Forget the stored session."""

    command: Literal["logout"] = "logout"


@dataclass(frozen=True)
class PublishCommand:
    """Upload and publish a video file."""

    file_path: str
    title: str
    command: Literal["publish"] = "publish"


@dataclass(frozen=True)
class VideosCommand:
    """List videos published by a user."""

    user_id: Optional[int] = None
    command: Literal["videos"] = "videos"


@dataclass(frozen=True)
class FeedCommand:
    """Show the recommended feed."""

    command: Literal["feed"] = "feed"


@dataclass(frozen=True)
class DeleteVideoCommand:
    """Delete a published video."""

    video_id: int
    command: Literal["delete-video"] = "delete-video"


@dataclass(frozen=True)
class EndpointCommand:
    """Show or change the backend URL."""

    url: Optional[str] = None
    command: Literal["endpoint"] = "endpoint"


CommandRequest = (
    RegisterCommand
    | LoginCommand
    | LogoutCommand
    | PublishCommand
    | VideosCommand
    | FeedCommand
    | DeleteVideoCommand
    | EndpointCommand
)
