"""REPL with prompt_toolkit for user interaction."""

import os
import sys
from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import InMemoryHistory

from gugotik_cli.commands import (
    handle_delete_video,
    handle_endpoint,
    handle_feed,
    handle_login,
    handle_logout,
    handle_publish,
    handle_register,
    handle_videos,
)
from gugotik_cli.constants import (
    COMMANDS,
    HELP_TEXT,
    PROMPT_TEXT,
    STYLE,
    WELCOME_HELP,
    WELCOME_TITLE,
)
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


def clear_screen() -> None:
    """Clear the terminal screen (cross-platform)."""
    if sys.platform == "win32":
        os.system("cls")
    else:
        os.system("clear")


def show_welcome() -> None:
    print(WELCOME_TITLE)
    print(WELCOME_HELP)


def dispatch_command(cmd_obj) -> str:
    """Dispatch parsed command to appropriate handler."""
    if isinstance(cmd_obj, RegisterCommand):
        return handle_register(cmd_obj)
    elif isinstance(cmd_obj, LoginCommand):
        return handle_login(cmd_obj)
    elif isinstance(cmd_obj, LogoutCommand):
        return handle_logout(cmd_obj)
    elif isinstance(cmd_obj, PublishCommand):
        return handle_publish(cmd_obj)
    elif isinstance(cmd_obj, VideosCommand):
        return handle_videos(cmd_obj)
    elif isinstance(cmd_obj, FeedCommand):
        return handle_feed(cmd_obj)
    elif isinstance(cmd_obj, DeleteVideoCommand):
        return handle_delete_video(cmd_obj)
    elif isinstance(cmd_obj, EndpointCommand):
        return handle_endpoint(cmd_obj)
    else:
        return f"Unknown command type: {type(cmd_obj)}"


def repl_loop() -> None:
    """Start interactive REPL with prompt_toolkit."""
    completer = WordCompleter(COMMANDS, ignore_case=True)
    history = InMemoryHistory()
    session: PromptSession = PromptSession(
        completer=completer, history=history, style=STYLE
    )

    clear_screen()
    show_welcome()

    while True:
        try:
            user_input = session.prompt([("class:prompt", PROMPT_TEXT)])

            if not user_input.strip():
                continue

            if user_input.strip() == "exit":
                print("Goodbye!")
                break

            if user_input.strip() == "help":
                print(HELP_TEXT)
                continue

            if user_input.strip() == "clear":
                clear_screen()
                show_welcome()
                continue

            cmd_obj = parse_command(user_input)
            result = dispatch_command(cmd_obj)
            print(result)

        except ParseError as e:
            print(f"Error: {e}")
        except KeyboardInterrupt:
            continue
        except EOFError:
            print("\nGoodbye!")
            break
