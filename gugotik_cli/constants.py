"""CLI constants and configuration."""

from prompt_toolkit.styles import Style

COMMANDS = ["register", "login", "logout", "publish", "videos", "feed", "delete-video", "endpoint", "clear", "exit", "help"]

STYLE = Style.from_dict(
    {
        "prompt": "#FE2C55 bold",
        "command": "#25F4EE bold",
    }
)

PINK = "\033[38;2;254;44;85m"
GREEN = "\033[32m"
RESET = "\033[0m"

WELCOME_TITLE = f"{PINK}GuGoTik CLI{RESET} - video publishing client"
WELCOME_HELP = "Type 'help' for commands or 'exit' to quit.\n"

PROMPT_TEXT = "gugotik> "

PROGRESS_BAR_WIDTH = 30

HELP_TEXT = """Available commands:
  register <username> <password>      Register new user account
  login <username> <password>         Login and store token
  logout                              Forget stored token
  publish <file> <title...>           Upload a video in chunks with progress
  videos [user_id]                    List videos published by a user (default: you)
  feed                                Show the recommended feed
  delete-video <video_id>             Delete one of your videos
  endpoint [url]                      Show or change the backend URL
  clear                               Clear screen and redisplay welcome message
  help                                Show this help
  exit                                Exit REPL

Examples:
  register alice mypassword123
  login alice mypassword123
  publish videos/holiday.mp4 "Summer holiday"
  videos
  delete-video 42
  endpoint http://localhost:37000"""
