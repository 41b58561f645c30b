"""Utility functions for CLI output."""

import sys

from gugotik.types import ProgressSnapshot
from gugotik_cli.constants import GREEN, PROGRESS_BAR_WIDTH, RESET


class ProgressPrinter:
    """Progress callback that redraws one status line on stdout."""

    def __init__(self, filename: str, total_size: int, stream=None):
        """
        Initialize the progress printer.

        Args:
            filename: Display name for the file
            total_size: Total payload size in bytes
            stream: Output stream (defaults to sys.stdout)
        """
        self.filename = filename
        self.total_size = total_size
        self.stream = stream or sys.stdout

    def __call__(self, snapshot: ProgressSnapshot) -> None:
        self.stream.write(
            f"\rUploading {self.filename}: {render_progress_bar(snapshot.progress)} "
            f"{format_file_size(snapshot.size_uploaded)} / {format_file_size(self.total_size)} "
            f"({GREEN}{snapshot.progress}%{RESET}, chunk {snapshot.chunks_uploaded}/{snapshot.chunks_total})"
        )
        if snapshot.progress >= 100:
            self.stream.write('\n')
        self.stream.flush()


def render_progress_bar(percentage: int, width: int = PROGRESS_BAR_WIDTH) -> str:
    """
    Render a fixed-width text progress bar.

    Args:
        percentage: 0..100
        width: Number of cells

    Returns:
        e.g. "[██████░░░░]"
    """
    filled = round(percentage / 100 * width)
    filled = max(0, min(width, filled))
    return '[' + '█' * filled + '░' * (width - filled) + ']'


def format_file_size(size_bytes: int) -> str:
    """
    Format file size in bytes to human-readable format with appropriate unit.

    Uses binary units (1024-based) and automatically selects the most
    appropriate unit (B, KiB, MiB, GiB, TiB).

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string with size and unit (e.g., "1.50 MiB", "512 B")
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"

    units = ['KiB', 'MiB', 'GiB', 'TiB']
    size = size_bytes / 1024.0

    for unit in units:
        if size < 1024.0:
            return f"{size:.2f} {unit}"
        size /= 1024.0

    return f"{size:.2f} PiB"
