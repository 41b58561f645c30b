"""Splits a payload size into the ordered byte ranges of an upload."""

from gugotik.exceptions import InvalidCallError
from gugotik.types import ChunkRange, UploadPlan


def plan(total_size: int, chunk_size: int) -> UploadPlan:
    """
    Build the upload plan for a payload.

    An empty payload still yields one zero-length range so that the backend
    always receives at least one request for the upload.

    Args:
        total_size: Payload size in bytes (may be 0)
        chunk_size: Maximum bytes per chunk

    Returns:
        UploadPlan with ceil(total_size / chunk_size) ranges

    Raises:
        InvalidCallError: If chunk_size is not positive or total_size is negative
    """
    if chunk_size <= 0:
        raise InvalidCallError(f"chunk_size must be positive, got {chunk_size}")
    if total_size < 0:
        raise InvalidCallError(f"total_size must not be negative, got {total_size}")

    if total_size == 0:
        empty = ChunkRange(start=0, end=-1, total_size=0, index=0)
        return UploadPlan(ranges=(empty,), total_size=0, chunk_size=chunk_size)

    ranges = []
    for index, start in enumerate(range(0, total_size, chunk_size)):
        end = min(start + chunk_size, total_size) - 1
        ranges.append(ChunkRange(start=start, end=end, total_size=total_size, index=index))

    return UploadPlan(ranges=tuple(ranges), total_size=total_size, chunk_size=chunk_size)
