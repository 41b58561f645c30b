"""Shared data type definitions (ChunkRange, UploadPlan, Payload, etc.)."""

import mimetypes
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple, Union

from gugotik.constants import DEFAULT_MIME_TYPE, DEFAULT_UPLOAD_FILENAME
from gugotik.exceptions import InvalidCallError


@dataclass(frozen=True)
class ChunkRange:
    """
    One contiguous slice of the payload, with inclusive byte offsets.

    The degenerate range of an empty payload is start=0, end=-1.
    """
    start: int
    end: int
    total_size: int
    index: int

    @property
    def length(self) -> int:
        return self.end - self.start + 1

    @property
    def header_value(self) -> str:
        """Content-Range header value for this slice."""
        if self.length == 0:
            return f"bytes */{self.total_size}"
        return f"bytes {self.start}-{self.end}/{self.total_size}"

    @property
    def is_last(self) -> bool:
        return self.end >= self.total_size - 1


@dataclass(frozen=True)
class UploadPlan:
    """
    Ordered, immutable sequence of ranges covering the whole payload.
    """
    ranges: Tuple[ChunkRange, ...]
    total_size: int
    chunk_size: int

    def __len__(self) -> int:
        return len(self.ranges)

    def __iter__(self):
        return iter(self.ranges)

    def __getitem__(self, index: int) -> ChunkRange:
        return self.ranges[index]


@dataclass(frozen=True)
class ProgressSnapshot:
    """Point-in-time upload progress derived from server-acknowledged state."""
    progress: int
    size_uploaded: int
    chunks_uploaded: int
    chunks_total: int

    @classmethod
    def from_counters(
        cls,
        size_uploaded: int,
        total_size: int,
        chunks_uploaded: int,
        chunks_total: int,
        terminal: bool = False,
    ) -> "ProgressSnapshot":
        if terminal or total_size <= 0:
            progress = 100
        else:
            progress = min(100, max(0, size_uploaded * 100 // total_size))
        return cls(
            progress=progress,
            size_uploaded=size_uploaded,
            chunks_uploaded=chunks_uploaded,
            chunks_total=chunks_total,
        )


@dataclass
class UploadSessionState:
    """
    Mutable per-upload state, owned by exactly one running session.

    Counters are only ever assigned from a server acknowledgement.
    """
    chunks_total: int
    started_at: float
    continuation_id: Optional[str] = None
    bytes_uploaded: int = 0
    chunks_uploaded: int = 0
    current_range_index: int = 0

    def adopt(self, continuation_id: Optional[str], chunks_uploaded: int,
              bytes_uploaded: int, chunks_total: Optional[int] = None) -> None:
        """Replace local state with the server's last acknowledgement."""
        if continuation_id:
            self.continuation_id = continuation_id
        self.chunks_uploaded = chunks_uploaded
        self.bytes_uploaded = bytes_uploaded
        if chunks_total:
            self.chunks_total = chunks_total


@dataclass(frozen=True)
class UploadMetadata:
    """Fields attached identically to every chunk request."""
    actor_id: int
    token: str
    title: str

    def as_form(self) -> dict:
        return {
            'actor_id': str(self.actor_id),
            'token': self.token,
            'title': self.title,
        }


@dataclass(frozen=True)
class RawBytes:
    """Payload given as plain bytes."""
    data: bytes
    filename: str = DEFAULT_UPLOAD_FILENAME
    mime_type: str = DEFAULT_MIME_TYPE

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class NamedBlob:
    """Payload with an explicit mime type and file name."""
    data: bytes
    mime_type: str
    filename: str = field(default=DEFAULT_UPLOAD_FILENAME)

    @property
    def size(self) -> int:
        return len(self.data)


Payload = Union[RawBytes, NamedBlob]


def as_payload(value) -> Payload:
    """
    Normalize whatever the caller handed in into a Payload.

    Args:
        value: bytes-like object, an existing RawBytes/NamedBlob, or a Path

    Returns:
        RawBytes or NamedBlob

    Raises:
        InvalidCallError: If value is missing or of an unsupported type
    """
    if value is None:
        raise InvalidCallError('Missing required parameter: "data"')
    if isinstance(value, (RawBytes, NamedBlob)):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return RawBytes(bytes(value))
    if isinstance(value, Path):
        if not value.is_file():
            raise InvalidCallError(f"File not found: {value}")
        mime_type, _ = mimetypes.guess_type(value.name)
        return NamedBlob(
            data=value.read_bytes(),
            mime_type=mime_type or DEFAULT_MIME_TYPE,
            filename=value.name,
        )
    raise InvalidCallError(
        f"Unsupported payload type: {type(value).__name__}"
    )
