"""GuGoTik SDK: API client with chunked video upload."""

__version__ = "0.1.0"

from gugotik.chunk_planner import plan
from gugotik.client import Client
from gugotik.config import Config
from gugotik.constants import CHUNK_SIZE
from gugotik.exceptions import (
    ApiRequestError,
    BackendRejectionError,
    CallbackError,
    ChunkTransportError,
    GuGoTikException,
    InvalidCallError,
    UploadExpiredError,
)
from gugotik.services import (
    Auth,
    CommentService,
    Favorite,
    Feed,
    GuGoTikStorage,
    MessageService,
    Publish,
    Relation,
    UserService,
)
from gugotik.types import (
    ChunkRange,
    NamedBlob,
    ProgressSnapshot,
    RawBytes,
    UploadMetadata,
    UploadPlan,
    as_payload,
)
from gugotik.upload_session import ChunkedUploadSession

__all__ = [
    "CHUNK_SIZE",
    "ApiRequestError",
    "Auth",
    "BackendRejectionError",
    "CallbackError",
    "ChunkRange",
    "ChunkTransportError",
    "ChunkedUploadSession",
    "Client",
    "CommentService",
    "Config",
    "Favorite",
    "Feed",
    "GuGoTikException",
    "GuGoTikStorage",
    "InvalidCallError",
    "MessageService",
    "NamedBlob",
    "ProgressSnapshot",
    "Publish",
    "RawBytes",
    "Relation",
    "UploadExpiredError",
    "UploadMetadata",
    "UploadPlan",
    "UserService",
    "as_payload",
    "plan",
]
