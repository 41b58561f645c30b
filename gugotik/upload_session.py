"""Chunked upload of a single payload to the GuGoTik backend."""

import time
from typing import Callable, Optional

import httpx
from pydantic import ValidationError

from gugotik.chunk_planner import plan
from gugotik.client import Client
from gugotik.constants import (
    CONTENT_RANGE_HEADER,
    PUBLISH_ACTION_PATH,
    STATUS_OK,
    UPLOAD_ID_HEADER,
    UPLOAD_SESSION_TTL_SECONDS,
)
from gugotik.exceptions import (
    BackendRejectionError,
    CallbackError,
    ChunkTransportError,
    InvalidCallError,
    UploadExpiredError,
)
from gugotik.logging_config import get_logger
from gugotik.schemas import ChunkAck, StatusResponse
from gugotik.types import (
    ChunkRange,
    Payload,
    ProgressSnapshot,
    UploadMetadata,
    UploadPlan,
    UploadSessionState,
    as_payload,
)

logger = get_logger(__name__)

ProgressCallback = Callable[[ProgressSnapshot], None]


class ChunkedUploadSession:
    """
    Delivers one payload to the backend as a sequence of bounded chunks.

    Chunks are sent strictly in order, one request at a time: every chunk
    after the first must carry the continuation identifier the backend
    issued for the previous one. Local counters always mirror the server's
    last acknowledgement.

    A failed chunk is never re-sent; the whole run fails with one error and
    the caller decides whether to start over. A session object runs one
    upload at a time.
    """

    def __init__(
        self,
        client: Client,
        path: str = PUBLISH_ACTION_PATH,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the upload session.

        Args:
            client: Client used for the transport calls
            path: Upload endpoint
            clock: Monotonic clock used for the expiry horizon
        """
        self.client = client
        self.path = path
        self.clock = clock
        self._running = False

    def run(
        self,
        payload,
        metadata: UploadMetadata,
        chunk_size: Optional[int] = None,
        on_progress: Optional[ProgressCallback] = None,
    ) -> dict:
        """
        Upload a payload and return the backend's terminal result.

        Args:
            payload: bytes, RawBytes/NamedBlob, or a Path
            metadata: actor, token and title sent with every chunk
            chunk_size: Chunk width in bytes (config default if None)
            on_progress: Called with a ProgressSnapshot after each acknowledged chunk

        Returns:
            Terminal response body, exactly as received

        Raises:
            InvalidCallError: Missing argument; raised before any request
            ChunkTransportError: A chunk request failed
            BackendRejectionError: The backend refused the upload
            CallbackError: on_progress raised
        """
        if self._running:
            raise InvalidCallError("Upload session is already running")

        payload = as_payload(payload)
        self._validate(metadata)

        if chunk_size is None:
            chunk_size = self.client.config.get_chunk_size()
        if chunk_size <= 0:
            raise InvalidCallError(f"chunk_size must be positive, got {chunk_size}")

        self._running = True
        try:
            if payload.size <= chunk_size and on_progress is None:
                return self._upload_whole(payload, metadata)
            return self._upload_chunked(payload, metadata, chunk_size, on_progress)
        finally:
            self._running = False

    def _validate(self, metadata: Optional[UploadMetadata]) -> None:
        """Reject missing call parameters before any network activity."""
        if metadata is None:
            raise InvalidCallError("Missing upload metadata")
        if metadata.actor_id is None:
            raise InvalidCallError('Missing required parameter: "actorId"')
        if not metadata.token:
            raise InvalidCallError('Missing required parameter: "token"')
        if metadata.title is None:
            raise InvalidCallError('Missing required parameter: "title"')

    def _upload_whole(self, payload: Payload, metadata: UploadMetadata) -> dict:
        logger.info(f"Uploading {payload.filename} in a single request ({payload.size} bytes)")
        return self._send(payload, payload.data, metadata, headers={}, chunk=None)

    def _upload_chunked(
        self,
        payload: Payload,
        metadata: UploadMetadata,
        chunk_size: int,
        on_progress: Optional[ProgressCallback],
    ) -> dict:
        upload_plan = plan(payload.size, chunk_size)
        state = UploadSessionState(chunks_total=len(upload_plan), started_at=self.clock())

        logger.info(
            f"Uploading {payload.filename} in {len(upload_plan)} chunk(s) "
            f"[size={payload.size}, chunk_size={chunk_size}]"
        )

        result = {}
        for chunk in upload_plan:
            state.current_range_index = chunk.index
            self._check_expiry(state, chunk)

            headers = {CONTENT_RANGE_HEADER: chunk.header_value}
            if state.continuation_id:
                headers[UPLOAD_ID_HEADER] = state.continuation_id

            body = payload.data[chunk.start:chunk.end + 1]
            result = self._send(payload, body, metadata, headers=headers, chunk=chunk)

            if chunk.is_last:
                self._adopt_terminal(state, upload_plan)
            else:
                self._adopt_ack(state, result, chunk)

            snapshot = ProgressSnapshot.from_counters(
                size_uploaded=state.bytes_uploaded,
                total_size=upload_plan.total_size,
                chunks_uploaded=state.chunks_uploaded,
                chunks_total=state.chunks_total,
                terminal=chunk.is_last,
            )
            logger.debug(
                f"Chunk {chunk.index + 1}/{state.chunks_total} acknowledged "
                f"[{chunk.header_value}, progress={snapshot.progress}%]"
            )
            self._notify(on_progress, snapshot)

        logger.info(f"Upload of {payload.filename} complete")
        return result

    def _check_expiry(self, state: UploadSessionState, chunk: ChunkRange) -> None:
        if chunk.index == 0:
            return
        elapsed = self.clock() - state.started_at
        if elapsed > UPLOAD_SESSION_TTL_SECONDS:
            logger.error(f"Upload expired after {elapsed:.0f}s at chunk {chunk.index}")
            raise UploadExpiredError(
                f"Upload exceeded the backend's {UPLOAD_SESSION_TTL_SECONDS}s chunk retention; "
                f"restart the upload",
                chunk_index=chunk.index,
            )

    def _send(
        self,
        payload: Payload,
        body: bytes,
        metadata: UploadMetadata,
        headers: dict,
        chunk: Optional[ChunkRange],
    ) -> dict:
        """
        Perform one transport call and return its decoded body.

        Raises:
            ChunkTransportError: Network failure, HTTP error or malformed body
            BackendRejectionError: Well-formed body with a non-zero status_code
        """
        chunk_index = chunk.index if chunk is not None else None
        files = {'data': (payload.filename, body, payload.mime_type)}

        try:
            response = self.client.send_form(
                self.path,
                data=metadata.as_form(),
                files=files,
                headers=headers,
                timeout=self.client.calculate_upload_timeout(len(body)),
            )
        except httpx.HTTPError as e:
            logger.warning(f"Chunk {chunk_index} transport failed: {type(e).__name__}: {e}")
            raise ChunkTransportError(
                f"Chunk upload failed: {type(e).__name__}: {e}", chunk_index=chunk_index
            ) from e

        if not response.is_success:
            logger.warning(f"Chunk {chunk_index} rejected with HTTP {response.status_code}")
            raise ChunkTransportError(
                f"Chunk upload failed with HTTP {response.status_code}",
                chunk_index=chunk_index,
                status_code=response.status_code,
                response=response.text,
            )

        try:
            result = response.json()
            status = StatusResponse.model_validate(result)
        except (ValueError, ValidationError) as e:
            raise ChunkTransportError(
                f"Malformed response for chunk {chunk_index}: {e}",
                chunk_index=chunk_index,
                response=response.text,
            ) from e

        if status.status_code != STATUS_OK:
            logger.warning(f"Backend rejected chunk {chunk_index}: {status.status_msg}")
            raise BackendRejectionError(
                status.status_msg or "Upload rejected by backend",
                status_code=status.status_code,
                status_msg=status.status_msg,
            )

        return result

    def _adopt_ack(self, state: UploadSessionState, result: dict, chunk: ChunkRange) -> None:
        """Replace session state with the counters the server acknowledged."""
        try:
            ack = ChunkAck.model_validate(result)
        except ValidationError as e:
            raise ChunkTransportError(
                f"Malformed acknowledgement for chunk {chunk.index}: {e}", chunk_index=chunk.index
            ) from e

        if not ack.upload_id and not state.continuation_id:
            raise ChunkTransportError(
                f"Backend did not issue an upload id for chunk {chunk.index}", chunk_index=chunk.index
            )
        if ack.size_uploaded < state.bytes_uploaded or ack.chunks_uploaded < state.chunks_uploaded:
            raise ChunkTransportError(
                f"Acknowledged counters went backwards at chunk {chunk.index}", chunk_index=chunk.index
            )

        state.adopt(ack.upload_id, ack.chunks_uploaded, ack.size_uploaded, ack.chunks_total)

    def _adopt_terminal(self, state: UploadSessionState, upload_plan: UploadPlan) -> None:
        """A successful terminal response confirms the whole payload was assembled."""
        state.adopt(None, len(upload_plan), upload_plan.total_size, len(upload_plan))

    def _notify(self, on_progress: Optional[ProgressCallback], snapshot: ProgressSnapshot) -> None:
        if on_progress is None:
            return
        try:
            on_progress(snapshot)
        except Exception as e:
            logger.warning(f"Progress callback raised {type(e).__name__}; aborting upload")
            raise CallbackError(f"Progress callback failed: {e}") from e
