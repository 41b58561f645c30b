"""Video publishing: chunked upload plus listing and deletion."""

from typing import Optional

from gugotik.constants import PUBLISH_ACTION_PATH, PUBLISH_LIST_PATH
from gugotik.logging_config import get_logger
from gugotik.services.base import Service, require
from gugotik.types import UploadMetadata, as_payload
from gugotik.upload_session import ChunkedUploadSession, ProgressCallback

logger = get_logger(__name__)


class Publish(Service):

    def publish_video(
        self,
        actor_id: int,
        token: str,
        data,
        title: str,
        on_progress: Optional[ProgressCallback] = None,
        chunk_size: Optional[int] = None,
    ) -> dict:
        """
        Upload and publish a new video.

        Payloads larger than chunk_size, or any upload with on_progress set,
        are sent in chunks; everything else goes in one request. Nothing is
        retried: on failure call again to start a fresh upload.

        Args:
            actor_id: Current user ID
            token: Authentication token
            data: Video as bytes, RawBytes/NamedBlob, or a Path
            title: Video title
            on_progress: Called with a ProgressSnapshot after each acknowledged chunk
            chunk_size: Chunk width in bytes (config default, 5 MiB, if None)

        Returns:
            {status_code, status_msg, ...} as returned for the final chunk

        Raises:
            InvalidCallError: Missing argument
            ChunkTransportError: A chunk request failed
            BackendRejectionError: The backend refused the upload
            CallbackError: on_progress raised
        """
        require(actorId=actor_id, token=token, data=data, title=title)
        payload = as_payload(data)
        metadata = UploadMetadata(actor_id=actor_id, token=token, title=title)

        logger.info(f"Publishing video '{title}' for actor {actor_id} ({payload.size} bytes)")
        session = ChunkedUploadSession(self.client, path=PUBLISH_ACTION_PATH)
        return session.run(payload, metadata, chunk_size=chunk_size, on_progress=on_progress)

    def list_published_videos(self, user_id: int, actor_id: int, token: str) -> dict:
        """List videos published by a user. Returns {status_code, status_msg, video_list}."""
        require(userId=user_id, actorId=actor_id, token=token)
        return self.client.call(
            'GET', PUBLISH_LIST_PATH,
            params={'user_id': user_id, 'actor_id': actor_id, 'token': token},
        )

    def delete_video(self, actor_id: int, video_id: int, token: str) -> dict:
        """Delete a video by its ID (owner only)."""
        require(actorId=actor_id, videoId=video_id, token=token)
        return self.client.call(
            'DELETE', PUBLISH_ACTION_PATH,
            params={'actor_id': actor_id, 'video_id': video_id, 'token': token},
        )
