"""Video comments."""

from gugotik.constants import (
    ACTION_ADD,
    ACTION_REMOVE,
    COMMENT_COUNT_PATH,
    COMMENT_LIST_PATH,
    COMMENT_PATH,
)
from gugotik.services.base import Service, require


class CommentService(Service):

    def add_comment(self, video_id: int, actor_id: int, token: str, comment_text: str) -> dict:
        """Post a comment. Returns {status_code, status_msg, comment}."""
        require(videoId=video_id, actorId=actor_id, token=token, commentText=comment_text)
        return self.client.call(
            'POST', COMMENT_PATH.format(video_id=video_id),
            data={
                'video_id': video_id,
                'actor_id': actor_id,
                'token': token,
                'action_type': ACTION_ADD,
                'comment_text': comment_text,
            },
        )

    def delete_comment(self, video_id: int, actor_id: int, token: str, comment_id: int) -> dict:
        require(videoId=video_id, actorId=actor_id, token=token, commentId=comment_id)
        return self.client.call(
            'POST', COMMENT_PATH.format(video_id=video_id),
            data={
                'video_id': video_id,
                'actor_id': actor_id,
                'token': token,
                'action_type': ACTION_REMOVE,
                'comment_id': comment_id,
            },
        )

    def list_comments(self, video_id: int, actor_id: int, token: str) -> dict:
        require(videoId=video_id, actorId=actor_id, token=token)
        return self.client.call(
            'GET', COMMENT_LIST_PATH.format(video_id=video_id),
            params={'video_id': video_id, 'actor_id': actor_id, 'token': token},
        )

    def count_comments(self, video_id: int, actor_id: int, token: str) -> dict:
        require(videoId=video_id, actorId=actor_id, token=token)
        return self.client.call(
            'GET', COMMENT_COUNT_PATH.format(video_id=video_id),
            params={'video_id': video_id, 'actor_id': actor_id, 'token': token},
        )
