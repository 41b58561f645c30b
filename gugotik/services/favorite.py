"""Likes."""

from gugotik.constants import ACTION_ADD, ACTION_REMOVE, FAVORITE_ACTION_PATH, FAVORITE_LIST_PATH
from gugotik.services.base import Service, require


class Favorite(Service):

    def like_video(self, video_id: int, actor_id: int, token: str) -> dict:
        require(videoId=video_id, actorId=actor_id, token=token)
        return self._action(video_id, actor_id, token, ACTION_ADD)

    def unlike_video(self, video_id: int, actor_id: int, token: str) -> dict:
        require(videoId=video_id, actorId=actor_id, token=token)
        return self._action(video_id, actor_id, token, ACTION_REMOVE)

    def list_favorites(self, user_id: int, actor_id: int, token: str) -> dict:
        """List videos a user liked. Returns {status_code, status_msg, video_list}."""
        require(userId=user_id, actorId=actor_id, token=token)
        return self.client.call(
            'GET', FAVORITE_LIST_PATH,
            params={'user_id': user_id, 'actor_id': actor_id, 'token': token},
        )

    def _action(self, video_id: int, actor_id: int, token: str, action_type: int) -> dict:
        return self.client.call(
            'POST', FAVORITE_ACTION_PATH,
            data={
                'video_id': video_id,
                'actor_id': actor_id,
                'token': token,
                'action_type': action_type,
            },
        )
