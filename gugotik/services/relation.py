"""Follow relations between users."""

from gugotik.constants import (
    RELATION_FOLLOW_LIST_PATH,
    RELATION_FOLLOW_PATH,
    RELATION_FOLLOWER_LIST_PATH,
    RELATION_FRIEND_LIST_PATH,
    RELATION_IS_FOLLOW_PATH,
    RELATION_UNFOLLOW_PATH,
)
from gugotik.services.base import Service, require


class Relation(Service):

    def follow(self, user_id: int, actor_id: int, token: str) -> dict:
        require(userId=user_id, actorId=actor_id, token=token)
        return self.client.call(
            'POST', RELATION_FOLLOW_PATH,
            data={'to_user_id': user_id, 'actor_id': actor_id, 'token': token},
        )

    def unfollow(self, user_id: int, actor_id: int, token: str) -> dict:
        require(userId=user_id, actorId=actor_id, token=token)
        return self.client.call(
            'POST', RELATION_UNFOLLOW_PATH,
            data={'to_user_id': user_id, 'actor_id': actor_id, 'token': token},
        )

    def get_follow_list(self, user_id: int, actor_id: int, token: str) -> dict:
        return self._list(RELATION_FOLLOW_LIST_PATH, user_id, actor_id, token)

    def get_follower_list(self, user_id: int, actor_id: int, token: str) -> dict:
        return self._list(RELATION_FOLLOWER_LIST_PATH, user_id, actor_id, token)

    def get_friend_list(self, user_id: int, actor_id: int, token: str) -> dict:
        return self._list(RELATION_FRIEND_LIST_PATH, user_id, actor_id, token)

    def is_following(self, user_id: int, actor_id: int, token: str) -> dict:
        """Returns {status_code, status_msg, result}."""
        return self._list(RELATION_IS_FOLLOW_PATH, user_id, actor_id, token)

    def _list(self, path: str, user_id: int, actor_id: int, token: str) -> dict:
        require(userId=user_id, actorId=actor_id, token=token)
        return self.client.call(
            'GET', path,
            params={'user_id': user_id, 'actor_id': actor_id, 'token': token},
        )
