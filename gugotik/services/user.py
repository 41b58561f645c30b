"""User profile lookup."""

from gugotik.constants import USER_PATH
from gugotik.services.base import Service, require


class UserService(Service):

    def get_user(self, user_id: int, actor_id: int, token: str) -> dict:
        """Get a user's profile. Returns {status_code, status_msg, user}."""
        require(userId=user_id, actorId=actor_id, token=token)
        return self.client.call(
            'GET', USER_PATH,
            params={'user_id': user_id, 'actor_id': actor_id, 'token': token},
        )
