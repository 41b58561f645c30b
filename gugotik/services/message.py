"""Direct messages."""

from typing import Optional

from gugotik.constants import ACTION_ADD, MESSAGE_ACTION_PATH, MESSAGE_CHAT_PATH
from gugotik.services.base import Service, require


class MessageService(Service):

    def send_message(self, to_user_id: int, actor_id: int, token: str, content: str) -> dict:
        require(toUserId=to_user_id, actorId=actor_id, token=token, content=content)
        return self.client.call(
            'POST', MESSAGE_ACTION_PATH,
            data={
                'to_user_id': to_user_id,
                'actor_id': actor_id,
                'token': token,
                'action_type': ACTION_ADD,
                'content': content,
            },
        )

    def list_messages(
        self,
        to_user_id: int,
        actor_id: int,
        token: str,
        pre_msg_time: Optional[int] = None,
    ) -> dict:
        """List the chat with another user, newer than pre_msg_time if given."""
        require(toUserId=to_user_id, actorId=actor_id, token=token)
        return self.client.call(
            'GET', MESSAGE_CHAT_PATH,
            params={
                'to_user_id': to_user_id,
                'actor_id': actor_id,
                'token': token,
                'pre_msg_time': pre_msg_time,
            },
        )
