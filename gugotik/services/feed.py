"""Recommended video feed."""

from typing import Optional

from gugotik.constants import FEED_PATH
from gugotik.services.base import Service


class Feed(Service):

    def list_videos(self, latest_time: Optional[str] = None, actor_id: Optional[int] = None) -> dict:
        """
        Get the recommended video feed.

        Args:
            latest_time: Pagination cursor (next_time of the previous page)
            actor_id: Current user ID, if logged in

        Returns:
            {status_code, status_msg, next_time, video_list}
        """
        return self.client.call(
            'GET', FEED_PATH,
            params={'latest_time': latest_time, 'actor_id': actor_id},
        )
