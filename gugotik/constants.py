"""SDK-wide constants (chunk size, API paths, wire header names)."""

CHUNK_SIZE: int = 5 * 1024 * 1024  # 5 MiB default chunk size

# Backend keeps partially uploaded chunks for about an hour.
UPLOAD_SESSION_TTL_SECONDS: int = 60 * 60

DEFAULT_ENDPOINT: str = "http://localhost:37000"
DEFAULT_CONFIG_PATH: str = "~/.gugotik/config.json"

CONTENT_RANGE_HEADER: str = "Content-Range"
UPLOAD_ID_HEADER: str = "X-Upload-Id"
REQUEST_ID_HEADER: str = "X-Request-ID"

DEFAULT_UPLOAD_FILENAME: str = "video.mp4"
DEFAULT_MIME_TYPE: str = "application/octet-stream"

STATUS_OK: int = 0

# Action types shared by favorite/comment/message endpoints
ACTION_ADD: int = 1
ACTION_REMOVE: int = 2

PUBLISH_ACTION_PATH: str = "/douyin/publish/action/"
PUBLISH_LIST_PATH: str = "/douyin/publish/list/"
FEED_PATH: str = "/douyin/feed/"
LOGIN_PATH: str = "/douyin/user/login/"
REGISTER_PATH: str = "/douyin/user/register/"
USER_PATH: str = "/douyin/user/"
FAVORITE_ACTION_PATH: str = "/douyin/favorite/action/"
FAVORITE_LIST_PATH: str = "/douyin/favorite/list/"
COMMENT_PATH: str = "/douyin/comment/{video_id}/"
COMMENT_LIST_PATH: str = "/douyin/comment/{video_id}/list/"
COMMENT_COUNT_PATH: str = "/douyin/comment/{video_id}/count/"
RELATION_FOLLOW_PATH: str = "/douyin/relation/follow/"
RELATION_UNFOLLOW_PATH: str = "/douyin/relation/unfollow/"
RELATION_FOLLOW_LIST_PATH: str = "/douyin/relation/follow/list/"
RELATION_FOLLOWER_LIST_PATH: str = "/douyin/relation/follower/list/"
RELATION_FRIEND_LIST_PATH: str = "/douyin/relation/friend/list/"
RELATION_IS_FOLLOW_PATH: str = "/douyin/relation/isFollow/"
MESSAGE_ACTION_PATH: str = "/douyin/message/action/"
MESSAGE_CHAT_PATH: str = "/douyin/message/chat/"
STORAGE_UPLOAD_PATH: str = "/douyin/storage/upload/"
