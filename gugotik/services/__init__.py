from gugotik.services.auth import Auth
from gugotik.services.comment import CommentService
from gugotik.services.favorite import Favorite
from gugotik.services.feed import Feed
from gugotik.services.message import MessageService
from gugotik.services.publish import Publish
from gugotik.services.relation import Relation
from gugotik.services.storage import GuGoTikStorage
from gugotik.services.user import UserService

__all__ = [
    "Auth",
    "CommentService",
    "Favorite",
    "Feed",
    "GuGoTikStorage",
    "MessageService",
    "Publish",
    "Relation",
    "UserService",
]
