"""Repository layer for data access."""

from .comment_repository import CommentRepository
from .feed_store import SQLFeedStore
from .interfaces import IFeedStore, PostView
from .like_repository import LikeRepository
from .notification_repository import NotificationRepository
from .post_repository import PostRepository
from .user_repository import UserRepository

__all__ = [
    "IFeedStore",
    "PostView",
    "SQLFeedStore",
    "UserRepository",
    "PostRepository",
    "LikeRepository",
    "CommentRepository",
    "NotificationRepository",
]
