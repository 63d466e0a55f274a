"""
Database models for the FeedMesh application.

SQLAlchemy ORM models for the social feed. Every table uses an integer
autoincrement primary key; post ids are also the feed pagination cursor.

Models included:
    - User: pseudonymous account with a unique username
    - Post: short message authored by a user
    - Like: unique (user, post) relation toggled on and off
    - Comment: append-only reply to a post
    - Notification: record of an interaction with someone else's content
"""

from .base import BaseModel
from .comment import Comment
from .like import Like
from .notification import Notification, NotificationType
from .post import Post
from .user import User

__all__ = [
    "BaseModel",
    "User",
    "Post",
    "Like",
    "Comment",
    "Notification",
    "NotificationType",
]
