"""
Persistence contract consumed by the feed and notification services.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Sequence

if TYPE_CHECKING:
    from ..models import Comment, Like, Notification, NotificationType, Post, User


@dataclass
class PostView:
    """A post with its author loaded plus the aggregates the feed needs."""

    post: "Post"
    likes_count: int = 0
    comments_count: int = 0
    is_liked: bool = False


class IFeedStore(ABC):
    """Feed store for users, posts, likes, comments and notifications."""

    @abstractmethod
    async def find_user_by_username(self, username: str) -> Optional["User"]:
        """Get user by username."""
        pass

    @abstractmethod
    async def create_user(self, username: str, display_name: Optional[str] = None) -> "User":
        """Create new user."""
        pass

    @abstractmethod
    async def find_user_by_id(self, user_id: int) -> Optional["User"]:
        """Get user by ID."""
        pass

    @abstractmethod
    async def create_post(self, author_id: int, content: str) -> "Post":
        """Create post; author is loaded on return."""
        pass

    @abstractmethod
    async def find_post(self, post_id: int) -> Optional["Post"]:
        """Get post by ID."""
        pass

    @abstractmethod
    async def list_posts(
        self,
        terms: Sequence[str],
        cursor: Optional[int],
        limit: int,
        caller_id: Optional[int] = None,
    ) -> List[PostView]:
        """Posts matching any term, id descending, ids strictly below cursor."""
        pass

    @abstractmethod
    async def find_like(self, user_id: int, post_id: int) -> Optional["Like"]:
        """Get like by (user, post)."""
        pass

    @abstractmethod
    async def create_like(self, user_id: int, post_id: int) -> bool:
        """Insert-or-detect-conflict. True if inserted, False if it already existed."""
        pass

    @abstractmethod
    async def delete_like(self, user_id: int, post_id: int) -> bool:
        """Delete like by (user, post). True if a row was removed."""
        pass

    @abstractmethod
    async def create_comment(self, author_id: int, post_id: int, content: str) -> "Comment":
        """Create comment; author and post are loaded on return."""
        pass

    @abstractmethod
    async def create_notification(
        self,
        user_id: int,
        actor_id: int,
        type: "NotificationType",
        post_id: Optional[int] = None,
    ) -> "Notification":
        """Store a notification record."""
        pass

    @abstractmethod
    async def list_notifications(
        self, user_id: int, cursor: Optional[int], limit: int
    ) -> List["Notification"]:
        """Recipient's notifications, id descending, ids strictly below cursor."""
        pass
