"""
Service interfaces for the FeedMesh application.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ...security.identity import Identity
from ..models.notification import Notification, NotificationType
from ..schemas.auth import ProfileResponse, UserResponse
from ..schemas.common import HealthCheckResponse
from ..schemas.notifications import NotificationListResponse
from ..schemas.posts import CommentResponse, LikeToggleResponse, PostListResponse, PostResponse


class IAuthService(ABC):
    """Pseudonymous registration and profile lookup."""

    @abstractmethod
    async def register(self, username: str, display_name: Optional[str] = None) -> UserResponse:
        """Find or create user by username."""
        pass

    @abstractmethod
    async def get_profile(self, identity: Identity) -> ProfileResponse:
        """Get the caller's profile."""
        pass


class IFeedService(ABC):
    """Posts, feed listing, likes and comments."""

    @abstractmethod
    async def create_post(self, identity: Identity, content: str) -> PostResponse:
        """Create new post."""
        pass

    @abstractmethod
    async def list_posts(
        self,
        identity: Optional[Identity],
        query: Optional[str] = None,
        cursor: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> PostListResponse:
        """List posts newest first with optional search and cursor."""
        pass

    @abstractmethod
    async def toggle_like(self, identity: Identity, post_id: int) -> LikeToggleResponse:
        """Like or unlike a post."""
        pass

    @abstractmethod
    async def add_comment(self, identity: Identity, post_id: int, content: str) -> CommentResponse:
        """Comment on a post."""
        pass


class INotificationService(ABC):
    """Notification records and realtime delivery."""

    @abstractmethod
    async def notify(
        self,
        recipient_id: int,
        actor_id: int,
        type: NotificationType,
        post_id: Optional[int] = None,
    ) -> Optional[Notification]:
        """Store and publish a notification unless recipient is the actor."""
        pass

    @abstractmethod
    async def list_for_user(
        self, identity: Identity, cursor: Optional[int] = None, limit: Optional[int] = None
    ) -> NotificationListResponse:
        """List the caller's stored notifications."""
        pass


class IHealthService(ABC):
    """Health check service."""

    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        """Get app health status."""
        pass

    @abstractmethod
    async def check_database_health(self) -> Dict[str, Any]:
        """Check DB connection."""
        pass

    @abstractmethod
    async def check_channel_health(self) -> Dict[str, Any]:
        """Check notification channel."""
        pass
