"""SQLAlchemy implementation of the feed store."""

import asyncio
import logging
from typing import Awaitable, List, Optional, Sequence, TypeVar

from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import TransientStoreError
from ..models import Comment, Like, Notification, NotificationType, Post, User
from .comment_repository import CommentRepository
from .interfaces import IFeedStore, PostView
from .like_repository import LikeRepository
from .notification_repository import NotificationRepository
from .post_repository import PostRepository
from .user_repository import UserRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SQLFeedStore(IFeedStore):
    """Feed store backed by one AsyncSession per request.

    Every call is bounded by ``timeout`` seconds; timeouts and connection
    level failures surface as TransientStoreError.
    """

    def __init__(self, session: AsyncSession, timeout: float = 5.0):
        self.session = session
        self.timeout = timeout
        self.user_repo = UserRepository(session)
        self.post_repo = PostRepository(session)
        self.like_repo = LikeRepository(session)
        self.comment_repo = CommentRepository(session)
        self.notification_repo = NotificationRepository(session)

    async def _guard(self, operation: str, call: Awaitable[T]) -> T:
        try:
            return await asyncio.wait_for(call, timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.error(f"Store call '{operation}' timed out after {self.timeout}s")
            await self._safe_rollback()
            raise TransientStoreError() from None
        except (OperationalError, InterfaceError) as e:
            logger.error(f"Store call '{operation}' failed: {e}")
            await self._safe_rollback()
            raise TransientStoreError() from e

    async def _safe_rollback(self) -> None:
        try:
            await self.session.rollback()
        except Exception as e:
            logger.warning(f"Rollback after store failure also failed: {e}")

    async def find_user_by_username(self, username: str) -> Optional[User]:
        return await self._guard("find_user_by_username", self.user_repo.get_by_username(username))

    async def create_user(self, username: str, display_name: Optional[str] = None) -> User:
        return await self._guard(
            "create_user",
            self.user_repo.create_user({"username": username, "display_name": display_name}),
        )

    async def find_user_by_id(self, user_id: int) -> Optional[User]:
        return await self._guard("find_user_by_id", self.user_repo.get_by_id(user_id))

    async def create_post(self, author_id: int, content: str) -> Post:
        return await self._guard(
            "create_post",
            self.post_repo.create_post({"author_id": author_id, "content": content}),
        )

    async def find_post(self, post_id: int) -> Optional[Post]:
        return await self._guard("find_post", self.post_repo.get_by_id(post_id))

    async def list_posts(
        self,
        terms: Sequence[str],
        cursor: Optional[int],
        limit: int,
        caller_id: Optional[int] = None,
    ) -> List[PostView]:
        return await self._guard(
            "list_posts",
            self.post_repo.list_posts(terms=terms, cursor=cursor, limit=limit, caller_id=caller_id),
        )

    async def find_like(self, user_id: int, post_id: int) -> Optional[Like]:
        return await self._guard("find_like", self.like_repo.get(user_id, post_id))

    async def create_like(self, user_id: int, post_id: int) -> bool:
        return await self._guard("create_like", self.like_repo.create_if_absent(user_id, post_id))

    async def delete_like(self, user_id: int, post_id: int) -> bool:
        return await self._guard("delete_like", self.like_repo.delete(user_id, post_id))

    async def create_comment(self, author_id: int, post_id: int, content: str) -> Comment:
        return await self._guard(
            "create_comment",
            self.comment_repo.create_comment(
                {"author_id": author_id, "post_id": post_id, "content": content}
            ),
        )

    async def create_notification(
        self,
        user_id: int,
        actor_id: int,
        type: NotificationType,
        post_id: Optional[int] = None,
    ) -> Notification:
        return await self._guard(
            "create_notification",
            self.notification_repo.create_notification({
                "user_id": user_id,
                "actor_id": actor_id,
                "type": NotificationType(type).value,
                "post_id": post_id,
            }),
        )

    async def list_notifications(
        self, user_id: int, cursor: Optional[int], limit: int
    ) -> List[Notification]:
        return await self._guard(
            "list_notifications",
            self.notification_repo.list_for_user(user_id, cursor=cursor, limit=limit),
        )
