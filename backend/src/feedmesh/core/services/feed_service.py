"""Feed service implementation."""

import logging
from typing import Optional

from ...config import Settings, get_settings
from ...security.identity import Identity
from ..exceptions import NotFound
from ..models.notification import NotificationType
from ..models.post import Post
from ..repositories.interfaces import IFeedStore, PostView
from ..schemas.posts import (
    AuthorInfo,
    CommentResponse,
    LikeToggleResponse,
    PostListResponse,
    PostResponse,
)
from .interfaces import IFeedService, INotificationService
from .query_parser import parse_query
from .validation import optional_cursor, require_positive_id, require_text, resolve_limit

logger = logging.getLogger(__name__)


class FeedService(IFeedService):
    """Feed service implementation.

    Callers pass the resolved identity (or None for anonymous reads) into
    every method; nothing is read from request state.
    """

    def __init__(
        self,
        store: IFeedStore,
        notifications: INotificationService,
        settings: Optional[Settings] = None,
    ):
        self.store = store
        self.notifications = notifications
        self.settings = settings or get_settings()

    async def create_post(self, identity: Identity, content: str) -> PostResponse:
        """Create new post."""
        content = require_text("content", content, self.settings.max_post_length)

        post = await self.store.create_post(author_id=identity.user_id, content=content)
        logger.info(f"User {identity.user_id} created post {post.id}")

        return self._post_to_response(PostView(post=post))

    async def list_posts(
        self,
        identity: Optional[Identity],
        query: Optional[str] = None,
        cursor: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> PostListResponse:
        """List posts newest first.

        A non-empty query keeps posts containing any keyword or hashtag.
        ``cursor`` is the last id the caller has seen; the page continues
        strictly below it. ``nextCursor`` is set only when the page is full.
        """
        limit = resolve_limit(limit, self.settings.default_page_size, self.settings.max_page_size)
        cursor = optional_cursor(cursor)
        parsed = parse_query(query)
        caller_id = identity.user_id if identity else None

        views = await self.store.list_posts(
            terms=parsed.terms, cursor=cursor, limit=limit, caller_id=caller_id
        )

        items = [self._post_to_response(view, anonymous=identity is None) for view in views]
        return PostListResponse.create(
            items=items, limit=limit, last_id=items[-1].id if items else None
        )

    async def toggle_like(self, identity: Identity, post_id: int) -> LikeToggleResponse:
        """Like or unlike a post.

        The response reflects the operation this request performed. A
        concurrent insert of the same like collapses to ``liked`` without a
        second notification.
        """
        post_id = require_positive_id("postId", post_id)
        post = await self._get_post(post_id)
        user_id = identity.user_id

        existing = await self.store.find_like(user_id, post_id)
        if existing:
            await self.store.delete_like(user_id, post_id)
            logger.info(f"User {user_id} unliked post {post_id}")
            return LikeToggleResponse(liked=False)

        inserted = await self.store.create_like(user_id, post_id)
        if inserted:
            logger.info(f"User {user_id} liked post {post_id}")
            await self.notifications.notify(
                recipient_id=post.author_id,
                actor_id=user_id,
                type=NotificationType.LIKE,
                post_id=post_id,
            )
        return LikeToggleResponse(liked=True)

    async def add_comment(self, identity: Identity, post_id: int, content: str) -> CommentResponse:
        """Comment on a post and notify its author."""
        post_id = require_positive_id("postId", post_id)
        content = require_text("content", content, self.settings.max_comment_length)
        post = await self._get_post(post_id)

        comment = await self.store.create_comment(
            author_id=identity.user_id, post_id=post_id, content=content
        )
        logger.info(f"User {identity.user_id} commented {comment.id} on post {post_id}")

        await self.notifications.notify(
            recipient_id=post.author_id,
            actor_id=identity.user_id,
            type=NotificationType.COMMENT,
            post_id=post_id,
        )

        return CommentResponse(
            id=comment.id,
            content=comment.content,
            author=AuthorInfo.model_validate(comment.author),
            created_at=comment.created_at,
        )

    async def _get_post(self, post_id: int) -> Post:
        post = await self.store.find_post(post_id)
        if not post:
            raise NotFound("Post", post_id)
        return post

    def _post_to_response(self, view: PostView, anonymous: bool = False) -> PostResponse:
        """Convert a post view to the wire shape."""
        post = view.post
        return PostResponse(
            id=post.id,
            content=post.content,
            created_at=post.created_at,
            author=AuthorInfo.model_validate(post.author),
            likes_count=view.likes_count,
            comments_count=view.comments_count,
            is_liked=False if anonymous else view.is_liked,
        )
