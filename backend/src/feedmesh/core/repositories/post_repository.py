"""Post repository for database operations."""

from typing import List, Optional, Sequence

from sqlalchemy import desc, exists, false, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..models.comment import Comment
from ..models.like import Like
from ..models.post import Post
from .interfaces import PostView


class PostRepository:
    """Repository for post database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_post(self, post_data: dict) -> Post:
        """Create new post."""
        post = Post(**post_data)
        self.session.add(post)
        await self.session.commit()
        await self.session.refresh(post, ["author"])
        return post

    async def get_by_id(self, post_id: int) -> Optional[Post]:
        """Get post by ID with its author."""
        stmt = select(Post).options(selectinload(Post.author)).where(Post.id == post_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_posts(
        self,
        terms: Sequence[str] = (),
        cursor: Optional[int] = None,
        limit: int = 20,
        caller_id: Optional[int] = None,
    ) -> List[PostView]:
        """List posts newest first, strictly below the cursor.

        Content must contain at least one of the terms (case-insensitive)
        when any are given. Counts and the caller's like are computed in
        the same query so every row reflects one snapshot.
        """
        likes_count = (
            select(func.count(Like.id))
            .where(Like.post_id == Post.id)
            .correlate(Post)
            .scalar_subquery()
        )
        comments_count = (
            select(func.count(Comment.id))
            .where(Comment.post_id == Post.id)
            .correlate(Post)
            .scalar_subquery()
        )
        if caller_id is not None:
            liked = exists().where(Like.post_id == Post.id, Like.user_id == caller_id)
        else:
            liked = false()

        stmt = select(
            Post,
            likes_count.label("likes_count"),
            comments_count.label("comments_count"),
            liked.label("is_liked"),
        ).options(selectinload(Post.author))

        if terms:
            stmt = stmt.where(
                or_(*[Post.content.icontains(term, autoescape=True) for term in terms])
            )
        if cursor is not None:
            stmt = stmt.where(Post.id < cursor)

        stmt = stmt.order_by(desc(Post.id)).limit(limit)
        result = await self.session.execute(stmt)

        return [
            PostView(
                post=post,
                likes_count=int(n_likes or 0),
                comments_count=int(n_comments or 0),
                is_liked=bool(is_liked),
            )
            for post, n_likes, n_comments, is_liked in result.all()
        ]
