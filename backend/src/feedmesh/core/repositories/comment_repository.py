"""Comment repository for database operations."""

from sqlalchemy.ext.asyncio import AsyncSession

from ..models.comment import Comment


class CommentRepository:
    """Repository for comment database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_comment(self, comment_data: dict) -> Comment:
        """Create new comment; author and post are loaded on return."""
        comment = Comment(**comment_data)
        self.session.add(comment)
        await self.session.commit()
        await self.session.refresh(comment, ["author", "post"])
        return comment
