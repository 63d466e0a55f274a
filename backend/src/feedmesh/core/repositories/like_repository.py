"""Like repository for database operations."""

import logging
from typing import Optional

from sqlalchemy import and_, delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.like import Like

logger = logging.getLogger(__name__)


class LikeRepository:
    """Repository for like database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, user_id: int, post_id: int) -> Optional[Like]:
        """Get the like a user left on a post, if any."""
        stmt = select(Like).where(and_(Like.user_id == user_id, Like.post_id == post_id))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create_if_absent(self, user_id: int, post_id: int) -> bool:
        """Insert the like unless the (user, post) pair already exists.

        Returns True when this call inserted the row, False when the unique
        constraint reported a concurrent insert.
        """
        self.session.add(Like(user_id=user_id, post_id=post_id))
        try:
            await self.session.commit()
        except IntegrityError:
            # someone else inserted it in the meantime
            await self.session.rollback()
            logger.info(f"Like ({user_id}, {post_id}) already present, collapsing to liked")
            return False
        return True

    async def delete(self, user_id: int, post_id: int) -> bool:
        """Delete the like by its natural key. Returns True if a row was removed."""
        stmt = delete(Like).where(and_(Like.user_id == user_id, Like.post_id == post_id))
        result = await self.session.execute(stmt)
        await self.session.commit()
        return (result.rowcount or 0) > 0
