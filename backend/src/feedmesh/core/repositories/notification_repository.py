"""Notification repository for database operations."""

from typing import List, Optional

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.notification import Notification


class NotificationRepository:
    """Repository for notification database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_notification(self, notification_data: dict) -> Notification:
        """Store a new notification."""
        notification = Notification(**notification_data)
        self.session.add(notification)
        await self.session.commit()
        await self.session.refresh(notification)
        return notification

    async def list_for_user(
        self, user_id: int, cursor: Optional[int] = None, limit: int = 20
    ) -> List[Notification]:
        """List a recipient's notifications newest first, strictly below the cursor."""
        stmt = select(Notification).where(Notification.user_id == user_id)
        if cursor is not None:
            stmt = stmt.where(Notification.id < cursor)
        stmt = stmt.order_by(desc(Notification.id)).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars())
