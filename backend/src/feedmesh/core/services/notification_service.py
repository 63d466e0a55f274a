"""Notification service implementation."""

import logging
from typing import Optional

from ...config import Settings, get_settings
from ...security.identity import Identity
from ..channels.base import INotificationChannel, user_topic
from ..models.notification import Notification, NotificationType
from ..repositories.interfaces import IFeedStore
from ..schemas.notifications import NotificationEvent, NotificationListResponse
from .interfaces import INotificationService
from .validation import optional_cursor, resolve_limit

logger = logging.getLogger(__name__)


class NotificationService(INotificationService):
    """Persists notifications, then pushes them to the recipient's topic.

    The stored record is authoritative; delivery is best effort and a
    failed publish never fails the caller.
    """

    def __init__(
        self,
        store: IFeedStore,
        channel: INotificationChannel,
        settings: Optional[Settings] = None,
    ):
        self.store = store
        self.channel = channel
        self.settings = settings or get_settings()

    async def notify(
        self,
        recipient_id: int,
        actor_id: int,
        type: NotificationType,
        post_id: Optional[int] = None,
    ) -> Optional[Notification]:
        """Store and publish a notification unless recipient is the actor."""
        if recipient_id == actor_id:
            return None

        notification = await self.store.create_notification(
            user_id=recipient_id, actor_id=actor_id, type=type, post_id=post_id
        )
        logger.info(
            f"Stored {NotificationType(type).value} notification {notification.id} "
            f"for user {recipient_id} from user {actor_id}"
        )

        event = NotificationEvent.model_validate(notification)
        topic = user_topic(recipient_id)
        try:
            await self.channel.publish(topic, event.model_dump(mode="json", by_alias=True))
        except Exception as e:
            # recoverable later from the stored notifications
            logger.warning(f"Publish of notification {notification.id} to {topic} failed: {e}")

        return notification

    async def list_for_user(
        self, identity: Identity, cursor: Optional[int] = None, limit: Optional[int] = None
    ) -> NotificationListResponse:
        """List the caller's stored notifications, newest first."""
        cursor = optional_cursor(cursor)
        limit = resolve_limit(limit, self.settings.default_page_size, self.settings.max_page_size)

        rows = await self.store.list_notifications(identity.user_id, cursor=cursor, limit=limit)
        items = [NotificationEvent.model_validate(n) for n in rows]
        return NotificationListResponse.create(
            items=items, limit=limit, last_id=rows[-1].id if rows else None
        )
