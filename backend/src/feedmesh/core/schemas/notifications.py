"""Notification schemas shared by the realtime event and the stored list."""

from datetime import datetime
from typing import Optional

from ..models.notification import NotificationType
from .common import CamelModel, CursorPage


class NotificationEvent(CamelModel):
    """Payload pushed to ``user:{recipientId}``."""

    id: int
    type: NotificationType
    actor_id: int
    post_id: Optional[int] = None
    created_at: datetime


class NotificationListResponse(CursorPage[NotificationEvent]):
    """Stored notifications, newest first."""
