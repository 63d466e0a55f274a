"""Realtime notification channels."""

from typing import Optional

from ...config import get_settings
from .base import INotificationChannel, user_topic
from .memory import ChannelHub
from .redis_channel import RedisNotificationChannel

__all__ = [
    "INotificationChannel",
    "ChannelHub",
    "RedisNotificationChannel",
    "close_notification_channel",
    "get_notification_channel",
    "user_topic",
]

# Singleton instance
_channel: Optional[INotificationChannel] = None


def get_notification_channel() -> INotificationChannel:
    """Get the process-wide notification channel chosen by settings."""
    global _channel
    if _channel is None:
        settings = get_settings()
        if settings.notification_backend == "redis":
            _channel = RedisNotificationChannel(
                settings.redis_url, publish_timeout=settings.publish_timeout_seconds
            )
        else:
            _channel = ChannelHub(queue_size=settings.channel_queue_size)
    return _channel


async def close_notification_channel() -> None:
    """Close and forget the process-wide channel."""
    global _channel
    if _channel is not None:
        await _channel.close()
        _channel = None
