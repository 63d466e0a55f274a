"""
FastAPI dependencies wiring the store, channel and services per request
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import Settings, get_settings
from ..core.channels import INotificationChannel, get_notification_channel
from ..core.repositories import IFeedStore, SQLFeedStore
from ..core.services import AuthService, FeedService, HealthService, NotificationService
from ..database import get_db_session


async def get_feed_store(
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
) -> IFeedStore:
    """Get feed store bound to this request's session"""
    return SQLFeedStore(session, timeout=settings.store_timeout_seconds)


def get_channel() -> INotificationChannel:
    """Get the process-wide notification channel"""
    return get_notification_channel()


async def get_notification_service(
    store: IFeedStore = Depends(get_feed_store),
    channel: INotificationChannel = Depends(get_channel),
    settings: Settings = Depends(get_settings),
) -> NotificationService:
    """Get notification service dependency"""
    return NotificationService(store, channel, settings)


async def get_feed_service(
    store: IFeedStore = Depends(get_feed_store),
    notifications: NotificationService = Depends(get_notification_service),
    settings: Settings = Depends(get_settings),
) -> FeedService:
    """Get feed service dependency"""
    return FeedService(store, notifications, settings)


async def get_auth_service(store: IFeedStore = Depends(get_feed_store)) -> AuthService:
    """Get auth service dependency"""
    return AuthService(store)


async def get_health_service(
    session: AsyncSession = Depends(get_db_session),
    channel: INotificationChannel = Depends(get_channel),
) -> HealthService:
    """Get health service dependency"""
    return HealthService(session, channel)
