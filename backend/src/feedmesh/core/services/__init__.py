"""
Service layer interfaces and implementations.
"""

from .interfaces import (
    IAuthService,
    IFeedService,
    IHealthService,
    INotificationService,
)

from .auth_service import AuthService
from .feed_service import FeedService
from .health_service import HealthService
from .notification_service import NotificationService
from .query_parser import ParsedQuery, parse_query

__all__ = [
    # Interfaces
    "IAuthService",
    "IFeedService",
    "INotificationService",
    "IHealthService",

    # Implementations
    "AuthService",
    "FeedService",
    "NotificationService",
    "HealthService",

    # Query parsing
    "ParsedQuery",
    "parse_query",
]
