"""API routers for FeedMesh."""

from .health import router as health_router
from .notifications import router as notifications_router
from .notifications import ws_router as notifications_ws_router
from .posts import router as posts_router
from .users import router as users_router

__all__ = [
    "health_router",
    "notifications_router",
    "notifications_ws_router",
    "posts_router",
    "users_router",
]
