"""
Pydantic schemas for validating and documenting API requests and responses.

This package exposes the Pydantic models used across the application to
define input/output contracts for registration, the feed, notifications,
and common responses (cursor pages and error formats).
"""

from .auth import ProfileResponse, RegisterRequest, UserResponse
from .common import CursorPage, ErrorResponse, HealthCheckResponse
from .notifications import NotificationEvent, NotificationListResponse
from .posts import (
    AuthorInfo,
    CommentCreate,
    CommentResponse,
    LikeToggleResponse,
    PostCreate,
    PostListResponse,
    PostResponse,
)

__all__ = [
    # Auth schemas
    "RegisterRequest",
    "UserResponse",
    "ProfileResponse",
    # Feed schemas
    "AuthorInfo",
    "PostCreate",
    "PostResponse",
    "PostListResponse",
    "LikeToggleResponse",
    "CommentCreate",
    "CommentResponse",
    # Notification schemas
    "NotificationEvent",
    "NotificationListResponse",
    # Common schemas
    "CursorPage",
    "ErrorResponse",
    "HealthCheckResponse",
]
