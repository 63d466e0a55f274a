"""
Post, like and comment schemas.

These schemas define the API contracts for the feed. Field names are
snake_case in Python and camelCase on the wire.
"""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from .common import CamelModel, CursorPage


class PostCreate(CamelModel):
    """Post creation request schema."""

    content: str = Field(description="Post text")

    model_config = ConfigDict(json_schema_extra={"example": {"content": "hello #world"}})


class CommentCreate(CamelModel):
    """Comment creation request schema."""

    content: str = Field(description="Comment text")


class AuthorInfo(CamelModel):
    """Minimal author info embedded in posts and comments."""

    id: int
    username: str
    display_name: Optional[str] = None


class PostResponse(CamelModel):
    """Serialized post as returned by create and list."""

    id: int
    content: str
    created_at: datetime
    author: AuthorInfo
    likes_count: int = 0
    comments_count: int = 0
    is_liked: bool = False

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 42,
                "content": "hello #world",
                "createdAt": "2025-09-13T10:30:00Z",
                "author": {"id": 7, "username": "anon_fox", "displayName": "Fox"},
                "likesCount": 3,
                "commentsCount": 1,
                "isLiked": False,
            }
        }
    )


class PostListResponse(CursorPage[PostResponse]):
    """One page of the feed."""


class LikeToggleResponse(CamelModel):
    """Like state after the toggle performed by this request."""

    liked: bool


class CommentResponse(CamelModel):
    """Serialized comment."""

    id: int
    content: str
    author: AuthorInfo
    created_at: datetime
