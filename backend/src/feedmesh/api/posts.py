"""Posts API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from ..core.schemas.posts import (
    CommentCreate,
    CommentResponse,
    LikeToggleResponse,
    PostCreate,
    PostListResponse,
    PostResponse,
)
from ..core.services import FeedService
from ..middleware.auth import get_current_identity, get_optional_identity
from ..security import Identity
from .dependencies import get_feed_service

router = APIRouter(prefix="/posts", tags=["posts"])


@router.post("", response_model=PostResponse, status_code=201)
async def create_post(
    request: PostCreate,
    identity: Identity = Depends(get_current_identity),
    feed_service: FeedService = Depends(get_feed_service),
):
    """Create a new post."""
    return await feed_service.create_post(identity, request.content)


@router.get("", response_model=PostListResponse)
async def list_posts(
    q: Optional[str] = Query(None, description="Keywords and #hashtags, any may match"),
    cursor: Optional[int] = Query(None, description="Id of the last post already seen"),
    limit: Optional[int] = Query(None, description="Page size"),
    identity: Optional[Identity] = Depends(get_optional_identity),
    feed_service: FeedService = Depends(get_feed_service),
):
    """List the feed, newest first."""
    return await feed_service.list_posts(identity, query=q, cursor=cursor, limit=limit)


@router.post("/{post_id}/like", response_model=LikeToggleResponse)
async def toggle_like(
    post_id: int,
    identity: Identity = Depends(get_current_identity),
    feed_service: FeedService = Depends(get_feed_service),
):
    """Toggle the caller's like on a post."""
    return await feed_service.toggle_like(identity, post_id)


@router.post("/{post_id}/comments", response_model=CommentResponse, status_code=201)
async def add_comment(
    post_id: int,
    request: CommentCreate,
    identity: Identity = Depends(get_current_identity),
    feed_service: FeedService = Depends(get_feed_service),
):
    """Comment on a post."""
    return await feed_service.add_comment(identity, post_id, request.content)
