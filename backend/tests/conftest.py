"""Shared pytest fixtures: SQLite in-memory store, in-memory fakes and an HTTP client."""

import logging
import os
from datetime import datetime, timezone
from itertools import count
from typing import Any, Dict, List, Optional, Sequence

# Configure the app for tests before anything imports feedmesh.config
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("LOG_DIR", "")
os.environ["FEEDMESH_SKIP_LIFESPAN_DB"] = "1"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from feedmesh.api.dependencies import get_channel
from feedmesh.core.channels import ChannelHub, INotificationChannel
from feedmesh.core.exceptions import ChannelUnavailable
from feedmesh.core.models import BaseModel, NotificationType
from feedmesh.core.repositories import IFeedStore, PostView, SQLFeedStore
from feedmesh.database import get_db_session
from feedmesh.main import app
from feedmesh.security import create_access_token

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)


class Dummy:
    def __init__(self, **kw):
        self.__dict__.update(kw)


class FakeFeedStore(IFeedStore):
    """In-memory feed store recording every call it receives."""

    def __init__(self):
        self.calls: List[str] = []
        self.users: Dict[int, Dummy] = {}
        self.posts: Dict[int, Dummy] = {}
        self.likes: set = set()
        self.comments: List[Dummy] = []
        self.notifications: List[Dummy] = []
        self._ids = {name: count(1) for name in ("user", "post", "comment", "notification")}

    def _now(self):
        return datetime.now(timezone.utc)

    async def find_user_by_username(self, username):
        self.calls.append("find_user_by_username")
        return next((u for u in self.users.values() if u.username == username), None)

    async def create_user(self, username, display_name=None):
        self.calls.append("create_user")
        user = Dummy(
            id=next(self._ids["user"]),
            username=username,
            display_name=display_name,
            bio=None,
            created_at=self._now(),
        )
        self.users[user.id] = user
        return user

    async def find_user_by_id(self, user_id):
        self.calls.append("find_user_by_id")
        return self.users.get(user_id)

    async def create_post(self, author_id, content):
        self.calls.append("create_post")
        post = Dummy(
            id=next(self._ids["post"]),
            author_id=author_id,
            author=self.users[author_id],
            content=content,
            created_at=self._now(),
        )
        self.posts[post.id] = post
        return post

    async def find_post(self, post_id):
        self.calls.append("find_post")
        return self.posts.get(post_id)

    async def list_posts(self, terms: Sequence[str], cursor, limit, caller_id=None):
        self.calls.append("list_posts")
        lowered = [t.lower() for t in terms]
        rows = sorted(self.posts.values(), key=lambda p: p.id, reverse=True)
        if lowered:
            rows = [p for p in rows if any(t in p.content.lower() for t in lowered)]
        if cursor is not None:
            rows = [p for p in rows if p.id < cursor]
        return [
            PostView(
                post=p,
                likes_count=sum(1 for (_, pid) in self.likes if pid == p.id),
                comments_count=sum(1 for c in self.comments if c.post_id == p.id),
                is_liked=(caller_id, p.id) in self.likes,
            )
            for p in rows[:limit]
        ]

    async def find_like(self, user_id, post_id):
        self.calls.append("find_like")
        return Dummy(user_id=user_id, post_id=post_id) if (user_id, post_id) in self.likes else None

    async def create_like(self, user_id, post_id):
        self.calls.append("create_like")
        if (user_id, post_id) in self.likes:
            return False
        self.likes.add((user_id, post_id))
        return True

    async def delete_like(self, user_id, post_id):
        self.calls.append("delete_like")
        if (user_id, post_id) in self.likes:
            self.likes.discard((user_id, post_id))
            return True
        return False

    async def create_comment(self, author_id, post_id, content):
        self.calls.append("create_comment")
        comment = Dummy(
            id=next(self._ids["comment"]),
            author_id=author_id,
            author=self.users[author_id],
            post_id=post_id,
            post=self.posts[post_id],
            content=content,
            created_at=self._now(),
        )
        self.comments.append(comment)
        return comment

    async def create_notification(self, user_id, actor_id, type, post_id=None):
        self.calls.append("create_notification")
        notification = Dummy(
            id=next(self._ids["notification"]),
            user_id=user_id,
            actor_id=actor_id,
            type=NotificationType(type),
            post_id=post_id,
            created_at=self._now(),
        )
        self.notifications.append(notification)
        return notification

    async def list_notifications(self, user_id, cursor, limit):
        self.calls.append("list_notifications")
        rows = [n for n in reversed(self.notifications) if n.user_id == user_id]
        if cursor is not None:
            rows = [n for n in rows if n.id < cursor]
        return rows[:limit]


class RecordingChannel(INotificationChannel):
    """Channel that remembers what was published, optionally failing every publish."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.published: List[tuple] = []

    async def publish(self, topic: str, event: Dict[str, Any]) -> int:
        if self.fail:
            raise ChannelUnavailable("channel down")
        self.published.append((topic, event))
        return 1

    async def listen(self, topic: str):
        for published_topic, event in list(self.published):
            if published_topic == topic:
                yield event

    async def ping(self) -> bool:
        return not self.fail


@pytest.fixture
def fake_store():
    return FakeFeedStore()


@pytest.fixture
def fake_channel():
    return RecordingChannel()


@pytest.fixture
def failing_channel():
    return RecordingChannel(fail=True)


@pytest.fixture
async def test_engine():
    """Fresh SQLite in-memory engine with the schema created."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ANN001
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute("PRAGMA foreign_keys=ON")
        finally:
            cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
async def test_session(test_engine):
    session_maker = async_sessionmaker(test_engine, expire_on_commit=False)
    async with session_maker() as session:
        yield session


@pytest.fixture
def sql_store(test_session):
    return SQLFeedStore(test_session)


@pytest.fixture
def hub():
    return ChannelHub(queue_size=10)


@pytest.fixture
def test_app(test_session, hub):
    """App wired to the test session and an isolated channel hub."""

    async def _override_get_db():
        yield test_session

    app.dependency_overrides[get_db_session] = _override_get_db
    app.dependency_overrides[get_channel] = lambda: hub
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(test_app):
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def auth_headers():
    """Build Bearer headers for a user id."""

    def _headers(user_id: int) -> Dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(user_id)}"}

    return _headers


@pytest.fixture
def register(async_client, auth_headers):
    """Register a user over HTTP and return (user_json, bearer headers)."""

    async def _register(username: str, display_name: Optional[str] = None):
        body = {"username": username}
        if display_name is not None:
            body["displayName"] = display_name
        response = await async_client.post("/api/users/register", json=body)
        assert response.status_code == 200, response.text
        # requests in tests authenticate by header; drop the session cookie
        async_client.cookies.clear()
        user = response.json()
        return user, auth_headers(user["id"])

    return _register
