"""SQLFeedStore against SQLite in-memory."""

import asyncio

import pytest
from sqlalchemy.exc import OperationalError

from feedmesh.core.exceptions import TransientStoreError
from feedmesh.core.models import NotificationType
from feedmesh.core.repositories import SQLFeedStore


@pytest.fixture
async def authors(sql_store):
    alice = await sql_store.create_user("alice", display_name="Alice")
    bob = await sql_store.create_user("bob")
    return alice, bob


class TestUsers:
    async def test_create_and_find(self, sql_store, authors):
        alice, _ = authors
        assert alice.id > 0
        assert (await sql_store.find_user_by_username("alice")).id == alice.id
        assert (await sql_store.find_user_by_id(alice.id)).username == "alice"
        assert await sql_store.find_user_by_username("nobody") is None
        assert await sql_store.find_user_by_id(9999) is None


class TestPosts:
    async def test_create_loads_author(self, sql_store, authors):
        alice, _ = authors
        post = await sql_store.create_post(alice.id, "hello")

        assert post.id > 0
        assert post.author.username == "alice"
        assert post.created_at is not None

    async def test_find_post(self, sql_store, authors):
        alice, _ = authors
        post = await sql_store.create_post(alice.id, "hello")

        found = await sql_store.find_post(post.id)
        assert found.content == "hello"
        assert found.author.display_name == "Alice"
        assert await sql_store.find_post(post.id + 100) is None

    async def test_list_orders_by_id_desc_and_respects_cursor(self, sql_store, authors):
        alice, _ = authors
        ids = [(await sql_store.create_post(alice.id, f"p{i}")).id for i in range(5)]

        views = await sql_store.list_posts(terms=[], cursor=None, limit=10)
        assert [v.post.id for v in views] == sorted(ids, reverse=True)

        below = await sql_store.list_posts(terms=[], cursor=ids[2], limit=10)
        assert [v.post.id for v in below] == [ids[1], ids[0]]

        limited = await sql_store.list_posts(terms=[], cursor=None, limit=2)
        assert [v.post.id for v in limited] == [ids[4], ids[3]]

    async def test_list_filters_any_term_case_insensitively(self, sql_store, authors):
        alice, _ = authors
        await sql_store.create_post(alice.id, "Hello World")
        await sql_store.create_post(alice.id, "learning #PYTHON")
        await sql_store.create_post(alice.id, "unrelated")
        await sql_store.create_post(alice.id, "100% sure")

        views = await sql_store.list_posts(terms=["hello", "python"], cursor=None, limit=10)
        assert sorted(v.post.content for v in views) == ["Hello World", "learning #PYTHON"]

        # LIKE wildcards in terms match literally
        percent = await sql_store.list_posts(terms=["%"], cursor=None, limit=10)
        assert [v.post.content for v in percent] == ["100% sure"]

    async def test_list_counts_and_is_liked(self, sql_store, authors):
        alice, bob = authors
        post = await sql_store.create_post(alice.id, "counted")
        other = await sql_store.create_post(alice.id, "quiet")

        assert await sql_store.create_like(bob.id, post.id) is True
        assert await sql_store.create_like(alice.id, post.id) is True
        await sql_store.create_comment(bob.id, post.id, "first")
        await sql_store.create_comment(bob.id, post.id, "second")

        by_id = {v.post.id: v for v in await sql_store.list_posts([], None, 10, caller_id=bob.id)}
        assert (by_id[post.id].likes_count, by_id[post.id].comments_count) == (2, 2)
        assert by_id[post.id].is_liked is True
        assert (by_id[other.id].likes_count, by_id[other.id].comments_count) == (0, 0)
        assert by_id[other.id].is_liked is False

        anonymous = await sql_store.list_posts([], None, 10)
        assert all(v.is_liked is False for v in anonymous)


class TestLikes:
    async def test_create_find_delete(self, sql_store, authors):
        alice, bob = authors
        post = await sql_store.create_post(alice.id, "likeable")

        assert await sql_store.find_like(bob.id, post.id) is None
        assert await sql_store.create_like(bob.id, post.id) is True
        assert await sql_store.find_like(bob.id, post.id) is not None
        assert await sql_store.delete_like(bob.id, post.id) is True
        assert await sql_store.find_like(bob.id, post.id) is None
        assert await sql_store.delete_like(bob.id, post.id) is False

    async def test_duplicate_like_reports_conflict(self, sql_store, authors):
        alice, bob = authors
        post = await sql_store.create_post(alice.id, "once")

        assert await sql_store.create_like(bob.id, post.id) is True
        assert await sql_store.create_like(bob.id, post.id) is False

        # session is still usable after the conflict
        views = await sql_store.list_posts([], None, 10)
        assert views[0].likes_count == 1


class TestComments:
    async def test_create_loads_author_and_post(self, sql_store, authors):
        alice, bob = authors
        post = await sql_store.create_post(alice.id, "talk")

        comment = await sql_store.create_comment(bob.id, post.id, "hi")
        assert comment.author.username == "bob"
        assert comment.post.id == post.id


class TestNotifications:
    async def test_create_and_list(self, sql_store, authors):
        alice, bob = authors
        post = await sql_store.create_post(alice.id, "n")

        first = await sql_store.create_notification(alice.id, bob.id, NotificationType.LIKE, post.id)
        second = await sql_store.create_notification(alice.id, bob.id, NotificationType.COMMENT, post.id)

        assert first.type == "LIKE"
        rows = await sql_store.list_notifications(alice.id, cursor=None, limit=10)
        assert [n.id for n in rows] == [second.id, first.id]
        assert await sql_store.list_notifications(alice.id, cursor=second.id, limit=10) == [first]
        assert await sql_store.list_notifications(bob.id, cursor=None, limit=10) == []


class TestTransientFailures:
    async def test_timeout_becomes_transient_error(self, test_session):
        store = SQLFeedStore(test_session, timeout=0.01)
        with pytest.raises(TransientStoreError):
            await store._guard("slow", asyncio.sleep(1))

    async def test_connection_failure_becomes_transient_error(self, test_session):
        store = SQLFeedStore(test_session)

        async def broken():
            raise OperationalError("SELECT 1", {}, Exception("connection refused"))

        with pytest.raises(TransientStoreError) as exc:
            await store._guard("broken", broken())
        assert exc.value.status_code == 503
