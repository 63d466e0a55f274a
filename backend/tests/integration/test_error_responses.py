"""Server-side failures rendered over HTTP."""

import pytest
from httpx import ASGITransport, AsyncClient

from feedmesh.api.dependencies import get_feed_service
from feedmesh.core.exceptions import TransientStoreError


class BrokenFeedService:
    def __init__(self, error):
        self.error = error

    async def list_posts(self, identity, query=None, cursor=None, limit=None):
        raise self.error


@pytest.fixture
async def raw_client(test_app):
    # unhandled errors still reach the client as a 500 instead of re-raising here
    transport = ASGITransport(app=test_app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def test_store_outage_is_503(raw_client, test_app):
    test_app.dependency_overrides[get_feed_service] = lambda: BrokenFeedService(TransientStoreError())

    response = await raw_client.get("/api/posts")

    assert response.status_code == 503
    body = response.json()
    assert body["error"] == "TransientStoreError"
    assert "retry" in body["message"]


async def test_unexpected_error_is_generic_500(raw_client, test_app):
    test_app.dependency_overrides[get_feed_service] = lambda: BrokenFeedService(
        RuntimeError("secret connection string")
    )

    response = await raw_client.get("/api/posts")

    assert response.status_code == 500
    assert response.json()["error"] == "InternalServerError"
    assert response.json()["message"] == "Internal server error"
    assert "secret" not in response.text
