"""Unit tests for AuthService."""

import pytest

from feedmesh.core.exceptions import Unauthorized
from feedmesh.core.services import AuthService
from feedmesh.security import Identity


async def test_register_creates_then_finds(fake_store):
    service = AuthService(fake_store)

    first = await service.register("anon_fox", "Fox")
    again = await service.register("anon_fox", "Ignored")

    assert first.id == again.id
    assert again.display_name == "Fox"
    assert fake_store.calls.count("create_user") == 1


async def test_get_profile(fake_store):
    service = AuthService(fake_store)
    user = await service.register("anon_owl")

    profile = await service.get_profile(Identity(user_id=user.id))
    assert profile.username == "anon_owl"
    assert profile.bio is None


async def test_profile_of_vanished_user_is_unauthorized(fake_store):
    with pytest.raises(Unauthorized):
        await AuthService(fake_store).get_profile(Identity(user_id=404))
