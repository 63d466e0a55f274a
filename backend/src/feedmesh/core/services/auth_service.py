"""Authentication service implementation."""

import logging
from typing import Optional

from ...security.identity import Identity
from ..exceptions import Unauthorized
from ..repositories.interfaces import IFeedStore
from ..schemas.auth import ProfileResponse, UserResponse
from .interfaces import IAuthService

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """Password-less registration: a username is the whole credential."""

    def __init__(self, store: IFeedStore):
        self.store = store

    async def register(self, username: str, display_name: Optional[str] = None) -> UserResponse:
        """Find or create user by username."""
        user = await self.store.find_user_by_username(username)
        if user:
            logger.info(f"Existing user {user.id} signed in as '{username}'")
        else:
            user = await self.store.create_user(username=username, display_name=display_name)
            logger.info(f"Registered user {user.id} as '{username}'")

        return UserResponse.model_validate(user)

    async def get_profile(self, identity: Identity) -> ProfileResponse:
        """Get the caller's profile; a token for a vanished user is unauthorized."""
        user = await self.store.find_user_by_id(identity.user_id)
        if not user:
            raise Unauthorized()
        return ProfileResponse.model_validate(user)
