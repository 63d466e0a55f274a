"""
Registration and profile schemas.

Accounts are pseudonymous: a username (and optional display name) is all
that is needed to obtain a session token.
"""

import re
from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from .common import CamelModel

USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


class RegisterRequest(CamelModel):
    """User registration request schema."""

    username: str = Field(min_length=3, max_length=32, description="Unique username")
    display_name: Optional[str] = Field(
        default=None, max_length=64, description="Display name (optional)"
    )

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not USERNAME_PATTERN.match(v):
            raise ValueError("Username can only contain letters, numbers, hyphens, and underscores")
        return v

    @field_validator("display_name")
    @classmethod
    def blank_display_name_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            return None
        return v.strip() if v else v

    model_config = ConfigDict(
        json_schema_extra={"example": {"username": "anon_fox", "displayName": "Fox"}}
    )


class UserResponse(CamelModel):
    """User response schema."""

    id: int
    username: str
    display_name: Optional[str] = None
    created_at: datetime


class ProfileResponse(UserResponse):
    """Current user's profile."""

    bio: Optional[str] = None
