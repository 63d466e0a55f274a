"""Caller identity passed explicitly through the service layer."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    """Authenticated caller resolved from an access token."""

    user_id: int
