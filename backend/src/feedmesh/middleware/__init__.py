"""Middleware for authentication and other cross-cutting concerns."""

from .auth import (
    get_current_identity,
    get_optional_identity,
    optional_identity,
    require_identity,
)

__all__ = [
    "require_identity",
    "optional_identity",
    "get_current_identity",
    "get_optional_identity",
]
