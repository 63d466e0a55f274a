"""Security utilities."""

from .identity import Identity
from .jwt import create_access_token, verify_access_token

__all__ = [
    "Identity",
    "create_access_token",
    "verify_access_token",
]
