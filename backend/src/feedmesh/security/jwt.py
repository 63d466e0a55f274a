"""JWT token utilities."""

from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt

from ..config import get_settings
from ..core.exceptions import InvalidToken
from .identity import Identity


def create_access_token(user_id: int, expires_delta: Optional[timedelta] = None) -> str:
    """Issue a signed access token for the given user id."""
    settings = get_settings()
    now = datetime.now(timezone.utc)

    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)

    to_encode = {
        "sub": str(user_id),
        "type": "access",
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def verify_access_token(token: str) -> Identity:
    """Decode and validate an access token.

    Raises InvalidToken on a bad signature, malformed or expired token,
    or a payload that does not carry a positive integer subject.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as e:
        raise InvalidToken(str(e) or "Invalid token") from e

    if payload.get("type") != "access":
        raise InvalidToken("Not an access token")

    sub = payload.get("sub")
    try:
        user_id = int(sub)
    except (TypeError, ValueError):
        raise InvalidToken("Token subject is missing or malformed") from None

    if user_id <= 0:
        raise InvalidToken("Token subject is missing or malformed")

    return Identity(user_id=user_id)
