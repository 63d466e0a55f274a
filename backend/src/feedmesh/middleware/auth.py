"""Authentication gate.

``require_identity`` and ``optional_identity`` work on the opaque token
string; the FastAPI dependencies below only pull that string out of the
transport (cookie first, then a Bearer header; the first one that
verifies is used).
"""

from typing import List, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..config import Settings, get_settings
from ..core.exceptions import InvalidToken, Unauthorized
from ..security import Identity, verify_access_token

bearer_scheme = HTTPBearer(auto_error=False)


def require_identity(token: Optional[str]) -> Identity:
    """Resolve the caller or fail with Unauthorized."""
    if not token or not token.strip():
        raise Unauthorized()
    try:
        return verify_access_token(token.strip())
    except InvalidToken:
        raise Unauthorized("Invalid token") from None


def optional_identity(token: Optional[str]) -> Optional[Identity]:
    """Resolve the caller, or None when the token is absent or invalid."""
    try:
        return require_identity(token)
    except Unauthorized:
        return None


def extract_tokens(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials],
    cookie_name: str,
) -> List[str]:
    """Tokens offered by the request: the session cookie, then a Bearer header."""
    tokens = []
    cookie = request.cookies.get(cookie_name)
    if cookie:
        tokens.append(cookie)
    if credentials and credentials.scheme.lower() == "bearer" and credentials.credentials:
        tokens.append(credentials.credentials)
    return tokens


def resolve_identity(tokens: List[str]) -> Optional[Identity]:
    """First token that verifies wins; a stale cookie does not mask a valid header."""
    for token in tokens:
        identity = optional_identity(token)
        if identity is not None:
            return identity
    return None


async def get_current_identity(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> Identity:
    """Dependency for routes that require an authenticated caller."""
    tokens = extract_tokens(request, credentials, settings.cookie_name)
    identity = resolve_identity(tokens)
    if identity is None:
        raise Unauthorized("Invalid token" if tokens else "Unauthorized")
    return identity


async def get_optional_identity(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> Optional[Identity]:
    """Dependency for routes that personalise output when a caller is known."""
    return resolve_identity(extract_tokens(request, credentials, settings.cookie_name))
