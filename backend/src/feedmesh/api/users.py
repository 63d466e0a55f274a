"""Registration and profile API endpoints."""

from fastapi import APIRouter, Depends, Response, status

from ..config import Settings, get_settings
from ..core.schemas.auth import ProfileResponse, RegisterRequest, UserResponse
from ..core.services import AuthService
from ..middleware.auth import get_current_identity
from ..security import Identity, create_access_token
from .dependencies import get_auth_service

router = APIRouter(tags=["users"])


@router.post("/users/register", response_model=UserResponse, status_code=status.HTTP_200_OK)
async def register(
    request: RegisterRequest,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
):
    """Register (or sign back in) by username; sets the session cookie."""
    user = await auth_service.register(request.username, request.display_name)

    token = create_access_token(user.id)
    response.set_cookie(
        key=settings.cookie_name,
        value=token,
        httponly=True,
        samesite="lax",
        secure=settings.cookie_secure,
        max_age=settings.access_token_expire_minutes * 60,
    )
    return user


@router.get("/me", response_model=ProfileResponse)
async def get_me(
    identity: Identity = Depends(get_current_identity),
    auth_service: AuthService = Depends(get_auth_service),
):
    """Get current user profile."""
    return await auth_service.get_profile(identity)
