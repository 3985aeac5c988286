"""Account router: registration (/api/users) and login (/api/auth)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from motohub.auth.dependencies import get_current_user
from motohub.auth.jwt import create_access_token
from motohub.auth.password import PasswordPolicyError
from motohub.auth.schemas import LoginRequest, RegisterRequest, TokenResponse, UserResponse
from motohub.auth.service import authenticate_user, register_user
from motohub.config import get_settings
from motohub.db.models import User
from motohub.dependencies import get_user_store
from motohub.stores import UserStore

router = APIRouter(prefix="/api", tags=["Authentication"])


def _user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        avatar=user.avatar,
        date=user.date,
    )


def _issue_token(user: User) -> TokenResponse:
    settings = get_settings()
    return TokenResponse(
        access_token=create_access_token(user.id),
        token_type="bearer",
        expires_in=settings.jwt_access_token_expire_minutes * 60,
    )


@router.post("/users", response_model=TokenResponse)
async def register(
    body: RegisterRequest,
    users: UserStore = Depends(get_user_store),
) -> TokenResponse:
    """Register a user and return an access token."""
    try:
        user = await register_user(users, body.name, body.email, body.password)
    except PasswordPolicyError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return _issue_token(user)


@router.post("/auth", response_model=TokenResponse)
async def login(
    body: LoginRequest,
    users: UserStore = Depends(get_user_store),
) -> TokenResponse:
    """Authenticate with email + password and return an access token."""
    user = await authenticate_user(users, body.email, body.password)
    return _issue_token(user)


@router.get("/auth", response_model=UserResponse)
async def current_user(user: User = Depends(get_current_user)) -> UserResponse:
    """Return the authenticated user."""
    return _user_response(user)
