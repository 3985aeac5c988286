"""FastAPI authentication dependencies."""

from __future__ import annotations

import jwt
from fastapi import Depends, HTTPException, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from motohub.auth.jwt import verify_token
from motohub.db.models import User
from motohub.dependencies import get_user_store
from motohub.stores import UserStore

_bearer = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Security(_bearer),
    users: UserStore = Depends(get_user_store),
) -> User:
    """
    Verify the bearer token and return the User it names.

    Every failure (missing header, bad signature, expired, deleted user) is a 401.
    """
    if credentials is None:
        raise HTTPException(status_code=401, detail="No token, authorization denied")

    try:
        payload = verify_token(credentials.credentials, expected_type="access")
    except jwt.InvalidTokenError as e:
        raise HTTPException(status_code=401, detail="Token is not valid") from e

    user = await users.get(payload["sub"])
    if user is None:
        raise HTTPException(status_code=401, detail="Token is not valid")
    return user
