"""
Account business logic.

Registration and login. Both return the User; token issuing lives in the router.
"""

from __future__ import annotations

import hashlib
from datetime import datetime, timezone
from typing import TYPE_CHECKING

import structlog

from motohub.auth.password import hash_password, validate_password, verify_password
from motohub.db.models import User
from motohub.errors import BadRequest

if TYPE_CHECKING:
    from motohub.stores import UserStore

logger = structlog.get_logger()


def gravatar_url(email: str, size: int = 200) -> str:
    """Gravatar for ``email``: PG-rated, mystery-person fallback."""
    digest = hashlib.md5(email.strip().lower().encode()).hexdigest()  # noqa: S324
    return f"https://www.gravatar.com/avatar/{digest}?s={size}&r=pg&d=mm"


async def register_user(users: UserStore, name: str, email: str, password: str) -> User:
    """
    Create a new account.

    Raises:
        PasswordPolicyError: If the password is outside the allowed length.
        BadRequest: If the email is already registered.
    """
    validate_password(password)

    if await users.get_by_email(email) is not None:
        msg = "User already exists"
        raise BadRequest(msg)

    user = User(
        name=name,
        email=email.lower().strip(),
        password_hash=hash_password(password),
        avatar=gravatar_url(email),
        date=datetime.now(timezone.utc),
    )
    await users.add(user)
    logger.info("user_created", user_id=user.id, email=user.email)
    return user


async def authenticate_user(users: UserStore, email: str, password: str) -> User:
    """
    Check email + password.

    Raises:
        BadRequest: Unknown email or wrong password (same message for both).
    """
    user = await users.get_by_email(email)
    if user is None or not verify_password(password, user.password_hash):
        logger.info("login_failed", email=email)
        msg = "Invalid Credentials"
        raise BadRequest(msg)

    logger.info("login_succeeded", user_id=user.id)
    return user
