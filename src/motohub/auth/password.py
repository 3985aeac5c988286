"""Password hashing with argon2id and the length policy from settings."""

from __future__ import annotations

import argon2

from motohub.config import get_settings

_hasher = argon2.PasswordHasher(
    time_cost=2,
    memory_cost=65536,  # 64 MB
    parallelism=1,
    hash_len=32,
    salt_len=16,
    type=argon2.Type.ID,
)


class PasswordPolicyError(ValueError):
    """Raised when a password is outside the allowed length range."""


def hash_password(password: str) -> str:
    return _hasher.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Return True if the password matches. Never raises on mismatch."""
    try:
        return _hasher.verify(password_hash, password)
    except (argon2.exceptions.VerifyMismatchError, argon2.exceptions.InvalidHashError):
        return False


def validate_password(password: str) -> None:
    """Enforce the configured minimum and maximum length."""
    settings = get_settings()
    if not password or not password.strip():
        msg = "Password cannot be empty"
        raise PasswordPolicyError(msg)
    if len(password) < settings.password_min_length:
        msg = f"Please enter a password with {settings.password_min_length} or more characters"
        raise PasswordPolicyError(msg)
    if len(password) > settings.password_max_length:
        msg = f"Password must not exceed {settings.password_max_length} characters"
        raise PasswordPolicyError(msg)
