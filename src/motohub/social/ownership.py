"""Owner check applied before destructive operations."""

from __future__ import annotations

from typing import Protocol

from motohub.errors import Unauthorized


class Owned(Protocol):
    user_id: str


def assert_owner(entity: Owned, user_id: str, message: str | None = None) -> None:
    """Raise Unauthorized unless ``user_id`` owns ``entity``.

    Both sides are compared as strings; the owner reference is opaque.
    """
    if str(entity.user_id) != str(user_id):
        raise Unauthorized(message)
