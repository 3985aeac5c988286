"""Repository interfaces injected into the core engines and routers.

The engines only need ``save``; routers use the lookups. Anything that
satisfies these protocols (the SQL stores, or in-memory fakes in tests)
can be passed in.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, TypeVar

from motohub.db.models import Motorcycle, Post, Profile, User

T = TypeVar("T")


class DocumentStore(Protocol[T]):
    """Find, insert, update and delete documents of one collection."""

    async def get(self, doc_id: str) -> T | None: ...

    async def list_newest_first(self) -> Sequence[T]: ...

    async def add(self, doc: T) -> T: ...

    async def save(self, doc: T) -> T: ...

    async def delete(self, doc: T) -> None: ...


class PostStore(DocumentStore[Post], Protocol):
    """Posts collection."""


class MotorcycleStore(DocumentStore[Motorcycle], Protocol):
    """Motorcycles collection."""


class ProfileStore(Protocol):
    """Profiles collection, keyed by owning user."""

    async def get_by_user(self, user_id: str) -> Profile | None: ...

    async def list_all(self) -> Sequence[Profile]: ...

    async def add(self, profile: Profile) -> Profile: ...

    async def save(self, profile: Profile) -> Profile: ...

    async def delete_by_user(self, user_id: str) -> None: ...


class UserStore(Protocol):
    """Users collection."""

    async def get(self, user_id: str) -> User | None: ...

    async def get_by_email(self, email: str) -> User | None: ...

    async def add(self, user: User) -> User: ...

    async def delete(self, user_id: str) -> None: ...
