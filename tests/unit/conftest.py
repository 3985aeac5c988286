"""In-memory stores for exercising the engines without a database."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from motohub.db.base import new_id
from motohub.db.models import Motorcycle, Post, Profile, User


class FakeDocumentStore:
    """Dict-backed stand-in for the post and motorcycle stores."""

    def __init__(self) -> None:
        self.docs: dict[str, Any] = {}
        self.saves = 0

    async def get(self, doc_id: str) -> Any:  # noqa: ANN401
        return self.docs.get(doc_id)

    async def list_newest_first(self) -> list[Any]:
        return sorted(self.docs.values(), key=lambda d: d.date, reverse=True)

    async def add(self, doc: Any) -> Any:  # noqa: ANN401
        if doc.id is None:
            doc.id = new_id()
        self.docs[doc.id] = doc
        return doc

    async def save(self, doc: Any) -> Any:  # noqa: ANN401
        self.saves += 1
        return doc

    async def delete(self, doc: Any) -> None:  # noqa: ANN401
        self.docs.pop(doc.id, None)


class FakeProfileStore:
    def __init__(self) -> None:
        self.by_user: dict[str, Profile] = {}

    async def get_by_user(self, user_id: str) -> Profile | None:
        return self.by_user.get(user_id)

    async def list_all(self) -> list[Profile]:
        return list(self.by_user.values())

    async def add(self, profile: Profile) -> Profile:
        if profile.id is None:
            profile.id = new_id()
        self.by_user[profile.user_id] = profile
        return profile

    async def save(self, profile: Profile) -> Profile:
        return profile

    async def delete_by_user(self, user_id: str) -> None:
        self.by_user.pop(user_id, None)


class FakeUserStore:
    def __init__(self) -> None:
        self.users: dict[str, User] = {}

    async def get(self, user_id: str) -> User | None:
        return self.users.get(user_id)

    async def get_by_email(self, email: str) -> User | None:
        return next((u for u in self.users.values() if u.email.lower() == email.lower()), None)

    async def add(self, user: User) -> User:
        if user.id is None:
            user.id = new_id()
        self.users[user.id] = user
        return user

    async def delete(self, user_id: str) -> None:
        self.users.pop(user_id, None)


def _user(user_id: str, name: str = "Rider") -> User:
    return User(id=user_id, name=name, email=f"{user_id}@example.com", password_hash="x", avatar=f"https://a/{user_id}")


def _post(owner: str = "owner") -> Post:
    return Post(id=new_id(), user_id=owner, text="First ride of the season", likes=[], comments=[])


def _motorcycle(owner: str = "owner") -> Motorcycle:
    return Motorcycle(
        id=new_id(),
        user_id=owner,
        make="Ducati",
        model="Monster",
        year=2021,
        price=9500.0,
        type="Naked",
        engine_capacity="937cc",
        status="Available",
        maintenance_history=[],
        accessories=[],
        social={},
        loves=[],
        comments=[],
    )


@pytest.fixture
def doc_store() -> FakeDocumentStore:
    return FakeDocumentStore()


@pytest.fixture
def profile_store() -> FakeProfileStore:
    return FakeProfileStore()


@pytest.fixture
def user_store() -> FakeUserStore:
    return FakeUserStore()


@pytest.fixture
def make_user() -> Callable[..., User]:
    return _user


@pytest.fixture
def make_post() -> Callable[..., Post]:
    return _post


@pytest.fixture
def make_motorcycle() -> Callable[..., Motorcycle]:
    return _motorcycle
