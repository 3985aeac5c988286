"""SQLAlchemy-backed stores. Every write commits immediately."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Generic, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from motohub.db.models import Motorcycle, Post, Profile, User

T = TypeVar("T", Post, Motorcycle)


class _SqlDocumentStore(Generic[T]):
    model: type[T]

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get(self, doc_id: str) -> T | None:
        return await self.db.get(self.model, doc_id)

    async def list_newest_first(self) -> Sequence[T]:
        result = await self.db.execute(select(self.model).order_by(self.model.date.desc()))
        return result.scalars().all()

    async def add(self, doc: T) -> T:
        self.db.add(doc)
        await self.db.commit()
        return doc

    async def save(self, doc: T) -> T:
        await self.db.commit()
        return doc

    async def delete(self, doc: T) -> None:
        await self.db.delete(doc)
        await self.db.commit()


class SqlPostStore(_SqlDocumentStore[Post]):
    model = Post


class SqlMotorcycleStore(_SqlDocumentStore[Motorcycle]):
    model = Motorcycle


class SqlProfileStore:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_by_user(self, user_id: str) -> Profile | None:
        result = await self.db.execute(
            select(Profile)
            .where(Profile.user_id == user_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> Sequence[Profile]:
        result = await self.db.execute(
            select(Profile).order_by(Profile.date.desc()).execution_options(populate_existing=True)
        )
        return result.scalars().all()

    async def add(self, profile: Profile) -> Profile:
        self.db.add(profile)
        await self.db.commit()
        # Reload so the populated ``user`` relationship is available.
        reloaded = await self.get_by_user(profile.user_id)
        return reloaded or profile

    async def save(self, profile: Profile) -> Profile:
        await self.db.commit()
        reloaded = await self.get_by_user(profile.user_id)
        return reloaded or profile

    async def delete_by_user(self, user_id: str) -> None:
        await self.db.execute(delete(Profile).where(Profile.user_id == user_id))
        await self.db.commit()


class SqlUserStore:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get(self, user_id: str) -> User | None:
        return await self.db.get(User, user_id)

    async def get_by_email(self, email: str) -> User | None:
        result = await self.db.execute(select(User).where(func.lower(User.email) == email.lower()))
        return result.scalar_one_or_none()

    async def add(self, user: User) -> User:
        self.db.add(user)
        await self.db.commit()
        return user

    async def delete(self, user_id: str) -> None:
        await self.db.execute(delete(User).where(User.id == user_id))
        await self.db.commit()
