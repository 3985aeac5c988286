"""Shared FastAPI dependencies: one store per collection, bound to the request session."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from motohub.database import get_session
from motohub.stores import (
    MotorcycleStore,
    PostStore,
    ProfileStore,
    SqlMotorcycleStore,
    SqlPostStore,
    SqlProfileStore,
    SqlUserStore,
    UserStore,
)


def get_user_store(db: AsyncSession = Depends(get_session)) -> UserStore:
    return SqlUserStore(db)


def get_profile_store(db: AsyncSession = Depends(get_session)) -> ProfileStore:
    return SqlProfileStore(db)


def get_post_store(db: AsyncSession = Depends(get_session)) -> PostStore:
    return SqlPostStore(db)


def get_motorcycle_store(db: AsyncSession = Depends(get_session)) -> MotorcycleStore:
    return SqlMotorcycleStore(db)
