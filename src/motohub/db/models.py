"""ORM models for the four document collections.

Each row is a document: scalar fields map to columns, embedded lists
(reactions, comments, experience, ...) live in JSON columns and are
mutated in place. User references on posts and motorcycles are plain
identifiers, not foreign keys, so removing a user leaves their content behind.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import DateTime, Float, Integer, String, Text
from sqlalchemy.ext.mutable import MutableDict, MutableList
from sqlalchemy.orm import Mapped, mapped_column, relationship

from motohub.db.base import Base, json_document, new_id


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _json_list() -> Any:  # noqa: ANN401
    return MutableList.as_mutable(json_document())


def _json_dict() -> Any:  # noqa: ANN401
    return MutableDict.as_mutable(json_document())


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


class User(Base):
    """Registered rider account."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(String(256), nullable=False)
    avatar: Mapped[str | None] = mapped_column(Text, nullable=True)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_now)


# ---------------------------------------------------------------------------
# Profiles
# ---------------------------------------------------------------------------


class Profile(Base):
    """Rider profile, at most one per user."""

    __tablename__ = "profiles"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(String(32), nullable=False, unique=True, index=True)
    company: Mapped[str | None] = mapped_column(String(256), nullable=True)
    website: Mapped[str | None] = mapped_column(Text, nullable=True)
    location: Mapped[str | None] = mapped_column(String(256), nullable=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(256), nullable=False)
    github_username: Mapped[str | None] = mapped_column(String(128), nullable=True)
    skills: Mapped[list[str]] = mapped_column(_json_list(), nullable=False, default=list)
    social: Mapped[dict[str, str]] = mapped_column(_json_dict(), nullable=False, default=dict)
    experience: Mapped[list[dict[str, Any]]] = mapped_column(_json_list(), nullable=False, default=list)
    education: Mapped[list[dict[str, Any]]] = mapped_column(_json_list(), nullable=False, default=list)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_now)

    user: Mapped[User | None] = relationship(
        "User",
        primaryjoin="foreign(Profile.user_id) == User.id",
        lazy="selectin",
        viewonly=True,
    )


# ---------------------------------------------------------------------------
# Posts
# ---------------------------------------------------------------------------


class Post(Base):
    """Text post with likes and comments."""

    __tablename__ = "posts"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    name: Mapped[str | None] = mapped_column(String(128), nullable=True)
    avatar: Mapped[str | None] = mapped_column(Text, nullable=True)
    likes: Mapped[list[dict[str, Any]]] = mapped_column(_json_list(), nullable=False, default=list)
    comments: Mapped[list[dict[str, Any]]] = mapped_column(_json_list(), nullable=False, default=list)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_now)


# ---------------------------------------------------------------------------
# Motorcycles
# ---------------------------------------------------------------------------


class Motorcycle(Base):
    """Motorcycle listing with loves, comments and a maintenance log."""

    __tablename__ = "motorcycles"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    make: Mapped[str] = mapped_column(String(128), nullable=False)
    model: Mapped[str] = mapped_column(String(128), nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    type: Mapped[str] = mapped_column(String(64), nullable=False)
    engine_capacity: Mapped[str] = mapped_column(String(32), nullable=False)
    mileage: Mapped[float | None] = mapped_column(Float, nullable=True)
    color: Mapped[str | None] = mapped_column(String(64), nullable=True)
    status: Mapped[str] = mapped_column(String(64), nullable=False)
    maintenance_history: Mapped[list[dict[str, Any]]] = mapped_column(_json_list(), nullable=False, default=list)
    insurance: Mapped[dict[str, Any] | None] = mapped_column(_json_dict(), nullable=True)
    accessories: Mapped[list[str]] = mapped_column(_json_list(), nullable=False, default=list)
    social: Mapped[dict[str, str]] = mapped_column(_json_dict(), nullable=False, default=dict)
    loves: Mapped[list[dict[str, Any]]] = mapped_column(_json_list(), nullable=False, default=list)
    comments: Mapped[list[dict[str, Any]]] = mapped_column(_json_list(), nullable=False, default=list)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_now)
