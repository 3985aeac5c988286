"""Declarative base and column helpers."""

import uuid

from sqlalchemy import JSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.types import TypeEngine


class Base(DeclarativeBase):
    """Base class for all ORM models."""


def json_document() -> TypeEngine:
    """JSONB on Postgres, plain JSON elsewhere (SQLite in tests)."""
    return JSON().with_variant(JSONB(), "postgresql")


def new_id() -> str:
    """Return a fresh opaque identifier for documents and embedded entries."""
    return uuid.uuid4().hex
