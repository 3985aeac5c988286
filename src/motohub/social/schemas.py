"""Shapes of embedded reaction and comment entries."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class ReactionResponse(BaseModel):
    id: str
    user: str


class CommentCreateRequest(BaseModel):
    text: str = Field(..., min_length=1, description="Comment body")


class CommentResponse(BaseModel):
    id: str
    user: str
    text: str
    name: str | None = None
    avatar: str | None = None
    date: datetime


def reactions_out(entries: list[dict[str, Any]]) -> list[ReactionResponse]:
    return [ReactionResponse(id=e["id"], user=str(e["user"])) for e in entries]


def comments_out(entries: list[dict[str, Any]]) -> list[CommentResponse]:
    return [CommentResponse(**e) for e in entries]
