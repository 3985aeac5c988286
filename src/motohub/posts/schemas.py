"""Request/response schemas for post endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from motohub.social.schemas import CommentResponse, ReactionResponse


class PostCreateRequest(BaseModel):
    text: str = Field(..., min_length=1, description="Post body")


class PostResponse(BaseModel):
    id: str
    user: str
    text: str
    name: str | None = None
    avatar: str | None = None
    likes: list[ReactionResponse]
    comments: list[CommentResponse]
    date: datetime
