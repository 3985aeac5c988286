"""Comment lists on posts and motorcycles."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import structlog

from motohub.db.base import new_id
from motohub.db.models import User
from motohub.errors import BadRequest, CommentNotFound, Unauthorized
from motohub.stores.base import DocumentStore

logger = structlog.get_logger()


class CommentEngine:
    """Front-inserted comments with author-gated deletion."""

    def __init__(self, store: DocumentStore[Any]) -> None:
        self.store = store

    async def add(self, entity: Any, author: User, text: str) -> list[dict[str, Any]]:  # noqa: ANN401
        """Snapshot the author's name and avatar into a new comment at the front."""
        if not text or not text.strip():
            msg = "Text is required"
            raise BadRequest(msg)

        comment = {
            "id": new_id(),
            "user": author.id,
            "text": text,
            "name": author.name,
            "avatar": author.avatar,
            "date": datetime.now(timezone.utc).isoformat(),
        }
        entity.comments.insert(0, comment)
        await self.store.save(entity)
        logger.info("comment_added", entity_id=entity.id, comment_id=comment["id"], user_id=author.id)
        return list(entity.comments)

    async def delete(self, entity: Any, comment_id: str, user_id: str) -> list[dict[str, Any]]:  # noqa: ANN401
        """Delete a comment written by ``user_id``.

        The comment is looked up by id and its author checked, but the entry
        actually removed is the first one in the list written by ``user_id``.
        When the same user has several comments this may not be ``comment_id``.
        """
        comments = entity.comments
        comment = next((c for c in comments if c["id"] == comment_id), None)
        if comment is None:
            raise CommentNotFound

        if str(comment["user"]) != str(user_id):
            msg = "User not authorized to delete this comment"
            raise Unauthorized(msg)

        remove_index = [str(c["user"]) for c in comments].index(str(user_id))
        removed = comments.pop(remove_index)
        await self.store.save(entity)
        logger.info(
            "comment_deleted",
            entity_id=entity.id,
            requested_comment_id=comment_id,
            removed_comment_id=removed["id"],
            user_id=user_id,
        )
        return list(entity.comments)
