"""Love/like sets on posts and motorcycles.

Reactions are stored most-recent-first as ``{"id", "user"}`` entries.
A user appears at most once: adding twice is rejected rather than toggled.
"""

from __future__ import annotations

from typing import Any

import structlog

from motohub.db.base import new_id
from motohub.errors import AlreadyReacted, NotReacted
from motohub.stores.base import DocumentStore

logger = structlog.get_logger()


class ReactionEngine:
    """Add and remove one user's reaction on a document's reaction list.

    Args:
        store: Store used to persist the mutated document.
        field: Name of the list attribute (``"likes"`` or ``"loves"``).
        already_message: Message for a duplicate add.
        missing_message: Message for removing a reaction that is not there.
    """

    def __init__(
        self,
        store: DocumentStore[Any],
        field: str,
        *,
        already_message: str | None = None,
        missing_message: str | None = None,
    ) -> None:
        self.store = store
        self.field = field
        self.already_message = already_message
        self.missing_message = missing_message

    def _reactions(self, entity: Any) -> list[dict[str, Any]]:  # noqa: ANN401
        return getattr(entity, self.field)

    @staticmethod
    def has_reacted(reactions: list[dict[str, Any]], user_id: str) -> bool:
        return any(str(r["user"]) == user_id for r in reactions)

    async def add(self, entity: Any, user_id: str) -> list[dict[str, Any]]:  # noqa: ANN401
        """Insert the user's reaction at the front. Raises AlreadyReacted on repeat."""
        reactions = self._reactions(entity)
        if self.has_reacted(reactions, user_id):
            raise AlreadyReacted(self.already_message)

        reactions.insert(0, {"id": new_id(), "user": user_id})
        await self.store.save(entity)
        logger.info("reaction_added", field=self.field, entity_id=entity.id, user_id=user_id)
        return list(self._reactions(entity))

    async def remove(self, entity: Any, user_id: str) -> list[dict[str, Any]]:  # noqa: ANN401
        """Remove the user's reaction. Raises NotReacted if there is none."""
        reactions = self._reactions(entity)
        if not self.has_reacted(reactions, user_id):
            raise NotReacted(self.missing_message)

        # Index is taken from the list as read; a concurrent writer can shift it.
        remove_index = [str(r["user"]) for r in reactions].index(user_id)
        del reactions[remove_index]
        await self.store.save(entity)
        logger.info("reaction_removed", field=self.field, entity_id=entity.id, user_id=user_id)
        return list(self._reactions(entity))
