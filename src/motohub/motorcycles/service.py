"""Motorcycle business logic.

Loves and comments follow the same rules as post likes and comments.
Maintenance records can only be added by the bike's owner.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

import structlog

from motohub.db.base import new_id
from motohub.db.models import Motorcycle, User
from motohub.errors import NotFound
from motohub.social import CommentEngine, ReactionEngine, assert_owner

if TYPE_CHECKING:
    from collections.abc import Sequence

    from motohub.motorcycles.schemas import MaintenanceRecordRequest, MotorcycleCreateRequest
    from motohub.stores import MotorcycleStore

logger = structlog.get_logger()


async def create_motorcycle(
    motorcycles: MotorcycleStore,
    owner: User,
    data: MotorcycleCreateRequest,
) -> Motorcycle:
    insurance = data.insurance.model_dump(mode="json") if data.insurance else None
    motorcycle = Motorcycle(
        user_id=owner.id,
        make=data.make,
        model=data.model,
        year=data.year,
        price=data.price,
        type=data.type,
        engine_capacity=data.engine_capacity,
        mileage=data.mileage,
        color=data.color,
        status=data.status,
        maintenance_history=[],
        insurance=insurance,
        accessories=list(data.accessories),
        social=data.social.links() if data.social else {},
        loves=[],
        comments=[],
        date=datetime.now(timezone.utc),
    )
    await motorcycles.add(motorcycle)
    logger.info("motorcycle_created", motorcycle_id=motorcycle.id, user_id=owner.id)
    return motorcycle


async def list_motorcycles(motorcycles: MotorcycleStore) -> Sequence[Motorcycle]:
    return await motorcycles.list_newest_first()


async def get_motorcycle(motorcycles: MotorcycleStore, motorcycle_id: str) -> Motorcycle:
    """Raises NotFound if there is no such motorcycle."""
    motorcycle = await motorcycles.get(motorcycle_id)
    if motorcycle is None:
        msg = "Motorcycle not found"
        raise NotFound(msg)
    return motorcycle


async def delete_motorcycle(motorcycles: MotorcycleStore, motorcycle_id: str, user_id: str) -> None:
    motorcycle = await get_motorcycle(motorcycles, motorcycle_id)
    assert_owner(motorcycle, user_id, "User not authorized to delete this motorcycle posting")
    await motorcycles.delete(motorcycle)
    logger.info("motorcycle_deleted", motorcycle_id=motorcycle_id, user_id=user_id)


async def add_maintenance_record(
    motorcycles: MotorcycleStore,
    motorcycle_id: str,
    user_id: str,
    record: MaintenanceRecordRequest,
) -> Motorcycle:
    """Front-insert a service record. Owner only."""
    motorcycle = await get_motorcycle(motorcycles, motorcycle_id)
    assert_owner(motorcycle, user_id, "User not authorized to update this motorcycle")
    motorcycle.maintenance_history.insert(0, {"id": new_id(), **record.model_dump(mode="json")})
    await motorcycles.save(motorcycle)
    logger.info("maintenance_added", motorcycle_id=motorcycle_id, service_type=record.service_type)
    return motorcycle


def _loves(motorcycles: MotorcycleStore) -> ReactionEngine:
    return ReactionEngine(
        motorcycles,
        "loves",
        already_message="User already loved this motorcycle",
        missing_message="User has not loved motorcycle yet",
    )


async def love_motorcycle(motorcycles: MotorcycleStore, motorcycle_id: str, user_id: str) -> list[dict[str, Any]]:
    motorcycle = await get_motorcycle(motorcycles, motorcycle_id)
    return await _loves(motorcycles).add(motorcycle, user_id)


async def unlove_motorcycle(motorcycles: MotorcycleStore, motorcycle_id: str, user_id: str) -> list[dict[str, Any]]:
    motorcycle = await get_motorcycle(motorcycles, motorcycle_id)
    return await _loves(motorcycles).remove(motorcycle, user_id)


async def comment_on_motorcycle(
    motorcycles: MotorcycleStore,
    motorcycle_id: str,
    author: User,
    text: str,
) -> list[dict[str, Any]]:
    motorcycle = await get_motorcycle(motorcycles, motorcycle_id)
    return await CommentEngine(motorcycles).add(motorcycle, author, text)


async def delete_motorcycle_comment(
    motorcycles: MotorcycleStore,
    motorcycle_id: str,
    comment_id: str,
    user_id: str,
) -> list[dict[str, Any]]:
    motorcycle = await get_motorcycle(motorcycles, motorcycle_id)
    return await CommentEngine(motorcycles).delete(motorcycle, comment_id, user_id)
