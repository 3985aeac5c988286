"""Motorcycle router: all /api/motorcycles/* endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from motohub.auth.dependencies import get_current_user
from motohub.db.models import Motorcycle, User
from motohub.dependencies import get_motorcycle_store
from motohub.motorcycles.schemas import (
    MaintenanceRecordRequest,
    MaintenanceRecordResponse,
    MotorcycleCreateRequest,
    MotorcycleResponse,
)
from motohub.motorcycles.service import (
    add_maintenance_record,
    comment_on_motorcycle,
    create_motorcycle,
    delete_motorcycle,
    delete_motorcycle_comment,
    get_motorcycle,
    list_motorcycles,
    love_motorcycle,
    unlove_motorcycle,
)
from motohub.social.schemas import (
    CommentCreateRequest,
    CommentResponse,
    ReactionResponse,
    comments_out,
    reactions_out,
)
from motohub.stores import MotorcycleStore

router = APIRouter(prefix="/api/motorcycles", tags=["Motorcycles"])


def _motorcycle_response(m: Motorcycle) -> MotorcycleResponse:
    return MotorcycleResponse(
        id=m.id,
        user=m.user_id,
        make=m.make,
        model=m.model,
        year=m.year,
        price=m.price,
        type=m.type,
        engine_capacity=m.engine_capacity,
        mileage=m.mileage,
        color=m.color,
        status=m.status,
        maintenance_history=[MaintenanceRecordResponse(**r) for r in m.maintenance_history],
        insurance=dict(m.insurance) if m.insurance else None,
        accessories=list(m.accessories),
        social=dict(m.social),
        loves=reactions_out(m.loves),
        comments=comments_out(m.comments),
        date=m.date,
    )


# ---------------------------------------------------------------------------
# Motorcycles
# ---------------------------------------------------------------------------


@router.post("", response_model=MotorcycleResponse, status_code=201)
async def create_motorcycle_endpoint(
    body: MotorcycleCreateRequest,
    user: User = Depends(get_current_user),
    motorcycles: MotorcycleStore = Depends(get_motorcycle_store),
) -> MotorcycleResponse:
    """List a motorcycle owned by the current user."""
    return _motorcycle_response(await create_motorcycle(motorcycles, user, body))


@router.get("", response_model=list[MotorcycleResponse])
async def list_motorcycles_endpoint(
    _user: User = Depends(get_current_user),
    motorcycles: MotorcycleStore = Depends(get_motorcycle_store),
) -> list[MotorcycleResponse]:
    """All motorcycles, newest first."""
    return [_motorcycle_response(m) for m in await list_motorcycles(motorcycles)]


@router.get("/{motorcycle_id}", response_model=MotorcycleResponse)
async def get_motorcycle_endpoint(
    motorcycle_id: str,
    _user: User = Depends(get_current_user),
    motorcycles: MotorcycleStore = Depends(get_motorcycle_store),
) -> MotorcycleResponse:
    return _motorcycle_response(await get_motorcycle(motorcycles, motorcycle_id))


@router.delete("/{motorcycle_id}")
async def delete_motorcycle_endpoint(
    motorcycle_id: str,
    user: User = Depends(get_current_user),
    motorcycles: MotorcycleStore = Depends(get_motorcycle_store),
) -> dict[str, str]:
    await delete_motorcycle(motorcycles, motorcycle_id, user.id)
    return {"detail": "Motorcycle deleted successfully"}


@router.put("/maintenance/{motorcycle_id}", response_model=MotorcycleResponse)
async def add_maintenance_endpoint(
    motorcycle_id: str,
    body: MaintenanceRecordRequest,
    user: User = Depends(get_current_user),
    motorcycles: MotorcycleStore = Depends(get_motorcycle_store),
) -> MotorcycleResponse:
    """Log a service on one of the current user's motorcycles."""
    return _motorcycle_response(await add_maintenance_record(motorcycles, motorcycle_id, user.id, body))


# ---------------------------------------------------------------------------
# Loves
# ---------------------------------------------------------------------------


@router.put("/love/{motorcycle_id}", response_model=list[ReactionResponse])
async def love_endpoint(
    motorcycle_id: str,
    user: User = Depends(get_current_user),
    motorcycles: MotorcycleStore = Depends(get_motorcycle_store),
) -> list[ReactionResponse]:
    return reactions_out(await love_motorcycle(motorcycles, motorcycle_id, user.id))


@router.put("/unlove/{motorcycle_id}", response_model=list[ReactionResponse])
async def unlove_endpoint(
    motorcycle_id: str,
    user: User = Depends(get_current_user),
    motorcycles: MotorcycleStore = Depends(get_motorcycle_store),
) -> list[ReactionResponse]:
    return reactions_out(await unlove_motorcycle(motorcycles, motorcycle_id, user.id))


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------


@router.post("/comment/{motorcycle_id}", response_model=list[CommentResponse])
async def comment_endpoint(
    motorcycle_id: str,
    body: CommentCreateRequest,
    user: User = Depends(get_current_user),
    motorcycles: MotorcycleStore = Depends(get_motorcycle_store),
) -> list[CommentResponse]:
    return comments_out(await comment_on_motorcycle(motorcycles, motorcycle_id, user, body.text))


@router.delete("/comment/{motorcycle_id}/{comment_id}", response_model=list[CommentResponse])
async def delete_comment_endpoint(
    motorcycle_id: str,
    comment_id: str,
    user: User = Depends(get_current_user),
    motorcycles: MotorcycleStore = Depends(get_motorcycle_store),
) -> list[CommentResponse]:
    return comments_out(await delete_motorcycle_comment(motorcycles, motorcycle_id, comment_id, user.id))
