"""Request/response schemas for motorcycle endpoints."""

from __future__ import annotations

import datetime as dt
from typing import Any

from pydantic import BaseModel, Field

from motohub.social.schemas import CommentResponse, ReactionResponse


class InsuranceIn(BaseModel):
    provider: str | None = None
    policy_number: str | None = None
    valid_from: dt.date | None = None
    valid_to: dt.date | None = None


class MotorcycleSocial(BaseModel):
    """Links for the bike's own channels. Empty values are dropped."""

    youtube: str | None = None
    instagram: str | None = None
    reddit: str | None = None
    tiktok: str | None = None
    facebook: str | None = None
    x: str | None = None

    def links(self) -> dict[str, str]:
        return {k: v for k, v in self.model_dump().items() if v}


class MotorcycleCreateRequest(BaseModel):
    make: str = Field(..., min_length=1)
    model: str = Field(..., min_length=1)
    year: int
    price: float
    type: str = Field(..., min_length=1, description="Cruiser, Sport, Touring, ...")
    engine_capacity: str = Field(..., min_length=1, description="e.g. 600cc")
    status: str = Field(..., min_length=1, description="Available, Sold, Maintenance, ...")
    mileage: float | None = None
    color: str | None = None
    accessories: list[str] = Field(default_factory=list)
    insurance: InsuranceIn | None = None
    social: MotorcycleSocial | None = None


class MaintenanceRecordRequest(BaseModel):
    service_type: str = Field(..., min_length=1)
    date: dt.date
    description: str | None = None


class MaintenanceRecordResponse(BaseModel):
    id: str
    service_type: str
    date: dt.date
    description: str | None = None


class MotorcycleResponse(BaseModel):
    id: str
    user: str
    make: str
    model: str
    year: int
    price: float
    type: str
    engine_capacity: str
    mileage: float | None = None
    color: str | None = None
    status: str
    maintenance_history: list[MaintenanceRecordResponse]
    insurance: dict[str, Any] | None = None
    accessories: list[str]
    social: dict[str, str]
    loves: list[ReactionResponse]
    comments: list[CommentResponse]
    date: dt.datetime
