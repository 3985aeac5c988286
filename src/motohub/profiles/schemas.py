"""Request/response schemas for profile endpoints."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field


class ProfileUpsertRequest(BaseModel):
    """Create-or-update body. ``status`` and ``skills`` are required; skills is comma separated."""

    status: str = Field(..., min_length=1)
    skills: str = Field(..., min_length=1, description="Comma-separated, e.g. 'Touring, Track days'")
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    github_username: str | None = None
    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None


class _DatedEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_date: dt.date = Field(..., alias="from")
    to_date: dt.date | None = Field(None, alias="to")
    current: bool = False
    description: str | None = None


class ExperienceRequest(_DatedEntry):
    title: str = Field(..., min_length=1)
    company: str = Field(..., min_length=1)
    location: str | None = None


class EducationRequest(_DatedEntry):
    school: str = Field(..., min_length=1)
    degree: str = Field(..., min_length=1)
    field_of_study: str = Field(..., min_length=1)


class ExperienceResponse(ExperienceRequest):
    id: str


class EducationResponse(EducationRequest):
    id: str


class ProfileUser(BaseModel):
    id: str
    name: str
    avatar: str | None = None


class ProfileResponse(BaseModel):
    id: str
    user: ProfileUser | None = None
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    status: str
    github_username: str | None = None
    skills: list[str]
    social: dict[str, str]
    experience: list[ExperienceResponse]
    education: list[EducationResponse]
    date: dt.datetime
