"""Profile router: all /api/profile/* endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from motohub.auth.dependencies import get_current_user
from motohub.db.models import Profile, User
from motohub.dependencies import get_profile_store, get_user_store
from motohub.github.client import GitHubClient, get_github_client
from motohub.profiles.merge import SOCIAL_PLATFORMS, ProfileFields
from motohub.profiles.schemas import (
    EducationRequest,
    EducationResponse,
    ExperienceRequest,
    ExperienceResponse,
    ProfileResponse,
    ProfileUpsertRequest,
    ProfileUser,
)
from motohub.profiles.service import (
    add_education,
    add_experience,
    delete_account,
    get_own_profile,
    get_profile_by_user,
    list_profiles,
    remove_education,
    remove_experience,
    upsert_profile,
)
from motohub.stores import ProfileStore, UserStore

router = APIRouter(prefix="/api/profile", tags=["Profiles"])


def _profile_response(profile: Profile) -> ProfileResponse:
    user = profile.user
    return ProfileResponse(
        id=profile.id,
        user=ProfileUser(id=user.id, name=user.name, avatar=user.avatar) if user else None,
        company=profile.company,
        website=profile.website,
        location=profile.location,
        bio=profile.bio,
        status=profile.status,
        github_username=profile.github_username,
        skills=list(profile.skills),
        social=dict(profile.social),
        experience=[ExperienceResponse(**e) for e in profile.experience],
        education=[EducationResponse(**e) for e in profile.education],
        date=profile.date,
    )


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------


@router.get("/me", response_model=ProfileResponse)
async def get_my_profile(
    user: User = Depends(get_current_user),
    profiles: ProfileStore = Depends(get_profile_store),
) -> ProfileResponse:
    return _profile_response(await get_own_profile(profiles, user.id))


@router.post("", response_model=ProfileResponse)
async def upsert_my_profile(
    body: ProfileUpsertRequest,
    user: User = Depends(get_current_user),
    profiles: ProfileStore = Depends(get_profile_store),
) -> ProfileResponse:
    """Create or update the current user's profile."""
    fields = ProfileFields.from_input(
        status=body.status,
        skills=body.skills,
        company=body.company,
        website=body.website,
        location=body.location,
        bio=body.bio,
        github_username=body.github_username,
        social={platform: getattr(body, platform) for platform in SOCIAL_PLATFORMS},
    )
    return _profile_response(await upsert_profile(profiles, user.id, fields))


@router.get("", response_model=list[ProfileResponse])
async def list_profiles_endpoint(
    profiles: ProfileStore = Depends(get_profile_store),
) -> list[ProfileResponse]:
    """All profiles (public)."""
    return [_profile_response(p) for p in await list_profiles(profiles)]


@router.get("/user/{user_id}", response_model=ProfileResponse)
async def get_profile_by_user_endpoint(
    user_id: str,
    profiles: ProfileStore = Depends(get_profile_store),
) -> ProfileResponse:
    """Profile of a given user (public)."""
    return _profile_response(await get_profile_by_user(profiles, user_id))


@router.delete("")
async def delete_my_account(
    user: User = Depends(get_current_user),
    profiles: ProfileStore = Depends(get_profile_store),
    users: UserStore = Depends(get_user_store),
) -> dict[str, str]:
    """Delete the current user's profile and account."""
    await delete_account(profiles, users, user.id)
    return {"detail": "User deleted"}


# ---------------------------------------------------------------------------
# Experience
# ---------------------------------------------------------------------------


@router.put("/experience", response_model=ProfileResponse)
async def add_experience_endpoint(
    body: ExperienceRequest,
    user: User = Depends(get_current_user),
    profiles: ProfileStore = Depends(get_profile_store),
) -> ProfileResponse:
    entry = body.model_dump(mode="json", by_alias=True)
    return _profile_response(await add_experience(profiles, user.id, entry))


@router.delete("/experience/{exp_id}", response_model=ProfileResponse)
async def remove_experience_endpoint(
    exp_id: str,
    user: User = Depends(get_current_user),
    profiles: ProfileStore = Depends(get_profile_store),
) -> ProfileResponse:
    return _profile_response(await remove_experience(profiles, user.id, exp_id))


# ---------------------------------------------------------------------------
# Education
# ---------------------------------------------------------------------------


@router.put("/education", response_model=ProfileResponse)
async def add_education_endpoint(
    body: EducationRequest,
    user: User = Depends(get_current_user),
    profiles: ProfileStore = Depends(get_profile_store),
) -> ProfileResponse:
    entry = body.model_dump(mode="json", by_alias=True)
    return _profile_response(await add_education(profiles, user.id, entry))


@router.delete("/education/{education_id}", response_model=ProfileResponse)
async def remove_education_endpoint(
    education_id: str,
    user: User = Depends(get_current_user),
    profiles: ProfileStore = Depends(get_profile_store),
) -> ProfileResponse:
    return _profile_response(await remove_education(profiles, user.id, education_id))


# ---------------------------------------------------------------------------
# GitHub
# ---------------------------------------------------------------------------


@router.get("/github/{username}")
async def github_repos(
    username: str,
    github: GitHubClient = Depends(get_github_client),
) -> list[dict[str, Any]]:
    """Latest public repositories of a GitHub user (public)."""
    return await github.list_repos(username)
