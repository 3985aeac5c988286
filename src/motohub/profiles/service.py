"""Profile business logic: upsert, lookups, account deletion, experience and education."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

import structlog

from motohub.db.models import Profile
from motohub.errors import NotFound, ProfileNotFound
from motohub.profiles.merge import ProfileFields, apply_fields, build_profile, insert_entry, remove_entry

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from motohub.stores import ProfileStore, UserStore

logger = structlog.get_logger()


async def upsert_profile(profiles: ProfileStore, user_id: str, fields: ProfileFields) -> Profile:
    """Create the user's profile, or merge ``fields`` into the existing one."""
    profile = await profiles.get_by_user(user_id)
    if profile is not None:
        apply_fields(profile, fields)
        profile = await profiles.save(profile)
        logger.info("profile_updated", user_id=user_id, fields=sorted(fields.values))
        return profile

    profile = build_profile(user_id, fields)
    profile.date = datetime.now(timezone.utc)
    profile = await profiles.add(profile)
    logger.info("profile_created", user_id=user_id)
    return profile


async def get_own_profile(profiles: ProfileStore, user_id: str) -> Profile:
    profile = await profiles.get_by_user(user_id)
    if profile is None:
        raise ProfileNotFound
    return profile


async def get_profile_by_user(profiles: ProfileStore, user_id: str) -> Profile:
    profile = await profiles.get_by_user(user_id)
    if profile is None:
        msg = "Profile not found"
        raise NotFound(msg)
    return profile


async def list_profiles(profiles: ProfileStore) -> Sequence[Profile]:
    return await profiles.list_all()


async def delete_account(profiles: ProfileStore, users: UserStore, user_id: str) -> None:
    """Remove the profile and the user.

    Posts and motorcycles written by the user are left in place.
    """
    # TODO: remove the user's posts and motorcycles as well once ownership cleanup is agreed on.
    await profiles.delete_by_user(user_id)
    await users.delete(user_id)
    logger.info("account_deleted", user_id=user_id)


# ---------------------------------------------------------------------------
# Experience / education
# ---------------------------------------------------------------------------


async def add_experience(profiles: ProfileStore, user_id: str, entry: Mapping[str, Any]) -> Profile:
    """Front-insert an experience entry. The profile must already exist."""
    profile = await get_own_profile(profiles, user_id)
    stored = insert_entry(profile.experience, entry)
    logger.info("experience_added", user_id=user_id, entry_id=stored["id"])
    return await profiles.save(profile)


async def remove_experience(profiles: ProfileStore, user_id: str, exp_id: str) -> Profile:
    profile = await get_own_profile(profiles, user_id)
    remove_entry(profile.experience, exp_id, "Experience")
    logger.info("experience_removed", user_id=user_id, entry_id=exp_id)
    return await profiles.save(profile)


async def add_education(profiles: ProfileStore, user_id: str, entry: Mapping[str, Any]) -> Profile:
    """Front-insert an education entry. The profile must already exist."""
    profile = await get_own_profile(profiles, user_id)
    stored = insert_entry(profile.education, entry)
    logger.info("education_added", user_id=user_id, entry_id=stored["id"])
    return await profiles.save(profile)


async def remove_education(profiles: ProfileStore, user_id: str, education_id: str) -> Profile:
    profile = await get_own_profile(profiles, user_id)
    remove_entry(profile.education, education_id, "Education")
    logger.info("education_removed", user_id=user_id, entry_id=education_id)
    return await profiles.save(profile)
