"""
Sparse profile merge.

``ProfileFields`` records which fields the caller supplied: a key in
``values`` is present, a missing key is omitted. Applying it to a stored
profile overwrites present keys, leaves omitted keys alone, and replaces the
social links wholesale with whatever subset was supplied (omitted platforms
are cleared).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from motohub.db.base import new_id
from motohub.db.models import Profile
from motohub.errors import EntryNotFound

MERGEABLE_FIELDS = frozenset(
    {"company", "website", "location", "bio", "status", "github_username", "skills"}
)
SOCIAL_PLATFORMS = ("youtube", "twitter", "facebook", "linkedin", "instagram")


def parse_skills(raw: str) -> list[str]:
    """Split on commas and trim each item. Empty items are kept."""
    return [skill.strip() for skill in raw.split(",")]


@dataclass
class ProfileFields:
    values: dict[str, Any] = field(default_factory=dict)
    social: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        unknown = set(self.values) - MERGEABLE_FIELDS
        if unknown:
            msg = f"Unknown profile fields: {sorted(unknown)}"
            raise ValueError(msg)
        bad_links = set(self.social) - set(SOCIAL_PLATFORMS)
        if bad_links:
            msg = f"Unknown social platforms: {sorted(bad_links)}"
            raise ValueError(msg)

    @classmethod
    def from_input(
        cls,
        *,
        skills: str | None = None,
        social: Mapping[str, str | None] | None = None,
        **scalars: str | None,
    ) -> ProfileFields:
        """Build from raw request values. Empty or missing values count as omitted."""
        values: dict[str, Any] = {k: v for k, v in scalars.items() if v}
        if skills:
            values["skills"] = parse_skills(skills)
        links = {k: v for k, v in (social or {}).items() if v}
        return cls(values=values, social=links)

    def is_present(self, name: str) -> bool:
        return name in self.values


def apply_fields(profile: Profile, fields: ProfileFields) -> Profile:
    """Merge ``fields`` into an existing profile in place."""
    for name, value in fields.values.items():
        setattr(profile, name, value)
    profile.social = dict(fields.social)
    return profile


def build_profile(user_id: str, fields: ProfileFields) -> Profile:
    """A new profile holding exactly the supplied fields."""
    profile = Profile(
        user_id=user_id,
        skills=[],
        social={},
        experience=[],
        education=[],
    )
    return apply_fields(profile, fields)


def insert_entry(entries: list[dict[str, Any]], entry: Mapping[str, Any]) -> dict[str, Any]:
    """Front-insert a copy of ``entry`` with a fresh id; returns the stored entry."""
    stored = {"id": new_id(), **entry}
    entries.insert(0, stored)
    return stored


def remove_entry(entries: list[dict[str, Any]], entry_id: str, label: str = "Entry") -> dict[str, Any]:
    """Remove exactly the entry with ``entry_id``. Raises EntryNotFound."""
    ids = [e["id"] for e in entries]
    if entry_id not in ids:
        msg = f"{label} not found"
        raise EntryNotFound(msg)
    return entries.pop(ids.index(entry_id))
