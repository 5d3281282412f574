"""User profile models and the onboarding completeness gate."""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from pydantic import BaseModel, Field, model_validator

REQUIRED_PROFILE_FIELDS = ("full_name", "location", "org", "workspace")
ONBOARDING_ROUTE = "/onboarding"
DASHBOARD_ROUTE = "/dashboard"


class Interest(BaseModel):
    id: str
    name: str


def dedupe_interests(interests: Iterable[Interest]) -> List[Interest]:
    """Collapse interests sharing an id, keeping the first occurrence in order."""
    seen: dict[str, Interest] = {}
    for interest in interests:
        if interest.id not in seen:
            seen[interest.id] = interest
    return list(seen.values())


class ProfileFields(BaseModel):
    """Profile content as supplied by the user, without identity fields."""

    full_name: str = ""
    profile_photo_url: Optional[str] = None
    location: str = ""
    org: str = ""
    workspace: str = ""
    interests: List[Interest] = Field(default_factory=list)
    bio: Optional[str] = None
    goals: Optional[str] = None

    @model_validator(mode="after")
    def _unique_interests(self) -> "ProfileFields":
        deduped = dedupe_interests(self.interests)
        if len(deduped) != len(self.interests):
            self.interests = deduped
        return self


class UserProfile(ProfileFields):
    user_id: str
    username: str

    def fields(self) -> ProfileFields:
        return ProfileFields.model_validate(self.model_dump(exclude={"user_id", "username"}))


class StoredUser(BaseModel):
    user_id: str
    username: str
    profile: Optional[UserProfile] = None


def _has_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def is_profile_complete(profile: Optional[UserProfile]) -> bool:
    if profile is None:
        return False
    has_required = all(_has_text(getattr(profile, field, None)) for field in REQUIRED_PROFILE_FIELDS)
    interests = getattr(profile, "interests", None)
    has_interests = interests is not None and len(interests) > 0
    return has_required and has_interests


def onboarding_route(profile: Optional[UserProfile]) -> str:
    """Where a user with this profile should land after authenticating."""
    return DASHBOARD_ROUTE if is_profile_complete(profile) else ONBOARDING_ROUTE


__all__ = [
    "DASHBOARD_ROUTE",
    "Interest",
    "ONBOARDING_ROUTE",
    "ProfileFields",
    "REQUIRED_PROFILE_FIELDS",
    "StoredUser",
    "UserProfile",
    "dedupe_interests",
    "is_profile_complete",
    "onboarding_route",
]
