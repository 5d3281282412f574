"""Merging partial profile edits into a user's canonical profile."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional, Sequence, TypeVar

from pydantic import BaseModel, Field

from .interest_catalog import InterestCatalog
from .telemetry import emit_event
from .user_profile import Interest, ProfileFields, UserProfile, dedupe_interests, is_profile_complete

if TYPE_CHECKING:
    from .context import AppContext

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MissingIdentityError(PermissionError):
    """Raised when an operation that needs a user id was given none."""


class ProfileUpdateRequest(BaseModel):
    full_name: Optional[str] = None
    profile_photo_url: Optional[str] = None
    location: Optional[str] = None
    org: Optional[str] = None
    workspace: Optional[str] = None
    bio: Optional[str] = None
    goals: Optional[str] = None
    interest_ids: Optional[List[str]] = Field(default=None)
    new_interests: Optional[List[str]] = Field(default=None)

    @property
    def touches_interests(self) -> bool:
        return self.interest_ids is not None or self.new_interests is not None


def _pick(new: Optional[T], previous: Optional[T], default: T) -> T:
    if new is not None:
        return new
    if previous is not None:
        return previous
    return default


def resolve_interests(
    catalog: InterestCatalog,
    interest_ids: Optional[Sequence[str]],
    new_interests: Optional[Sequence[str]],
) -> List[Interest]:
    selected = catalog.select(interest_ids or [])
    created: List[Interest] = []
    for raw in new_interests or []:
        name = raw.strip()
        if not name:
            continue
        interest, _ = catalog.get_or_create(name)
        created.append(interest)
    return dedupe_interests([*selected, *created])


def merge_profile_fields(
    previous: Optional[ProfileFields],
    request: ProfileUpdateRequest,
    interests: List[Interest],
) -> ProfileFields:
    """Combine an update with the prior profile: new value, then previous, then default."""
    prior = previous or ProfileFields()
    return ProfileFields(
        full_name=_pick(request.full_name, prior.full_name, ""),
        profile_photo_url=_pick(request.profile_photo_url, prior.profile_photo_url, None),
        location=_pick(request.location, prior.location, ""),
        org=_pick(request.org, prior.org, ""),
        workspace=_pick(request.workspace, prior.workspace, ""),
        bio=_pick(request.bio, prior.bio, None),
        goals=_pick(request.goals, prior.goals, None),
        interests=interests,
    )


def apply_profile_update(
    context: "AppContext",
    user_id: Optional[str],
    request: ProfileUpdateRequest,
) -> UserProfile:
    if not user_id or not user_id.strip():
        raise MissingIdentityError("A user id is required to update a profile.")
    store = context.identity_store
    with store.locked():
        previous = store.get_user_profile(user_id)
        if request.touches_interests:
            interests = resolve_interests(context.interest_catalog, request.interest_ids, request.new_interests)
        else:
            interests = list(previous.interests) if previous else []
        fields = merge_profile_fields(previous.fields() if previous else None, request, interests)
        profile = store.save_user_profile(user_id, fields)
    complete = is_profile_complete(profile)
    logger.info("Saved profile for %s (complete=%s)", profile.user_id, complete)
    emit_event(
        "profile_saved",
        user_id=profile.user_id,
        interest_count=len(profile.interests),
        complete=complete,
    )
    return profile


__all__ = [
    "MissingIdentityError",
    "ProfileUpdateRequest",
    "apply_profile_update",
    "merge_profile_fields",
    "resolve_interests",
]
