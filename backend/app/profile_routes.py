"""Profile endpoints for the signed-in user."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status

from .api_models import ProfileStatePayload
from .context import AppContext, get_app_context
from .interest_catalog import InterestCatalog
from .profile_update import ProfileUpdateRequest, apply_profile_update
from .session import require_user_id, set_onboarding_cookie
from .user_profile import Interest, UserProfile, is_profile_complete, onboarding_route

router = APIRouter(prefix="/api", tags=["profile"])


def _state_payload(user_id: str, profile: Optional[UserProfile]) -> ProfileStatePayload:
    return ProfileStatePayload(
        user_id=user_id,
        profile=profile,
        onboarding_complete=is_profile_complete(profile),
        next_route=onboarding_route(profile),
    )


@router.get("/users/me/profile", response_model=ProfileStatePayload, status_code=status.HTTP_200_OK)
def get_my_profile(
    user_id: str = Depends(require_user_id),
    context: AppContext = Depends(get_app_context),
) -> ProfileStatePayload:
    profile = context.identity_store.get_user_profile(user_id)
    return _state_payload(user_id, profile)


@router.put("/users/me/profile", response_model=ProfileStatePayload, status_code=status.HTTP_200_OK)
def update_my_profile(
    payload: ProfileUpdateRequest,
    response: Response,
    user_id: str = Depends(require_user_id),
    context: AppContext = Depends(get_app_context),
) -> ProfileStatePayload:
    profile = apply_profile_update(context, user_id, payload)
    state = _state_payload(profile.user_id, profile)
    set_onboarding_cookie(response, context.settings, state.onboarding_complete)
    return state


@router.get("/interests", response_model=List[Interest], status_code=status.HTTP_200_OK)
def list_interests(context: AppContext = Depends(get_app_context)) -> List[Interest]:
    catalog: InterestCatalog = context.interest_catalog
    return catalog.list()
