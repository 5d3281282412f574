"""Login and logout endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from .api_models import LoginRequest, SessionPayload, StatusPayload
from .context import AppContext, get_app_context
from .identity_store import EidGenerationError
from .session import clear_session_cookies, set_session_cookies
from .telemetry import emit_event
from .user_profile import is_profile_complete, onboarding_route

router = APIRouter(prefix="/api/auth", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/login", response_model=SessionPayload, status_code=status.HTTP_200_OK)
def login(
    payload: LoginRequest,
    response: Response,
    context: AppContext = Depends(get_app_context),
) -> SessionPayload:
    identifier = (payload.username or "").strip()
    if not identifier:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="username is required",
        )
    store = context.identity_store
    existing = store.find_user_by_identifier(identifier)
    try:
        user = existing if existing is not None else store.get_or_create_user(identifier)
    except EidGenerationError as exc:
        logger.error("Login failed for %r: %s", identifier, exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Unable to allocate an employee id right now.",
        ) from exc

    profile = store.get_user_profile(user.user_id)
    complete = is_profile_complete(profile)
    set_session_cookies(response, context.settings, user.user_id, complete)
    emit_event("user_login", user_id=user.user_id, returning=existing is not None, complete=complete)
    return SessionPayload(
        user_id=user.user_id,
        username=user.username,
        profile=profile,
        onboarding_complete=complete,
        next_route=onboarding_route(profile),
    )


@router.post("/logout", response_model=StatusPayload, status_code=status.HTTP_200_OK)
def logout(response: Response, context: AppContext = Depends(get_app_context)) -> StatusPayload:
    clear_session_cookies(response, context.settings)
    return StatusPayload(status="success")
