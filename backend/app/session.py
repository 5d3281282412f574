"""Session identity resolution from the request header or cookie."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, Response, status

from .config import Settings
from .context import AppContext, get_app_context

logger = logging.getLogger(__name__)


def get_session_user_id(
    request: Request,
    context: AppContext = Depends(get_app_context),
) -> Optional[str]:
    """Return the caller's user id, preferring the header over the cookie."""
    settings = context.settings
    raw = request.headers.get(settings.user_header) or request.cookies.get(settings.user_cookie)
    if raw is None:
        return None
    user_id = raw.strip()
    return user_id or None


def require_user_id(user_id: Optional[str] = Depends(get_session_user_id)) -> str:
    if user_id is None:
        logger.debug("Rejecting request without a session user id")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated.",
        )
    return user_id


def set_session_cookies(response: Response, settings: Settings, user_id: str, onboarded: bool) -> None:
    response.set_cookie(
        settings.user_cookie,
        user_id,
        max_age=settings.cookie_max_age,
        path="/",
        samesite="lax",
    )
    set_onboarding_cookie(response, settings, onboarded)


def set_onboarding_cookie(response: Response, settings: Settings, onboarded: bool) -> None:
    response.set_cookie(
        settings.onboarding_cookie,
        "1" if onboarded else "0",
        max_age=settings.cookie_max_age,
        path="/",
        samesite="lax",
    )


def clear_session_cookies(response: Response, settings: Settings) -> None:
    for name in (settings.user_cookie, settings.onboarding_cookie):
        response.delete_cookie(name, path="/", samesite="lax")


__all__ = [
    "clear_session_cookies",
    "get_session_user_id",
    "require_user_id",
    "set_onboarding_cookie",
    "set_session_cookies",
]
