"""Pydantic request and response bodies for the HTTP API."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

from .user_profile import UserProfile


class LoginRequest(BaseModel):
    username: Optional[str] = Field(default=None, description="Employee id, username, or full name")


class SessionPayload(BaseModel):
    user_id: str
    username: str
    profile: Optional[UserProfile] = None
    onboarding_complete: bool = False
    next_route: str


class ProfileStatePayload(BaseModel):
    user_id: str
    profile: Optional[UserProfile] = None
    onboarding_complete: bool = False
    next_route: str


class StatusPayload(BaseModel):
    status: Literal["success", "error"] = "success"
    message: Optional[str] = None


class JoinCommunityRequest(BaseModel):
    community_id: Optional[str] = None


class JoinCommunityPayload(BaseModel):
    message: str
    community_id: str
    slack_url: str


class ScheduleChatRequest(BaseModel):
    invitee_user_id: Optional[str] = None


class ScheduleChatPayload(BaseModel):
    message: str
    invitee_user_id: str


class HealthPayload(BaseModel):
    status: str = "ok"
    users: int
    interests: int


__all__ = [
    "HealthPayload",
    "JoinCommunityPayload",
    "JoinCommunityRequest",
    "LoginRequest",
    "ProfileStatePayload",
    "ScheduleChatPayload",
    "ScheduleChatRequest",
    "SessionPayload",
    "StatusPayload",
]
