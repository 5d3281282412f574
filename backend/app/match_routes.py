"""Recommended matches, network graph, and follow-up actions.

Match data is static; nothing here ranks or scores users.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from .api_models import (
    JoinCommunityPayload,
    JoinCommunityRequest,
    ScheduleChatPayload,
    ScheduleChatRequest,
)
from .seed_data import COMMUNITY_MATCHES, NETWORK_GRAPH, USER_MATCHES, CommunityMatch, NetworkGraph, UserMatch
from .session import get_session_user_id
from .telemetry import emit_event

router = APIRouter(prefix="/api", tags=["matches"])
logger = logging.getLogger(__name__)

SLACK_CHANNEL_URL = "slack://channel?team=T12345&id=C67890"


def _required(value: Optional[str], field: str) -> str:
    trimmed = (value or "").strip()
    if not trimmed:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{field} is required",
        )
    return trimmed


@router.get("/matches/users", response_model=List[UserMatch], status_code=status.HTTP_200_OK)
def user_matches() -> List[UserMatch]:
    return [match.model_copy(deep=True) for match in USER_MATCHES]


@router.get("/matches/communities", response_model=List[CommunityMatch], status_code=status.HTTP_200_OK)
def community_matches() -> List[CommunityMatch]:
    return [match.model_copy(deep=True) for match in COMMUNITY_MATCHES]


@router.get("/network/{user_id}", response_model=NetworkGraph, status_code=status.HTTP_200_OK)
def network_graph(user_id: str) -> NetworkGraph:
    logger.debug("Serving network graph for %s", user_id)
    return NETWORK_GRAPH.model_copy(deep=True)


@router.post("/actions/join-community", response_model=JoinCommunityPayload, status_code=status.HTTP_200_OK)
def join_community(
    payload: JoinCommunityRequest,
    user_id: Optional[str] = Depends(get_session_user_id),
) -> JoinCommunityPayload:
    community_id = _required(payload.community_id, "community_id")
    emit_event("community_join_requested", user_id=user_id, community_id=community_id)
    return JoinCommunityPayload(
        message="Successfully joined community!",
        community_id=community_id,
        slack_url=SLACK_CHANNEL_URL,
    )


@router.post("/actions/schedule-chat", response_model=ScheduleChatPayload, status_code=status.HTTP_200_OK)
def schedule_chat(
    payload: ScheduleChatRequest,
    user_id: Optional[str] = Depends(get_session_user_id),
) -> ScheduleChatPayload:
    invitee = _required(payload.invitee_user_id, "invitee_user_id")
    emit_event("chat_requested", user_id=user_id, invitee_user_id=invitee)
    return ScheduleChatPayload(message="Coffee chat suggested!", invitee_user_id=invitee)
