"""Process-level container for the identity store and interest catalog."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Request

from .config import Settings, get_settings
from .identity_store import IdentityStore
from .interest_catalog import InterestCatalog
from .seed_data import DEMO_INTERESTS, demo_profiles

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    settings: Settings
    identity_store: IdentityStore
    interest_catalog: InterestCatalog


def build_context(settings: Optional[Settings] = None, *, seed: Optional[bool] = None) -> AppContext:
    settings = settings or get_settings()
    should_seed = settings.seed_demo_data if seed is None else seed
    store = IdentityStore(
        eid_prefix=settings.eid_prefix,
        eid_max_attempts=settings.eid_max_attempts,
    )
    catalog = InterestCatalog(DEMO_INTERESTS if should_seed else None)
    if should_seed:
        store.seed(demo_profiles())
    logger.info(
        "Built application context (users=%d, interests=%d, seeded=%s)",
        len(store),
        len(catalog),
        should_seed,
    )
    return AppContext(settings=settings, identity_store=store, interest_catalog=catalog)


def get_app_context(request: Request) -> AppContext:
    context = getattr(request.app.state, "context", None)
    if context is None:
        context = build_context()
        request.app.state.context = context
    return context


__all__ = ["AppContext", "build_context", "get_app_context"]
