"""Global catalog of interest tags shared by every profile."""

from __future__ import annotations

import logging
import threading
import uuid
from typing import Iterable, List, Optional, Tuple

from .telemetry import emit_event
from .user_profile import Interest

logger = logging.getLogger(__name__)


def _normalize_name(value: str) -> str:
    return value.strip().lower()


class InterestCatalog:
    """Append-only interest list deduplicated by case-insensitive name."""

    def __init__(self, interests: Optional[Iterable[Interest]] = None) -> None:
        self._lock = threading.RLock()
        self._interests: List[Interest] = []
        for interest in interests or []:
            self._add_unlocked(interest)

    def __len__(self) -> int:
        with self._lock:
            return len(self._interests)

    def _add_unlocked(self, interest: Interest) -> Interest:
        existing = self._find_unlocked(interest.name)
        if existing is not None:
            logger.debug("Skipping duplicate interest %s (%s)", interest.id, interest.name)
            return existing
        stored = Interest(id=interest.id, name=interest.name.strip())
        self._interests.append(stored)
        return stored

    def _find_unlocked(self, name: str) -> Optional[Interest]:
        key = _normalize_name(name)
        if not key:
            return None
        for interest in self._interests:
            if _normalize_name(interest.name) == key:
                return interest
        return None

    def list(self) -> List[Interest]:
        with self._lock:
            return [interest.model_copy() for interest in self._interests]

    def get(self, interest_id: str) -> Optional[Interest]:
        with self._lock:
            for interest in self._interests:
                if interest.id == interest_id:
                    return interest.model_copy()
        return None

    def select(self, interest_ids: Iterable[str]) -> List[Interest]:
        """Return catalog entries whose id was requested, in catalog order."""
        wanted = set(interest_ids)
        with self._lock:
            selected = [interest.model_copy() for interest in self._interests if interest.id in wanted]
        missing = wanted.difference(interest.id for interest in selected)
        if missing:
            logger.debug("Ignoring unknown interest ids: %s", sorted(missing))
        return selected

    def find_by_name(self, name: str) -> Optional[Interest]:
        with self._lock:
            interest = self._find_unlocked(name)
            return interest.model_copy() if interest else None

    def get_or_create(self, name: str) -> Tuple[Interest, bool]:
        trimmed = name.strip()
        if not trimmed:
            raise ValueError("Interest name cannot be empty.")
        with self._lock:
            existing = self._find_unlocked(trimmed)
            if existing is not None:
                return existing.model_copy(), False
            created = Interest(id=str(uuid.uuid4()), name=trimmed)
            self._interests.append(created)
        logger.info("Created interest %s (%s)", created.id, created.name)
        emit_event("interest_created", interest_id=created.id, interest_name=created.name)
        return created.model_copy(), True


__all__ = ["InterestCatalog"]
