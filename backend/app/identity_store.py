"""In-memory user identity store with multi-key identity resolution."""

from __future__ import annotations

import logging
import random
import re
import string
import threading
from contextlib import contextmanager
from typing import Dict, Iterable, Iterator, List, Optional

from .telemetry import emit_event
from .user_profile import ProfileFields, StoredUser, UserProfile

logger = logging.getLogger(__name__)

EID_PATTERN = re.compile(r"^[A-Z][A-Z0-9]{5}$", re.IGNORECASE)
DEFAULT_EID_PREFIX = "E"
DEFAULT_EID_MAX_ATTEMPTS = 1000
_WHITESPACE = re.compile(r"\s+")


class EidGenerationError(RuntimeError):
    """Raised when no unused synthetic employee id could be produced."""


def normalize_identity(value: Optional[str]) -> str:
    return value.strip().lower() if value else ""


def is_eid(value: str) -> bool:
    return bool(EID_PATTERN.match(value.strip()))


class IdentityStore:
    """Canonical user records keyed by user id, reachable by any indexed identity.

    The identity index maps normalized usernames, user ids and full names to a
    user id. A key stays with the first user that claimed it, so a later
    profile save or session id can never take another user's login key.
    Every mutation of the store and its index happens under a single
    re-entrant lock so the two maps never drift apart. Records handed back
    to callers are deep copies.
    """

    def __init__(
        self,
        *,
        eid_prefix: str = DEFAULT_EID_PREFIX,
        eid_max_attempts: int = DEFAULT_EID_MAX_ATTEMPTS,
        rng: Optional[random.Random] = None,
    ) -> None:
        if len(eid_prefix) != 1 or not eid_prefix.isalpha():
            raise ValueError("EID prefix must be a single letter.")
        self._eid_prefix = eid_prefix.upper()
        self._eid_max_attempts = eid_max_attempts
        self._rng = rng or random.SystemRandom()
        self._users: Dict[str, StoredUser] = {}
        self._identity_index: Dict[str, str] = {}
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    @contextmanager
    def locked(self) -> Iterator[None]:
        """Hold the store lock across a multi-step read-modify-write."""
        with self._lock:
            yield

    @staticmethod
    def _clone(user: StoredUser) -> StoredUser:
        return user.model_copy(deep=True)

    def _index_identity(self, user: StoredUser, *identities: Optional[str]) -> None:
        for identity in identities:
            key = normalize_identity(identity)
            if not key:
                continue
            owner = self._identity_index.get(key)
            if owner is None:
                self._identity_index[key] = user.user_id
            elif owner != user.user_id:
                logger.info("Identity key %r already belongs to %s; not indexing it for %s", key, owner, user.user_id)

    def _insert_unlocked(self, user: StoredUser, *identities: Optional[str]) -> None:
        self._users[user.user_id] = user
        self._index_identity(user, *identities)

    def seed(self, profiles: Iterable[UserProfile]) -> None:
        with self._lock:
            for profile in profiles:
                stored = StoredUser(
                    user_id=profile.user_id,
                    username=profile.username,
                    profile=profile.model_copy(deep=True),
                )
                self._insert_unlocked(stored, profile.username, profile.user_id, profile.full_name)
        logger.debug("Seeded identity store; %d users loaded", len(self))

    def generate_eid(self) -> str:
        letters = string.ascii_uppercase
        with self._lock:
            for _ in range(self._eid_max_attempts):
                block = "".join(self._rng.choice(letters) for _ in range(3))
                digits = self._rng.randint(100, 999)
                candidate = f"{self._eid_prefix}{block}{digits}"
                if candidate not in self._users:
                    return candidate
        logger.error("Exhausted %d attempts generating a synthetic EID", self._eid_max_attempts)
        raise EidGenerationError(
            f"Could not generate an unused employee id after {self._eid_max_attempts} attempts."
        )

    def _find_unlocked(self, identifier: Optional[str]) -> Optional[StoredUser]:
        user_id = self._identity_index.get(normalize_identity(identifier))
        if user_id is None:
            return None
        return self._users.get(user_id)

    def find_user_by_identifier(self, identifier: Optional[str]) -> Optional[StoredUser]:
        with self._lock:
            user = self._find_unlocked(identifier)
            return self._clone(user) if user else None

    def get_user_by_id(self, user_id: str) -> Optional[StoredUser]:
        with self._lock:
            user = self._users.get(user_id)
            return self._clone(user) if user else None

    def get_or_create_user(self, identifier: str) -> StoredUser:
        trimmed = identifier.strip() if identifier else ""
        if not trimmed:
            raise ValueError("Identifier cannot be empty.")
        with self._lock:
            existing = self._find_unlocked(trimmed)
            if existing is not None:
                return self._clone(existing)

            if is_eid(trimmed):
                user_id = trimmed.upper()
                username = trimmed.lower()
            else:
                user_id = self.generate_eid()
                username = _WHITESPACE.sub("", normalize_identity(trimmed)) or user_id.lower()

            stored = StoredUser(user_id=user_id, username=username, profile=None)
            self._insert_unlocked(stored, username, user_id, trimmed, user_id.lower())
        logger.info("Created user %s (username=%s)", user_id, username)
        emit_event("user_created", user_id=user_id, username=username, synthetic_id=not is_eid(trimmed))
        return self._clone(stored)

    def _ensure_unlocked(self, user_id: str, fallback_username: Optional[str] = None) -> StoredUser:
        existing = self._users.get(user_id)
        if existing is not None:
            return existing
        stored = StoredUser(
            user_id=user_id,
            username=fallback_username or user_id.lower(),
            profile=None,
        )
        self._insert_unlocked(stored, stored.username, user_id, user_id.lower())
        logger.info("Registered user %s from an unresolved session id", user_id)
        return stored

    def ensure_user(self, user_id: str, fallback_username: Optional[str] = None) -> StoredUser:
        with self._lock:
            return self._clone(self._ensure_unlocked(user_id, fallback_username))

    def save_user_profile(self, user_id: str, fields: ProfileFields) -> UserProfile:
        with self._lock:
            stored = self._ensure_unlocked(user_id)
            profile = UserProfile(
                user_id=stored.user_id,
                username=stored.username,
                **fields.model_dump(),
            )
            stored.profile = profile
            self._index_identity(stored, stored.username, stored.user_id, profile.full_name)
            return profile.model_copy(deep=True)

    def get_user_profile(self, user_id: str) -> Optional[UserProfile]:
        with self._lock:
            stored = self._users.get(user_id)
            if stored is None or stored.profile is None:
                return None
            return stored.profile.model_copy(deep=True)

    def list_users(self) -> List[StoredUser]:
        with self._lock:
            return [self._clone(user) for user in self._users.values()]


__all__ = [
    "DEFAULT_EID_MAX_ATTEMPTS",
    "DEFAULT_EID_PREFIX",
    "EID_PATTERN",
    "EidGenerationError",
    "IdentityStore",
    "is_eid",
    "normalize_identity",
]
