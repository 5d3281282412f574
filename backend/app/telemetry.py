"""Structured telemetry for identity and profile lifecycle events.

Events are fanned out to in-process listeners and mirrored to the
``onematch.telemetry`` logger as a single JSON line each, which is what the
log shipper picks up in deployed environments.
"""

from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from threading import RLock
from typing import Any, Callable, Dict, Iterator, List

logger = logging.getLogger("onematch.telemetry")

KNOWN_EVENTS = frozenset(
    {
        "user_created",
        "user_login",
        "profile_saved",
        "interest_created",
        "community_join_requested",
        "chat_requested",
    }
)


@dataclass(frozen=True)
class TelemetryEvent:
    name: str
    payload: Dict[str, Any]


Listener = Callable[[TelemetryEvent], None]

_listeners: List[Listener] = []
_lock = RLock()


def register_listener(listener: Listener) -> None:
    with _lock:
        _listeners.append(listener)


def unregister_listener(listener: Listener) -> None:
    with _lock:
        try:
            _listeners.remove(listener)
        except ValueError:
            pass


def clear_listeners() -> None:
    """Remove all registered listeners. Mainly used to reset test state."""
    with _lock:
        _listeners.clear()


@contextmanager
def capture_events() -> Iterator[List[TelemetryEvent]]:
    """Collect every event emitted inside the block."""
    captured: List[TelemetryEvent] = []
    register_listener(captured.append)
    try:
        yield captured
    finally:
        unregister_listener(captured.append)


def emit_event(event_name: str, /, **fields: Any) -> None:
    """Emit an event; payload fields may use any key, including ``name``."""
    if event_name not in KNOWN_EVENTS:
        logger.warning("Emitting unregistered telemetry event %s", event_name)
    event = TelemetryEvent(name=event_name, payload=_sanitize(fields))

    with _lock:
        listeners = list(_listeners)

    for listener in listeners:
        try:
            listener(event)
        except Exception:  # noqa: BLE001
            logger.exception("Telemetry listener failed for %s", event_name)

    logger.info("TELEMETRY %s", json.dumps({**event.payload, "event": event_name}, default=str))


def _sanitize(fields: Dict[str, Any]) -> Dict[str, Any]:
    sanitized: Dict[str, Any] = {}
    for key, value in fields.items():
        if value is None:
            continue
        if isinstance(value, datetime):
            sanitized[key] = value.isoformat()
        elif isinstance(value, (set, frozenset)):
            sanitized[key] = sorted(value)
        elif isinstance(value, tuple):
            sanitized[key] = list(value)
        else:
            sanitized[key] = value
    return sanitized


__all__ = [
    "KNOWN_EVENTS",
    "TelemetryEvent",
    "capture_events",
    "clear_listeners",
    "emit_event",
    "register_listener",
    "unregister_listener",
]
