"""Synchronous publish/subscribe bus for theme editor notifications.

Goals:
 - Decouple the selection state from the window (no Qt dependency here)
 - Safe error isolation: one failing handler doesn't break the publish cycle
 - One-shot (once) subscriptions and cancellable handles
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from threading import RLock
from time import perf_counter
from typing import Any, Dict, List, Protocol

__all__ = [
    "ThemeEvent",
    "Event",
    "EventBus",
    "EventHandler",
    "Subscription",
]


class ThemeEvent(str, Enum):
    BASE_THEME_SELECTED = "base_theme_selected"
    CUSTOM_RESET = "custom_reset"
    EDIT_PENDING = "edit_pending"
    EDIT_REJECTED = "edit_rejected"
    PALETTE_CHANGED = "palette_changed"
    LOG_RECORD_ADDED = "log_record_added"


@dataclass
class Event:
    name: str
    payload: Any
    timestamp: float


class EventHandler(Protocol):
    def __call__(self, event: Event) -> None: ...  # pragma: no cover - structural


@dataclass
class Subscription:
    event: str
    handler: EventHandler
    once: bool
    active: bool = True

    def cancel(self) -> None:
        self.active = False


class EventBus:
    """Synchronous event dispatcher.

    Handlers are invoked in subscription order without the lock held, so a
    handler may subscribe or unsubscribe while being dispatched.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._subs: Dict[str, List[Subscription]] = {}
        self._errors: List[tuple[Event, BaseException]] = []

    # Subscription management -------------------------------------------
    def subscribe(
        self, name: str | ThemeEvent, handler: EventHandler, *, once: bool = False
    ) -> Subscription:
        key = name.value if isinstance(name, ThemeEvent) else name
        sub = Subscription(event=key, handler=handler, once=once)
        with self._lock:
            self._subs.setdefault(key, []).append(sub)
        return sub

    def unsubscribe(self, sub: Subscription) -> None:
        with self._lock:
            bucket = self._subs.get(sub.event)
            if bucket:
                self._subs[sub.event] = [s for s in bucket if s is not sub]
                if not self._subs[sub.event]:
                    self._subs.pop(sub.event, None)
        sub.active = False

    def clear(self) -> None:
        with self._lock:
            self._subs.clear()
            self._errors.clear()

    # Publishing ----------------------------------------------------------
    def publish(self, name: str | ThemeEvent, payload: Any = None) -> Event:
        key = name.value if isinstance(name, ThemeEvent) else name
        evt = Event(name=key, payload=payload, timestamp=perf_counter())
        with self._lock:
            subs = list(self._subs.get(key, ()))
        finished: List[Subscription] = []
        for sub in subs:
            if not sub.active:
                continue
            try:
                sub.handler(evt)
            except Exception as exc:  # noqa: BLE001 - isolate handler failures
                with self._lock:
                    self._errors.append((evt, exc))
            if sub.once:
                sub.active = False
                finished.append(sub)
        for sub in finished:
            self.unsubscribe(sub)
        return evt

    # Introspection -------------------------------------------------------
    def subscriber_count(self, name: str | ThemeEvent) -> int:
        key = name.value if isinstance(name, ThemeEvent) else name
        with self._lock:
            return len(self._subs.get(key, ()))

    @property
    def errors(self) -> list[tuple[Event, BaseException]]:
        with self._lock:
            return list(self._errors)
