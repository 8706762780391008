"""Dispatcher guarded by a single re-entrant lock."""

from __future__ import annotations

import threading
from typing import Any

from .dispatcher import EventDispatcher, EventNames
from .events import EventArgs, EventSubscriber


class LockingEventDispatcher(EventDispatcher):
    """EventDispatcher safe to share between threads.

    Registration and dispatch hold the same ``RLock``. Dispatch keeps the lock
    while listeners run, so a listener may still query the dispatcher from
    the dispatching thread while other threads wait.
    """

    def __init__(self, *, strict_subscribers: bool = False) -> None:
        super().__init__(strict_subscribers=strict_subscribers)
        self._lock = threading.RLock()

    def add_listener(self, events: EventNames, listener: Any, priority: int = 0) -> None:
        with self._lock:
            super().add_listener(events, listener, priority)

    def remove_listener(self, events: EventNames, listener: Any) -> None:
        with self._lock:
            super().remove_listener(events, listener)

    def add_subscriber(self, subscriber: EventSubscriber, priority: int = 0) -> None:
        with self._lock:
            super().add_subscriber(subscriber, priority)

    def remove_subscriber(self, subscriber: EventSubscriber) -> None:
        with self._lock:
            super().remove_subscriber(subscriber)

    def has_listeners(self, event_name: str) -> bool:
        with self._lock:
            return super().has_listeners(event_name)

    def get_listeners(self, event_name: str | None = None) -> Any:
        with self._lock:
            return super().get_listeners(event_name)

    def dispatch(self, event_name: str, args: EventArgs | None = None) -> EventArgs | None:
        with self._lock:
            return super().dispatch(event_name, args)


__all__ = ["LockingEventDispatcher"]
