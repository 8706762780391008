"""Dispatchers that log every listener invocation."""

from __future__ import annotations

import logging
import time

from .dispatcher import EventDispatcher
from .events import EventArgs
from .listeners import Listener, describe_listener
from .threadsafe import LockingEventDispatcher

logger = logging.getLogger(__name__)


class TracingMixin:
    """Logs each listener call and any exception it raises."""

    def _trigger_listener(self, listener: Listener, event_name: str, args: EventArgs) -> None:
        name = describe_listener(listener.target)
        started = time.perf_counter()
        try:
            super()._trigger_listener(listener, event_name, args)  # type: ignore[misc]
        except Exception:
            logger.exception("Listener %s failed while handling '%s'.", name, event_name)
            raise
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.debug("Listener %s handled '%s' in %.3f ms", name, event_name, elapsed_ms)


class TracingEventDispatcher(TracingMixin, EventDispatcher):
    """EventDispatcher with per-listener tracing."""


class TracingLockingEventDispatcher(TracingMixin, LockingEventDispatcher):
    """Thread-safe dispatcher with per-listener tracing."""


__all__ = ["TracingEventDispatcher", "TracingLockingEventDispatcher", "TracingMixin"]
