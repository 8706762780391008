"""Build dispatchers from configuration."""

from __future__ import annotations

import logging

from .config import DispatcherConfig
from .dispatcher import EventDispatcher
from .threadsafe import LockingEventDispatcher
from .tracing import TracingEventDispatcher, TracingLockingEventDispatcher

logger = logging.getLogger(__name__)


def build_dispatcher(config: DispatcherConfig | None = None) -> EventDispatcher:
    """Return the dispatcher flavour selected by ``config``."""
    config = config or DispatcherConfig()
    if config.thread_safe:
        cls = TracingLockingEventDispatcher if config.trace_dispatch else LockingEventDispatcher
    else:
        cls = TracingEventDispatcher if config.trace_dispatch else EventDispatcher
    logger.debug("Building %s", cls.__name__)
    return cls(strict_subscribers=config.strict_subscribers)


__all__ = ["build_dispatcher"]
