"""dispatchkit public API."""

from .app import build_dispatcher
from .config import DispatcherConfig
from .dispatcher import EventDispatcher
from .events import EventArgs, EventSubscriber
from .exceptions import DispatchError, MissingHandlerError, WiringError
from .threadsafe import LockingEventDispatcher
from .tracing import TracingEventDispatcher

__all__ = [
    "DispatchError",
    "DispatcherConfig",
    "EventArgs",
    "EventDispatcher",
    "EventSubscriber",
    "LockingEventDispatcher",
    "MissingHandlerError",
    "TracingEventDispatcher",
    "WiringError",
    "build_dispatcher",
]
