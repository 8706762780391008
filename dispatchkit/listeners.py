"""Listener identity and the two listener variants."""

from __future__ import annotations

import functools
import inspect
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Hashable, Iterable, Protocol

from .events import EventArgs
from .exceptions import MissingHandlerError

ListenerIdentity = Hashable
Handler = Callable[[EventArgs], Any]


class Listener(Protocol):
    """Adapter the dispatcher invokes for one registered listener value."""

    target: Any

    @property
    def kind(self) -> str: ...

    def invoke(self, event_name: str, args: EventArgs) -> None: ...


def listener_identity(listener: Any) -> ListenerIdentity:
    """Return the identity token used to deduplicate registrations.

    Bound methods are recreated on every attribute access, so they are keyed
    by the instance and the underlying function instead of the method object.
    """
    if inspect.ismethod(listener):
        return (id(listener.__self__), id(listener.__func__))
    if inspect.isbuiltin(listener) and getattr(listener, "__self__", None) is not None:
        return (id(listener.__self__), listener.__name__)
    return id(listener)


@dataclass(slots=True)
class CallableListener:
    """Plain callable invoked directly with the event payload."""

    target: Callable[[EventArgs], Any]

    def invoke(self, event_name: str, args: EventArgs) -> None:
        self.target(args)

    @property
    def kind(self) -> str:
        return "callable"


@dataclass(slots=True)
class MethodListener:
    """Object whose handler methods are named after the events they handle."""

    target: Any
    handlers: Dict[str, Handler] = field(default_factory=dict)

    def bind(self, event_name: str) -> bool:
        handler = getattr(self.target, event_name, None)
        if callable(handler):
            self.handlers[event_name] = handler
            return True
        return False

    def has_handler(self, event_name: str) -> bool:
        return event_name in self.handlers or callable(getattr(self.target, event_name, None))

    def handler_for(self, event_name: str) -> Handler:
        handler = self.handlers.get(event_name)
        if handler is None and self.bind(event_name):
            handler = self.handlers[event_name]
        if handler is None:
            raise MissingHandlerError(event_name, self.target)
        return handler

    def invoke(self, event_name: str, args: EventArgs) -> None:
        self.handler_for(event_name)(args)

    @property
    def kind(self) -> str:
        return "method"


def _is_plain_callable(listener: Any) -> bool:
    return inspect.isroutine(listener) or isinstance(listener, functools.partial)


def _declares_events(listener: Any, event_names: Iterable[str]) -> bool:
    if callable(getattr(listener, "get_subscribed_events", None)):
        return True
    return any(callable(getattr(listener, name, None)) for name in event_names)


def adapt_listener(listener: Any, event_names: Iterable[str]) -> Listener:
    """Wrap a listener value in the variant matching its capabilities."""
    event_names = tuple(event_names)
    if _is_plain_callable(listener):
        return CallableListener(listener)
    if not _declares_events(listener, event_names) and callable(listener):
        return CallableListener(listener)
    adapted = MethodListener(listener)
    for name in event_names:
        adapted.bind(name)
    return adapted


def describe_listener(listener: Any) -> str:
    """Human readable name used in logs and reports."""
    if inspect.ismethod(listener):
        return f"{type(listener.__self__).__qualname__}.{listener.__func__.__name__}"
    if isinstance(listener, functools.partial):
        return f"partial({describe_listener(listener.func)})"
    if inspect.isroutine(listener):
        return getattr(listener, "__qualname__", repr(listener))
    return f"{type(listener).__qualname__}@{id(listener):#x}"


__all__ = [
    "CallableListener",
    "Handler",
    "Listener",
    "ListenerIdentity",
    "MethodListener",
    "adapt_listener",
    "describe_listener",
    "listener_identity",
]
