"""Validation utilities for dispatcher wiring."""

from __future__ import annotations

from typing import Any

from .dispatcher import EventDispatcher
from .listeners import MethodListener, describe_listener


def validate_dispatcher(dispatcher: EventDispatcher) -> list[str]:
    """Return list of wiring errors discovered in a configured dispatcher."""
    errors: list[str] = []
    for event_name in dispatcher.event_names():
        if not isinstance(event_name, str) or not event_name.strip():
            errors.append(f"Event name {event_name!r} must be a non-empty string.")
        registry = dispatcher.registry(event_name)
        if registry is None:
            continue
        for listener in registry:
            if isinstance(listener, MethodListener) and not listener.has_handler(event_name):
                errors.append(
                    f"Listener {describe_listener(listener.target)} registered for "
                    f"'{event_name}' has no handler method '{event_name}'."
                )
    return errors


def validate_subscriber(subscriber: Any) -> list[str]:
    """Return list of problems with a subscriber's declared events."""
    getter = getattr(subscriber, "get_subscribed_events", None)
    if not callable(getter):
        return [f"{type(subscriber).__qualname__} does not implement get_subscribed_events()."]

    errors: list[str] = []
    seen: set[str] = set()
    for event_name in getter():
        if not isinstance(event_name, str) or not event_name.strip():
            errors.append(f"Subscribed event name {event_name!r} must be a non-empty string.")
            continue
        if event_name in seen:
            errors.append(f"Event '{event_name}' is declared more than once.")
            continue
        seen.add(event_name)
        if not callable(getattr(subscriber, event_name, None)):
            errors.append(
                f"{type(subscriber).__qualname__} subscribes to '{event_name}' "
                f"but has no handler method '{event_name}'."
            )
    return errors


__all__ = ["validate_dispatcher", "validate_subscriber"]
