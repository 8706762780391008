"""Central listener registry and synchronous event dispatch."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Tuple

from .events import EventArgs, EventSubscriber
from .exceptions import MissingHandlerError
from .listeners import Listener, ListenerIdentity, adapt_listener, describe_listener, listener_identity
from .registry import EventRegistry

logger = logging.getLogger(__name__)

EventNames = str | Iterable[str]
ListenerSnapshot = Dict[ListenerIdentity, Any]


def _as_event_names(events: EventNames) -> Tuple[str, ...]:
    if isinstance(events, str):
        return (events,)
    return tuple(events)


class EventDispatcher:
    """Registers listeners per event name and invokes them on dispatch.

    Listeners with a higher priority run first; listeners sharing a priority
    run in registration order. Ordering is computed lazily and cached per
    event until the next registration or removal.

    The dispatcher is not thread-safe (see ``LockingEventDispatcher``).
    Adding or removing listeners of an event from inside one of its own
    listeners while it is being dispatched is unsupported: the running
    dispatch keeps iterating the order it started with.
    """

    def __init__(self, *, strict_subscribers: bool = False) -> None:
        self._registries: Dict[str, EventRegistry] = {}
        self.strict_subscribers = strict_subscribers

    def add_listener(self, events: EventNames, listener: Any, priority: int = 0) -> None:
        event_names = _as_event_names(events)
        identity = listener_identity(listener)
        for event_name in event_names:
            adapted = adapt_listener(listener, (event_name,))
            registry = self._registries.get(event_name)
            if registry is None:
                registry = self._registries[event_name] = EventRegistry(event_name)
            registry.put(identity, adapted, priority)
            logger.debug(
                "Added %s listener %s to '%s' with priority %d",
                adapted.kind,
                describe_listener(listener),
                event_name,
                priority,
            )

    def remove_listener(self, events: EventNames, listener: Any) -> None:
        identity = listener_identity(listener)
        for event_name in _as_event_names(events):
            registry = self._registries.get(event_name)
            if registry is not None and registry.discard(identity):
                logger.debug("Removed listener %s from '%s'", describe_listener(listener), event_name)

    def add_subscriber(self, subscriber: EventSubscriber, priority: int = 0) -> None:
        event_names = tuple(subscriber.get_subscribed_events())
        if self.strict_subscribers:
            for event_name in event_names:
                if not callable(getattr(subscriber, event_name, None)):
                    raise MissingHandlerError(event_name, subscriber)
        self.add_listener(event_names, subscriber, priority)

    def remove_subscriber(self, subscriber: EventSubscriber) -> None:
        self.remove_listener(subscriber.get_subscribed_events(), subscriber)

    def has_listeners(self, event_name: str) -> bool:
        registry = self._registries.get(event_name)
        return registry is not None and len(registry) > 0

    def event_names(self) -> Tuple[str, ...]:
        return tuple(self._registries)

    def get_listeners(self, event_name: str | None = None) -> Any:
        """Return listeners in dispatch order.

        With an event name, returns a mapping of listener identity to the
        registered listener value. Without one, returns such a mapping for
        every known event. The mappings are copies; mutating the dispatcher
        afterwards does not affect them.
        """
        if event_name is not None:
            return self._snapshot(event_name)
        return {name: self._snapshot(name) for name in self._registries}

    def get_priority(self, event_name: str, listener: Any) -> int | None:
        registry = self._registries.get(event_name)
        if registry is None:
            return None
        return registry.priorities.get(listener_identity(listener))

    def registry(self, event_name: str) -> EventRegistry | None:
        return self._registries.get(event_name)

    def dispatch(self, event_name: str, args: EventArgs | None = None) -> EventArgs | None:
        """Invoke the listeners of ``event_name`` in priority order.

        Stops as soon as a listener stops propagation. Exceptions raised by
        listeners, including :class:`MissingHandlerError`, propagate to the
        caller and skip the remaining listeners.

        Returns the payload that was dispatched, or ``None`` when the event has
        no listeners. Callers may ignore the return value; a caller-supplied
        payload is mutated in place.
        """
        registry = self._registries.get(event_name)
        if registry is None or not len(registry):
            return None
        if args is None:
            args = EventArgs()

        registry.ensure_sorted()
        listeners = tuple(registry)
        logger.debug("Dispatching '%s' to %d listener(s)", event_name, len(listeners))
        for listener in listeners:
            self._trigger_listener(listener, event_name, args)
            if args.is_propagation_stopped():
                logger.debug(
                    "Propagation of '%s' stopped by %s", event_name, describe_listener(listener.target)
                )
                break
        return args

    def _trigger_listener(self, listener: Listener, event_name: str, args: EventArgs) -> None:
        """Invoke a single listener; subclasses hook per-listener behaviour here."""
        listener.invoke(event_name, args)

    def _snapshot(self, event_name: str) -> ListenerSnapshot:
        registry = self._registries.get(event_name)
        if registry is None:
            return {}
        registry.ensure_sorted()
        return {identity: listener.target for identity, listener in registry.listeners.items()}


__all__ = ["EventDispatcher", "EventNames"]
