"""Per-event listener registry with cached priority ordering."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Iterator

from .listeners import Listener, ListenerIdentity

logger = logging.getLogger(__name__)


class SortState(str, Enum):
    UNSORTED = "unsorted"
    SORTED = "sorted"


class EventRegistry:
    """Listeners and priorities registered for a single event name.

    ``listeners`` and ``priorities`` always share the same keys. The
    registry only becomes SORTED through :meth:`ensure_sorted`; every
    mutation drops it back to UNSORTED.
    """

    __slots__ = ("event_name", "listeners", "priorities", "state")

    def __init__(self, event_name: str) -> None:
        self.event_name = event_name
        self.listeners: Dict[ListenerIdentity, Listener] = {}
        self.priorities: Dict[ListenerIdentity, int] = {}
        self.state = SortState.UNSORTED

    def __len__(self) -> int:
        return len(self.listeners)

    def __contains__(self, identity: object) -> bool:
        return identity in self.listeners

    def __iter__(self) -> Iterator[Listener]:
        return iter(self.listeners.values())

    @property
    def is_sorted(self) -> bool:
        return self.state is SortState.SORTED

    def put(self, identity: ListenerIdentity, listener: Listener, priority: int) -> None:
        self.listeners[identity] = listener
        self.priorities[identity] = priority
        self.state = SortState.UNSORTED

    def discard(self, identity: ListenerIdentity) -> bool:
        if identity not in self.listeners:
            return False
        del self.listeners[identity]
        del self.priorities[identity]
        self.state = SortState.UNSORTED
        return True

    def ensure_sorted(self) -> None:
        if self.state is SortState.SORTED:
            return
        # stable even with reverse=True: equal priorities keep registration order
        ordered = sorted(self.listeners, key=self.priorities.__getitem__, reverse=True)
        self.listeners = {identity: self.listeners[identity] for identity in ordered}
        self.state = SortState.SORTED
        logger.debug("Sorted %d listener(s) for event '%s'", len(ordered), self.event_name)


__all__ = ["EventRegistry", "SortState"]
