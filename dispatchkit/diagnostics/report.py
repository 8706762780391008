"""Tabular view of the listeners registered on a dispatcher."""

from __future__ import annotations

from dataclasses import dataclass

from ..dispatcher import EventDispatcher
from ..listeners import describe_listener


@dataclass(slots=True)
class ListenerRow:
    event: str
    position: int
    priority: int
    kind: str
    name: str


def describe_listeners(dispatcher: EventDispatcher) -> list[ListenerRow]:
    """Return one row per registration, in dispatch order per event."""
    rows: list[ListenerRow] = []
    for event_name, listeners in dispatcher.get_listeners().items():
        registry = dispatcher.registry(event_name)
        for position, (identity, target) in enumerate(listeners.items(), start=1):
            rows.append(
                ListenerRow(
                    event=event_name,
                    position=position,
                    priority=registry.priorities[identity],
                    kind=registry.listeners[identity].kind,
                    name=describe_listener(target),
                )
            )
    return rows


__all__ = ["ListenerRow", "describe_listeners"]
