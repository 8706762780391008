"""Register listeners and subscribers from JSON wiring definitions.

A wiring file names listeners by import path::

    {
      "listeners": [{"events": ["preFoo"], "target": "app.hooks:audit", "priority": 10}],
      "subscribers": [{"target": "app.hooks:CacheSubscriber"}]
    }

Class targets are instantiated without arguments. Entries naming the same
target share one instance, so they deduplicate like direct registrations.
"""

from __future__ import annotations

import importlib
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Sequence

from ..dispatcher import EventDispatcher
from ..exceptions import WiringError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ListenerSpec:
    target: str
    events: tuple[str, ...]
    priority: int


@dataclass(slots=True)
class SubscriberSpec:
    target: str
    priority: int


@dataclass(slots=True)
class WiringDefinition:
    listeners: Sequence[ListenerSpec]
    subscribers: Sequence[SubscriberSpec]


def load_wiring_from_json(
    dispatcher: EventDispatcher, path: str | Path, *, default_priority: int = 0
) -> WiringDefinition:
    """Load wiring from a JSON file and register it on the dispatcher."""
    data = _read_json(path)
    definition = parse_wiring_dict(data, default_priority=default_priority)
    apply_wiring(dispatcher, definition)
    return definition


def parse_wiring_dict(data: dict[str, Any], *, default_priority: int = 0) -> WiringDefinition:
    """Parse a JSON dict (already decoded) into wiring specs."""
    errors = validate_wiring_dict(data)
    if errors:
        raise WiringError(_format_errors("Wiring validation failed", errors), errors)
    listeners = tuple(
        parse_listener(entry, default_priority=default_priority)
        for entry in data.get("listeners", [])
    )
    subscribers = tuple(
        parse_subscriber(entry, default_priority=default_priority)
        for entry in data.get("subscribers", [])
    )
    return WiringDefinition(listeners=listeners, subscribers=subscribers)


def parse_listener(entry: dict[str, Any], *, default_priority: int = 0) -> ListenerSpec:
    events = entry["events"]
    return ListenerSpec(
        target=entry["target"],
        events=(events,) if isinstance(events, str) else tuple(events),
        priority=entry.get("priority", default_priority),
    )


def parse_subscriber(entry: dict[str, Any], *, default_priority: int = 0) -> SubscriberSpec:
    return SubscriberSpec(
        target=entry["target"],
        priority=entry.get("priority", default_priority),
    )


def apply_wiring(dispatcher: EventDispatcher, definition: WiringDefinition) -> None:
    instances: dict[str, Any] = {}
    for spec in definition.listeners:
        listener = _instance(instances, spec.target)
        dispatcher.add_listener(spec.events, listener, spec.priority)
    for spec in definition.subscribers:
        subscriber = _instance(instances, spec.target)
        if not callable(getattr(subscriber, "get_subscribed_events", None)):
            raise WiringError(f"Subscriber '{spec.target}' does not implement get_subscribed_events().")
        dispatcher.add_subscriber(subscriber, spec.priority)
    logger.info(
        "Applied wiring: %d listener entries, %d subscribers",
        len(definition.listeners),
        len(definition.subscribers),
    )


def resolve_target(path: str) -> Any:
    """Import ``module:attribute`` and return the attribute."""
    module_name, _, attribute = path.partition(":")
    if not module_name or not attribute:
        raise WiringError(f"Target '{path}' must look like 'module:attribute'.")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise WiringError(f"Cannot import module '{module_name}' for target '{path}'.") from exc
    obj: Any = module
    for part in attribute.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise WiringError(f"Target '{path}' not found.") from exc
    return obj


def validate_wiring_file(path: str | Path) -> list[str]:
    """Validate wiring JSON file and return a list of errors."""
    try:
        data = _read_json(path)
    except WiringError as exc:
        return [str(exc)]
    return validate_wiring_dict(data)


def validate_wiring_dict(data: Any) -> list[str]:
    if not isinstance(data, dict):
        return ["Wiring must be a JSON object."]

    errors: list[str] = []
    listeners_raw = data.get("listeners", [])
    subscribers_raw = data.get("subscribers", [])
    if not isinstance(listeners_raw, list):
        errors.append("'listeners' must be an array.")
        listeners_raw = []
    if not isinstance(subscribers_raw, list):
        errors.append("'subscribers' must be an array.")
        subscribers_raw = []
    if not listeners_raw and not subscribers_raw and not errors:
        errors.append("Wiring must contain at least one listener or subscriber.")

    for idx, entry in enumerate(listeners_raw, start=1):
        label = f"Listener #{idx}"
        if not isinstance(entry, dict):
            errors.append(f"{label} must be an object.")
            continue
        errors.extend(_validate_target(label, entry.get("target")))
        events = entry.get("events")
        if isinstance(events, str):
            events = [events]
        if not isinstance(events, list) or not events:
            errors.append(f"{label} must define 'events' as a name or non-empty array.")
        else:
            for event_name in events:
                if not isinstance(event_name, str) or not event_name.strip():
                    errors.append(f"{label} has invalid event name {event_name!r}.")
        errors.extend(_validate_priority(label, entry))

    for idx, entry in enumerate(subscribers_raw, start=1):
        label = f"Subscriber #{idx}"
        if not isinstance(entry, dict):
            errors.append(f"{label} must be an object.")
            continue
        errors.extend(_validate_target(label, entry.get("target")))
        errors.extend(_validate_priority(label, entry))

    return errors


def _validate_target(label: str, target: Any) -> list[str]:
    if not isinstance(target, str) or not target.strip():
        return [f"{label} must define non-empty 'target'."]
    module_name, sep, attribute = target.partition(":")
    if not sep or not module_name or not attribute:
        return [f"{label} target '{target}' must look like 'module:attribute'."]
    return []


def _validate_priority(label: str, entry: dict[str, Any]) -> list[str]:
    if "priority" not in entry:
        return []
    priority = entry["priority"]
    # bool is an int subclass
    if isinstance(priority, bool) or not isinstance(priority, int):
        return [f"{label} has invalid 'priority' value {priority!r}; expected integer."]
    return []


def _instance(instances: dict[str, Any], target: str) -> Any:
    if target not in instances:
        obj = resolve_target(target)
        instances[target] = obj() if isinstance(obj, type) else obj
    return instances[target]


def _read_json(path: str | Path) -> Any:
    try:
        return json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise WiringError(f"Invalid JSON in wiring file '{path}': {exc}") from exc
    except OSError as exc:
        raise WiringError(f"Cannot read wiring file '{path}': {exc.strerror or exc}") from exc


def _format_errors(prefix: str, errors: Iterable[str]) -> str:
    formatted = "\n".join(f"- {err}" for err in errors)
    return f"{prefix}:\n{formatted}"
