"""Event payloads and subscriber contracts."""

from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable

_RESERVED = frozenset({"empty", "stop_propagation", "is_propagation_stopped"})


class EventArgs:
    """Mutable payload handed to every listener of a dispatch.

    Keyword arguments become attributes, so simple events do not need a
    dedicated subclass. Listeners call :meth:`stop_propagation` to keep the
    remaining listeners of the current dispatch from running.
    """

    def __init__(self, **data: Any) -> None:
        for key in data:
            if key.startswith("_") or key in _RESERVED:
                raise ValueError(f"EventArgs field '{key}' is reserved")
        self.__dict__.update(data)
        self._propagation_stopped = False

    @classmethod
    def empty(cls) -> "EventArgs":
        return cls()

    def stop_propagation(self) -> None:
        self._propagation_stopped = True

    def is_propagation_stopped(self) -> bool:
        return self._propagation_stopped

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{key}={value!r}" for key, value in vars(self).items() if not key.startswith("_")
        )
        return f"{type(self).__name__}({fields})"


@runtime_checkable
class EventSubscriber(Protocol):
    """Object that declares the events it wants to listen to.

    A subscriber must also expose one handler method per declared event,
    named after the event and accepting the :class:`EventArgs`.
    """

    def get_subscribed_events(self) -> Sequence[str]: ...


__all__ = ["EventArgs", "EventSubscriber"]
