"""Exceptions raised by dispatchkit."""

from __future__ import annotations

from typing import Any


class DispatchError(RuntimeError):
    """Base class for dispatchkit exceptions."""


class MissingHandlerError(DispatchError, AttributeError):
    """Raised when a method listener has no handler for the dispatched event."""

    def __init__(self, event_name: str, listener: Any) -> None:
        super().__init__(
            f"Listener {type(listener).__qualname__} has no handler method '{event_name}'"
        )
        self.event_name = event_name
        self.listener = listener


class WiringError(DispatchError, ValueError):
    """Raised when declarative listener wiring cannot be applied."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = list(errors or ())
