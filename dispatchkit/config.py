"""Configuration models for dispatchkit."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

_PREFIX = "DISPATCHKIT_"
_TRUE_VALUES = {"1", "true", "yes"}
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(slots=True)
class DispatcherConfig:
    """Options controlling which dispatcher is built and how it behaves."""

    thread_safe: bool = False
    trace_dispatch: bool = False
    strict_subscribers: bool = False
    default_priority: int = 0
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "DispatcherConfig":
        """Create config from environment variables prefixed with DISPATCHKIT_."""
        return cls(
            thread_safe=_env_flag("THREAD_SAFE", False),
            trace_dispatch=_env_flag("TRACE_DISPATCH", False),
            strict_subscribers=_env_flag("STRICT_SUBSCRIBERS", False),
            default_priority=_env_int("DEFAULT_PRIORITY", 0),
            log_level=os.getenv(f"{_PREFIX}LOG_LEVEL", "WARNING").upper() or "WARNING",
        )


def configure_logging(level: str | int = "WARNING") -> None:
    """Set up root logging for command line tools."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level '{level}'")
        level = resolved
    logging.basicConfig(level=level, format=_LOG_FORMAT)


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(f"{_PREFIX}{name}")
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE_VALUES


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(f"{_PREFIX}{name}")
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{_PREFIX}{name} must be an integer, got '{raw}'") from exc


__all__ = ["DispatcherConfig", "configure_logging"]
