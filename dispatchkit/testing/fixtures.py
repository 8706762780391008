"""Pytest fixtures for dispatchkit."""

from __future__ import annotations

import pytest

from ..app import build_dispatcher
from ..config import DispatcherConfig
from ..dispatcher import EventDispatcher
from .factory import ListenerFactory


@pytest.fixture()
def dispatcher() -> EventDispatcher:
    return build_dispatcher(DispatcherConfig())


@pytest.fixture()
def listener_factory() -> ListenerFactory:
    return ListenerFactory()


def dispatcher_fixture(**kwargs) -> EventDispatcher:
    """Helper for ad-hoc tests where pytest is not available."""
    return build_dispatcher(DispatcherConfig(**kwargs))
