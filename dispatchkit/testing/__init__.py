"""Testing utilities for dispatchkit."""

from .factory import ListenerFactory, RecordingListener, RecordingSubscriber
from .fixtures import dispatcher, dispatcher_fixture, listener_factory

__all__ = [
    "ListenerFactory",
    "RecordingListener",
    "RecordingSubscriber",
    "dispatcher",
    "dispatcher_fixture",
    "listener_factory",
]
