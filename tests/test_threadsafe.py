import threading

from dispatchkit import EventArgs, LockingEventDispatcher
from dispatchkit.testing import RecordingListener


def test_concurrent_registration_keeps_every_listener():
    dispatcher = LockingEventDispatcher()
    calls = []
    listeners = [RecordingListener(str(idx), calls) for idx in range(200)]

    def register(chunk):
        for listener in chunk:
            dispatcher.add_listener("tick", listener, priority=int(listener.name) % 7)

    threads = [threading.Thread(target=register, args=(listeners[idx::4],)) for idx in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(dispatcher.get_listeners("tick")) == 200
    dispatcher.dispatch("tick")
    assert sorted(calls) == sorted(listener.name for listener in listeners)


def test_listener_may_query_dispatcher_during_dispatch():
    dispatcher = LockingEventDispatcher()
    observed = []

    def listener(args: EventArgs) -> None:
        observed.append(dispatcher.has_listeners("tick"))
        observed.append(len(dispatcher.get_listeners("tick")))

    dispatcher.add_listener("tick", listener)
    dispatcher.dispatch("tick")
    assert observed == [True, 1]


def test_subscriber_registration_and_removal(listener_factory):
    dispatcher = LockingEventDispatcher()
    subscriber = listener_factory.subscriber(["a", "b"])
    dispatcher.add_subscriber(subscriber)
    assert dispatcher.has_listeners("a")
    dispatcher.remove_subscriber(subscriber)
    assert not dispatcher.has_listeners("b")
