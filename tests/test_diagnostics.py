from dispatchkit import EventDispatcher
from dispatchkit.diagnostics import describe_listeners, run_checklist
from dispatchkit.testing import RecordingListener


class NoHandlers:
    pass


def test_checklist_flags_empty_dispatcher():
    issues = run_checklist(EventDispatcher())
    assert [(issue.severity, issue.message) for issue in issues] == [
        ("warning", "No listeners are registered.")
    ]


def test_checklist_reports_errors_empty_registries_and_ties():
    dispatcher = EventDispatcher()
    dispatcher.add_listener("preFoo", NoHandlers())
    dispatcher.add_listener("preFoo", RecordingListener("a"))
    removed = RecordingListener("b")
    dispatcher.add_listener("postFoo", removed)
    dispatcher.remove_listener("postFoo", removed)

    issues = run_checklist(dispatcher)
    severities = {issue.severity for issue in issues}
    assert severities == {"error", "warning", "info"}
    assert any("'postFoo' has no remaining listeners" in issue.message for issue in issues)
    assert any("2 listeners at priority 0" in issue.message for issue in issues)


def test_describe_listeners_follows_dispatch_order():
    dispatcher = EventDispatcher()
    low = RecordingListener("low")
    high = RecordingListener("high")
    dispatcher.add_listener("preFoo", low, -1)
    dispatcher.add_listener("preFoo", high, 4)
    dispatcher.add_listener("postFoo", NoHandlers())

    rows = describe_listeners(dispatcher)

    assert [(row.event, row.position, row.priority, row.kind) for row in rows] == [
        ("preFoo", 1, 4, "callable"),
        ("preFoo", 2, -1, "callable"),
        ("postFoo", 1, 0, "method"),
    ]
    assert rows[0].name.startswith("RecordingListener@")
