"""Automated checks to highlight wiring issues."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from ..dispatcher import EventDispatcher
from ..validators import validate_dispatcher


@dataclass(slots=True)
class ChecklistIssue:
    severity: str
    message: str


def run_checklist(dispatcher: EventDispatcher) -> list[ChecklistIssue]:
    issues = [ChecklistIssue("error", message) for message in validate_dispatcher(dispatcher)]

    event_names = dispatcher.event_names()
    if not event_names:
        issues.append(ChecklistIssue("warning", "No listeners are registered."))

    for event_name in event_names:
        registry = dispatcher.registry(event_name)
        if registry is None or not len(registry):
            issues.append(
                ChecklistIssue("warning", f"Event '{event_name}' has no remaining listeners.")
            )
            continue
        ties = Counter(registry.priorities.values())
        for priority, count in sorted(ties.items(), reverse=True):
            if count > 1:
                issues.append(
                    ChecklistIssue(
                        "info",
                        f"Event '{event_name}' has {count} listeners at priority {priority}; "
                        "they run in registration order.",
                    )
                )
    return issues


__all__ = ["ChecklistIssue", "run_checklist"]
