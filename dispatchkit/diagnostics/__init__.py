"""Diagnostics for inspecting dispatcher wiring."""

from .checklist import ChecklistIssue, run_checklist
from .report import ListenerRow, describe_listeners

__all__ = ["ChecklistIssue", "ListenerRow", "describe_listeners", "run_checklist"]
