"""Command line helpers for dispatchkit."""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path
from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .app import build_dispatcher
from .config import DispatcherConfig, configure_logging
from .diagnostics import describe_listeners, run_checklist
from .dispatcher import EventDispatcher
from .exceptions import WiringError
from .loaders import load_wiring_from_json, validate_wiring_file
from .validators import validate_dispatcher

console = Console()

_SEVERITY_STYLES = {"error": "bold red", "warning": "yellow", "info": "cyan"}


def run_inspect(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Show listeners in dispatch order")
    parser.add_argument(
        "source",
        help="JSON wiring file or Python module with register(dispatcher) function",
    )
    args = parser.parse_args(argv)

    config = DispatcherConfig.from_env()
    configure_logging(config.log_level)
    dispatcher = build_dispatcher(config)
    _wire(args.source, dispatcher, config)

    rows = describe_listeners(dispatcher)
    if not rows:
        console.print("[yellow]No listeners registered.[/yellow]")
    else:
        table = Table(title="Registered listeners")
        table.add_column("Event")
        table.add_column("#", justify="right")
        table.add_column("Priority", justify="right")
        table.add_column("Kind")
        table.add_column("Listener")
        for row in rows:
            table.add_row(row.event, str(row.position), str(row.priority), row.kind, row.name)
        console.print(table)

    issues = run_checklist(dispatcher)
    for issue in issues:
        style = _SEVERITY_STYLES.get(issue.severity, "white")
        console.print(f"[{style}][{issue.severity.upper()}][/{style}] {escape(issue.message)}")
    if any(issue.severity == "error" for issue in issues):
        sys.exit(1)


def run_validate(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="dispatchkit wiring validator")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument(
        "--wiring",
        help="Path to wiring JSON file for validation",
    )
    group.add_argument(
        "--module",
        help="Python module with register(dispatcher) function to validate",
    )
    args = parser.parse_args(argv)

    config = DispatcherConfig.from_env()
    configure_logging(config.log_level)

    if args.wiring:
        errors = validate_wiring_file(Path(args.wiring))
        if errors:
            console.print("[bold red]Wiring errors:[/bold red]")
            for err in errors:
                console.print(f"- {escape(err)}")
            sys.exit(1)
        console.print("[green]Wiring is valid.[/green]")
        return

    dispatcher = build_dispatcher(config)
    _load_module(args.module, dispatcher)
    issues = validate_dispatcher(dispatcher)
    if issues:
        console.print("[bold red]Dispatcher wiring errors:[/bold red]")
        for issue in issues:
            console.print(f"- {escape(issue)}")
        sys.exit(1)
    console.print("[green]Dispatcher wiring is valid.[/green]")


def _wire(source: str, dispatcher: EventDispatcher, config: DispatcherConfig) -> None:
    path = Path(source)
    if path.suffix == ".json":
        try:
            load_wiring_from_json(dispatcher, path, default_priority=config.default_priority)
        except WiringError as exc:
            console.print(f"[bold red]{escape(str(exc))}[/bold red]")
            sys.exit(1)
        return
    _load_module(source, dispatcher)


def _load_module(path: str, dispatcher: EventDispatcher) -> None:
    cwd = str(Path.cwd())
    if cwd not in sys.path:
        sys.path.insert(0, cwd)
    module = importlib.import_module(path)
    if hasattr(module, "register"):
        module.register(dispatcher)
    else:
        raise RuntimeError(f"Module {path} does not define a register(dispatcher) function.")
