"""Loaders for declarative listener wiring (JSON)."""

from .json_loader import (
    apply_wiring,
    load_wiring_from_json,
    parse_wiring_dict,
    resolve_target,
    validate_wiring_dict,
    validate_wiring_file,
)

__all__ = [
    "apply_wiring",
    "load_wiring_from_json",
    "parse_wiring_dict",
    "resolve_target",
    "validate_wiring_dict",
    "validate_wiring_file",
]
