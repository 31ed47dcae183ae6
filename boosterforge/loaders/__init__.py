"""Loaders for declarative configuration."""

from .layout_loader import (
    load_layout_from_json,
    parse_layout_dict,
    validate_layout_dict,
    validate_layout_file,
)

__all__ = [
    "load_layout_from_json",
    "parse_layout_dict",
    "validate_layout_dict",
    "validate_layout_file",
]
