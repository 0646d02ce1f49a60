"""CLI package for nwrap with lazy exports."""

from __future__ import annotations

from importlib import import_module
from typing import Dict, Tuple

_EXPORTS: Dict[str, Tuple[str, str]] = {
    "parse_args": ("nwrap.cli.main", "parse_args"),
    "run": ("nwrap.cli.main", "run"),
    "copy_text": ("nwrap.cli.clipboard", "copy_text"),
    "paste_text": ("nwrap.cli.clipboard", "paste_text"),
    "render_result": ("nwrap.cli.display", "render_result"),
}


def __getattr__(name: str):
    if name not in _EXPORTS:
        raise AttributeError(f"module 'nwrap.cli' has no attribute {name!r}")
    module_name, attr_name = _EXPORTS[name]
    return getattr(import_module(module_name), attr_name)


__all__ = sorted(_EXPORTS.keys())
