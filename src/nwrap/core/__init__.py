"""Core text reflow operations for nwrap."""

from nwrap.core.exceptions import ClipboardError, InvalidWidthError, NwrapError
from nwrap.core.reflow import (
    LINE_BREAK,
    MIN_WIDTH,
    ReflowResult,
    count_chars,
    format_text,
    logical_lines,
    normalize_line_breaks,
    reflow_report,
    resolve_width,
    wrap_line,
)

__all__ = [
    "LINE_BREAK",
    "MIN_WIDTH",
    "ClipboardError",
    "InvalidWidthError",
    "NwrapError",
    "ReflowResult",
    "count_chars",
    "format_text",
    "logical_lines",
    "normalize_line_breaks",
    "reflow_report",
    "resolve_width",
    "wrap_line",
]
