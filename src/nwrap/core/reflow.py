"""Fixed-width reflow of text by Unicode code point.

Every code point counts as one character: digits, letters, symbols,
ideographs and emoji alike. Multi-code-point sequences (combining marks,
ZWJ emoji) therefore count as several characters and may be split across
lines. No line-breaking rules are applied.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any

from nwrap.core.exceptions import InvalidWidthError

LINE_BREAK = "\n"
LINE_BREAK_PATTERN = re.compile(r"\r\n?|[\n\u2028\u2029]")
MIN_WIDTH = 1

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReflowResult:
    """Formatted text together with the figures shown next to it."""

    text: str
    width: int
    total_chars: int
    line_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "width": self.width,
            "total_chars": self.total_chars,
            "lines": self.line_count,
        }


def _require_int(n: Any) -> int:
    # bool is an int subclass but never a meaningful width.
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidWidthError(n, f"chunk width must be an integer, got {n!r}")
    return n


def normalize_line_breaks(text: str) -> str:
    """Replace CRLF, CR, LF, U+2028 and U+2029 with a single LF."""
    return LINE_BREAK_PATTERN.sub(LINE_BREAK, text)


def wrap_line(line: str, n: int) -> str:
    """Insert a break after every ``n``-th code point of a single line.

    No break follows the last code point. ``n <= 0`` returns the line as is.
    """
    n = _require_int(n)
    if n <= 0 or len(line) <= n:
        return line
    return LINE_BREAK.join(
        line[start : start + n] for start in range(0, len(line), n)
    )


def format_text(text: str, n: int) -> str:
    """Normalize line breaks and reflow every logical line to width ``n``.

    Blank lines are kept, so the number of logical lines never changes.
    """
    return _format_lines(logical_lines(text), n)


def logical_lines(text: str) -> list[str]:
    """Split ``text`` into logical lines after normalizing line breaks."""
    return normalize_line_breaks(text).split(LINE_BREAK)


def _format_lines(lines: list[str], n: int) -> str:
    n = _require_int(n)
    return LINE_BREAK.join(wrap_line(line, n) for line in lines)


def count_chars(text: str) -> int:
    """Count code points in ``text``, excluding every line-break sequence."""
    return len(LINE_BREAK_PATTERN.sub("", text))


def resolve_width(raw: Any) -> int:
    """Coerce a user-supplied width to an integer of at least ``MIN_WIDTH``.

    Missing or blank values resolve to ``MIN_WIDTH``; integral numbers and
    integer strings are clamped. Anything else raises ``InvalidWidthError``.
    """
    if raw is None:
        return MIN_WIDTH
    if isinstance(raw, bool):
        raise InvalidWidthError(raw)
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, float):
        if not raw.is_integer():
            raise InvalidWidthError(
                raw, f"chunk width must be a whole number, got {raw!r}"
            )
        value = int(raw)
    elif isinstance(raw, str):
        stripped = raw.strip()
        if not stripped:
            return MIN_WIDTH
        try:
            value = int(stripped)
        except ValueError as exc:
            raise InvalidWidthError(
                raw, f"chunk width must be a number, got {raw!r}"
            ) from exc
    else:
        raise InvalidWidthError(raw)
    return max(MIN_WIDTH, value)


def reflow_report(text: str, n: int) -> ReflowResult:
    """Format ``text`` and collect the count and line figures for display."""
    lines = logical_lines(text)
    result = ReflowResult(
        text=_format_lines(lines, n),
        width=n,
        total_chars=count_chars(text),
        line_count=len(lines),
    )
    logger.debug(
        "reflowed %d chars over %d line(s) at width %d",
        result.total_chars,
        result.line_count,
        n,
    )
    return result
