"""Core exception types for nwrap."""

from __future__ import annotations

from typing import Any


class NwrapError(Exception):
    """Base error for nwrap runtime failures."""


class InvalidWidthError(NwrapError, ValueError):
    """Raised when a chunk width is not an integer."""

    def __init__(self, value: Any, message: str = "") -> None:
        self.value = value
        super().__init__(message or f"invalid chunk width: {value!r}")


class ClipboardError(NwrapError):
    """Clipboard failure intended to be shown directly to the user."""

    def __init__(self, message: str, *, hint: str = ""):
        self.message = str(message or "").strip() or "Clipboard error."
        self.hint = str(hint or "").strip()
        super().__init__(self.user_message)

    @property
    def user_message(self) -> str:
        if self.hint:
            return f"{self.message} {self.hint}".strip()
        return self.message
