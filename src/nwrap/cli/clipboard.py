"""Clipboard helpers for the nwrap CLI."""

from __future__ import annotations

import logging
import platform

import pyperclip

from nwrap.core.exceptions import ClipboardError

logger = logging.getLogger(__name__)


def _platform_hint() -> str:
    if platform.system() == "Linux":
        return "Install xclip, xsel or wl-clipboard to enable clipboard access."
    return ""


def copy_text(text: str) -> None:
    """Copy ``text`` to the system clipboard."""
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        logger.debug("clipboard copy failed: %s", e)
        raise ClipboardError(
            "Could not copy the formatted text to the clipboard.",
            hint=_platform_hint(),
        ) from e
    logger.debug("copied %d chars to clipboard", len(text))


def paste_text() -> str:
    """Return the current clipboard content."""
    try:
        content = pyperclip.paste()
    except pyperclip.PyperclipException as e:
        logger.debug("clipboard paste failed: %s", e)
        raise ClipboardError(
            "Could not read text from the clipboard.", hint=_platform_hint()
        ) from e
    if not content:
        raise ClipboardError("Clipboard is empty.")
    return content
