"""Display utilities for the CLI - result panel and character count."""

import json
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from nwrap.config import PANEL_TITLE
from nwrap.core.reflow import ReflowResult

COUNT_LABEL = "Total characters (line breaks excluded)"


def build_result_panel(result: ReflowResult, title: Optional[str] = None) -> Panel:
    """Build the panel holding the formatted text."""
    header = f"{title or PANEL_TITLE} - every {result.width} chars"
    # Display form only: rich expands tabs and drops control characters.
    # Text() keeps user content literal, no markup interpretation.
    return Panel(
        Text(result.text),
        title=header,
        title_align="left",
        border_style="blue",
        subtitle=f"{result.line_count} input line(s)",
        subtitle_align="right",
    )


def render_result(result: ReflowResult, console: Optional[Console] = None) -> None:
    """Print the formatted text panel followed by the total count."""
    console = console or Console()
    console.print(build_result_panel(result))
    console.print(f"{COUNT_LABEL}: [bold]{result.total_chars}[/bold]")


def render_plain(result: ReflowResult, console: Optional[Console] = None) -> None:
    """Print the formatted text only, byte for byte."""
    console = console or Console()
    # Bypass rich rendering, which expands tabs and drops control characters.
    console.file.write(result.text + "\n")
    console.file.flush()


def render_count(result: ReflowResult, console: Optional[Console] = None) -> None:
    console = console or Console()
    console.print(str(result.total_chars), markup=False, highlight=False)


def render_json(result: ReflowResult, console: Optional[Console] = None) -> None:
    console = console or Console()
    console.print(
        json.dumps(result.to_dict(), ensure_ascii=False),
        markup=False,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )
