import io

from rich.console import Console
from rich.panel import Panel

from nwrap.cli.display import (
    COUNT_LABEL,
    build_result_panel,
    render_json,
    render_plain,
    render_result,
)
from nwrap.core import reflow_report


def _console():
    buffer = io.StringIO()
    return Console(file=buffer, width=60, color_system=None), buffer


def test_build_result_panel_title_and_subtitle():
    panel = build_result_panel(reflow_report("abc\ndef", 2), title="Result")
    assert isinstance(panel, Panel)
    assert panel.title == "Result - every 2 chars"
    assert panel.subtitle == "2 input line(s)"


def test_render_result_keeps_markup_literal():
    console, buffer = _console()
    render_result(reflow_report("[bold]x[/bold]", 100), console)
    output = buffer.getvalue()
    assert "[bold]x[/bold]" in output
    assert f"{COUNT_LABEL}: 14" in output


def test_render_plain_does_not_expand_emoji_codes():
    console, buffer = _console()
    render_plain(reflow_report(":smile:", 100), console)
    assert buffer.getvalue() == ":smile:\n"


def test_render_plain_does_not_wrap_long_lines():
    console, buffer = _console()
    render_plain(reflow_report("a" * 100, 100), console)
    assert buffer.getvalue() == "a" * 100 + "\n"


def test_render_json_keeps_non_ascii():
    console, buffer = _console()
    render_json(reflow_report("東京", 1), console)
    assert '"text": "東\\n京"' in buffer.getvalue()
