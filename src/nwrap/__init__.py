"""nwrap - break text into lines of N characters, counting every code point as one."""

__version__ = "0.1.0"

from nwrap.core import count_chars, format_text

reflow = format_text


def main() -> None:
    """Run the CLI entry point with lazy import."""
    from nwrap.cli.main import main as cli_main

    cli_main()


__all__ = ["count_chars", "format_text", "main", "reflow", "__version__"]
