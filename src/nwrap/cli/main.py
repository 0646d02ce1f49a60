"""Command-line interface for nwrap."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console

from nwrap import __version__
from nwrap.config import COPY_BY_DEFAULT, DEFAULT_WIDTH, LOG_FILE, LOG_LEVEL
from nwrap.core.exceptions import ClipboardError, InvalidWidthError, NwrapError
from nwrap.core.reflow import reflow_report, resolve_width
from nwrap.logger import generate_timestamped_log_path, setup_logging

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2
STDIN_MARKER = "-"
logger = logging.getLogger(__name__)


def _width_arg(value: str) -> int:
    """argparse type for --width: clamp to at least 1, reject non-numbers."""
    try:
        return resolve_width(value)
    except InvalidWidthError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nwrap",
        description=(
            "Insert a line break after every N characters.\n"
            "Every character counts as one: symbols, digits, letters, kana/kanji\n"
            "and emoji alike. No line-breaking rules are applied."
        ),
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "text",
        nargs="*",
        metavar="TEXT",
        help="Text to format. Words are joined with a single space.\n"
        "Read from stdin when omitted and stdin is not a terminal.",
    )
    parser.add_argument(
        "-n",
        "--width",
        type=_width_arg,
        default=DEFAULT_WIDTH,
        metavar="WIDTH",
        help=f"Characters per line (default {DEFAULT_WIDTH}).\n"
        "Values below 1 become 1.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-f",
        "--file",
        metavar="FILE",
        help="Read input text from FILE (UTF-8). Use '-' for stdin.",
    )
    source.add_argument(
        "--paste",
        action="store_true",
        help="Read input text from the system clipboard.",
    )
    parser.add_argument(
        "--copy",
        action=argparse.BooleanOptionalAction,
        default=COPY_BY_DEFAULT,
        help="Copy the formatted text to the system clipboard.",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="OUTPUT",
        help="Also write the formatted text to OUTPUT (UTF-8).",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--plain",
        action="store_true",
        help="Print only the formatted text, without decoration.",
    )
    mode.add_argument(
        "--count-only",
        action="store_true",
        help="Print only the character count (line breaks excluded).",
    )
    mode.add_argument(
        "--json",
        action="store_true",
        help="Print the result as a JSON object.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Write a DEBUG log to a timestamped log file.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    return build_parser().parse_args(argv)


def _read_file(path_arg: str) -> str:
    if path_arg == STDIN_MARKER:
        return sys.stdin.read()
    # newline="" keeps CR/CRLF intact; normalization happens in the core.
    with open(Path(path_arg).expanduser(), "r", encoding="utf-8", newline="") as f:
        return f.read()


def read_input(args: argparse.Namespace) -> Optional[str]:
    """Resolve the input text from clipboard, file, arguments or stdin."""
    if args.paste:
        from nwrap.cli.clipboard import paste_text

        logger.debug("reading input from clipboard")
        return paste_text()
    if args.file:
        logger.debug("reading input from %s", args.file)
        return _read_file(args.file)
    if args.text:
        return " ".join(args.text)
    if not sys.stdin.isatty():
        logger.debug("reading input from stdin")
        return sys.stdin.read()
    return None


def write_output(path_arg: str, text: str) -> None:
    path = Path(path_arg).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)
    logger.info("wrote formatted text to %s", path)


def run(args: argparse.Namespace, console: Optional[Console] = None) -> int:
    """Execute one formatting request and return the process exit code."""
    from nwrap.cli import display

    console = console or Console()
    err_console = Console(stderr=True)

    text = read_input(args)
    if text is None:
        err_console.print(
            "Error: No input text. Pass TEXT, --file, --paste or pipe into stdin.",
            markup=False,
        )
        return EXIT_USAGE

    result = reflow_report(text, args.width)

    if args.output:
        write_output(args.output, result.text)

    if args.json:
        display.render_json(result, console)
    elif args.count_only:
        display.render_count(result, console)
    elif args.plain:
        display.render_plain(result, console)
    else:
        display.render_result(result, console)

    if args.copy:
        from nwrap.cli.clipboard import copy_text

        try:
            copy_text(result.text)
        except ClipboardError as e:
            logger.warning("clipboard copy failed: %s", e)
            err_console.print(f"Warning: {e.user_message}", markup=False)
        else:
            if not (args.plain or args.json or args.count_only):
                console.print("[green]Copied formatted text to clipboard.[/green]")

    return EXIT_OK


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    if args.verbose:
        session_log_file = generate_timestamped_log_path(LOG_FILE)
        setup_logging("DEBUG", session_log_file)
        logging.debug("Verbose mode enabled. Log level set to DEBUG.")
    else:
        setup_logging(LOG_LEVEL, LOG_FILE)

    try:
        exit_code = run(args)
    except ClipboardError as e:
        logger.error("clipboard error: %s", e)
        print(f"Error: {e.user_message}", file=sys.stderr)
        exit_code = EXIT_ERROR
    except NwrapError as e:
        logger.exception("nwrap failed")
        print(f"Error: {e}", file=sys.stderr)
        exit_code = EXIT_ERROR
    except (OSError, UnicodeDecodeError) as e:
        logger.exception("failed to read or write text")
        print(f"Error: {e}", file=sys.stderr)
        exit_code = EXIT_ERROR

    if exit_code != EXIT_OK:
        sys.exit(exit_code)
