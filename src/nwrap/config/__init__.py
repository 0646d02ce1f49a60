"""Configuration constants for nwrap."""

import sys

from nwrap.config.loader import load_config
from nwrap.core.exceptions import InvalidWidthError
from nwrap.core.reflow import resolve_width

# --- Initialize Configuration ---
_CONFIG = load_config()

# --- Expose Constants ---

# General
_gen = _CONFIG["general"]
try:
    DEFAULT_WIDTH = resolve_width(_gen.get("default_width", 2))
except InvalidWidthError as e:
    print(f"Warning: Ignoring general.default_width: {e}", file=sys.stderr)
    DEFAULT_WIDTH = 2
COPY_BY_DEFAULT = bool(_gen.get("copy_by_default", False))
PANEL_TITLE = _gen.get("panel_title", "Formatted result")
LOG_LEVEL = _gen.get("log_level", "INFO")
LOG_FILE = _gen.get("log_file", "~/.config/nwrap/logs/nwrap.log")
