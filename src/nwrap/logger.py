"""Logging configuration for nwrap."""

import logging
import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

DEFAULT_LOG_FILE = "~/.config/nwrap/logs/nwrap.log"
MAX_LOG_FILE_BYTES = 5 * 1024 * 1024  # 5 MiB per rotated file.
LOG_BACKUP_COUNT = 3
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_log_file_path(log_file: Union[str, Path]) -> Path:
    """Expand a configured log path."""
    return Path(log_file).expanduser()


def generate_timestamped_log_path(base_path: Union[str, Path]) -> Path:
    """Generate a log file path with a timestamp prefix."""
    path = resolve_log_file_path(base_path)
    timestamp = datetime.datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    return path.parent / f"{timestamp}_{path.name}"


def setup_logging(
    level_name: str = "INFO", log_file: Optional[Union[str, Path]] = None
) -> None:
    """Configure root logging to append to a size-rotated log file.

    Each run appends to the same file; ``RotatingFileHandler`` caps the
    directory at the live file plus ``LOG_BACKUP_COUNT`` backups.
    """
    level = getattr(logging, level_name.upper(), logging.INFO)

    if not log_file:
        return
    log_path = resolve_log_file_path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger()
    logger.setLevel(level)

    handler = RotatingFileHandler(
        log_path,
        mode="a",
        maxBytes=MAX_LOG_FILE_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    # Remove existing handlers to avoid duplicates if re-initialized
    for existing_handler in list(logger.handlers):
        logger.removeHandler(existing_handler)
        existing_handler.close()

    logger.addHandler(handler)
