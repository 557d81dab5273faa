"""Application Bootstrap (Entry Point)."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .cli import app
from .config import get_settings

# Logging configuration constants
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024  # 5MB max log file size
LOG_FILE_BACKUP_COUNT = 3  # Keep 3 backup log files


def setup_logging() -> None:
    """Configure application-wide logging.

    Logs to a rotating file and to stderr. Level comes from
    EXTRAKEYS_LOG_LEVEL (default: INFO). Falls back to defaults if settings
    fail to load.

    Reload failures are logged at INFO and shown by the CLI from the
    ReloadReport, so stderr carries each message once.
    """
    try:
        settings = get_settings()
        log_file = settings.log_file
        log_level = settings.log_level
    except Exception as e:
        print(f"Warning: Failed to load settings for logging: {e}", file=sys.stderr)
        log_file = Path(".extrakeys/extrakeys.log")
        log_level = "INFO"

    log_file.parent.mkdir(parents=True, exist_ok=True)

    file_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_formatter = logging.Formatter("%(levelname)-8s | %(name)s | %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setFormatter(file_formatter)
    file_handler.setLevel(logging.DEBUG)  # File captures everything

    # stderr only gets WARNING+; reload errors are echoed by the CLI instead
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(logging.WARNING)

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level))
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)


def main() -> None:
    """Main entry point for the extrakeys CLI."""
    setup_logging()
    app()


if __name__ == "__main__":
    main()
