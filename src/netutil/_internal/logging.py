"""Logging configuration for the netutil package."""

from __future__ import annotations

import logging
import sys

from .config import get_settings

LOGGER_NAME = "netutil"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def configure_logging(
    log_file: str | None = None,
    log_level: str | None = None,
    force: bool = False,
) -> None:
    """Configure the 'netutil' logger with console and optional file handlers.

    Library code never calls this; applications (and the CLI) call it once at
    startup.

    Args:
        log_file: Path to a log file. Defaults to NETUTIL_LOG_FILE; no file
                  handler is installed when neither is set.
        log_level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
                   Defaults to NETUTIL_LOG_LEVEL or INFO.
        force: If True, reconfigure even if already configured.
    """
    global _configured

    if _configured and not force:
        return

    settings = get_settings()
    if log_file is None:
        log_file = settings.log_file
    if log_level is None:
        log_level = settings.log_level

    logger = logging.getLogger(LOGGER_NAME)
    level = getattr(logging, log_level.upper(), logging.INFO)
    logger.setLevel(level)

    # Clear existing handlers to avoid duplicates
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except OSError as e:
            print(f"Warning: Could not create log file {log_file}: {e}", file=sys.stderr)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    logger.propagate = False

    _configured = True
