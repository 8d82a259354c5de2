"""Logging configuration for the GitHub repository validator."""

import logging
import os
import sys
from typing import IO, Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Loggers of HTTP libraries that log every request at INFO
NOISY_LOGGERS = ("httpx", "httpcore")


def resolve_log_level(level: Optional[str] = None) -> int:
    """Maps a level name (or LOG_LEVEL, or INFO) to a logging constant."""
    name = (level or os.environ.get("LOG_LEVEL") or "INFO").upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: Optional[str] = None, stream: Optional[IO[str]] = None) -> None:
    """
    Configures application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
               Defaults to LOG_LEVEL env var or INFO.
        stream: Where log records are written. Defaults to stdout.
    """
    logging.basicConfig(
        level=resolve_log_level(level),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(stream or sys.stdout)],
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
