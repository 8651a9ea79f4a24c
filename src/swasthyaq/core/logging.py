"""Logging configuration."""

import logging
import sys

from swasthyaq.config import get_settings

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | None = None) -> None:
    """Configure application logging.

    Args:
        level: Optional override for the configured log level.
    """
    settings = get_settings()
    resolved = (level or settings.log_level).upper()

    logging.basicConfig(
        level=resolved,
        format=_LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Per-request redis chatter is only useful when debugging the substrate
    if resolved != "DEBUG":
        logging.getLogger("redis").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__ of the module).

    Returns:
        logging.Logger: Configured logger instance.
    """
    return logging.getLogger(name)
