import logging
import sys

from pyawaiter.config import settings


def setup_logging(level: str | None = None) -> None:
    """Send log records to stdout, at `LOG_LEVEL` unless a level is given."""

    level = level or settings.LOG_LEVEL

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the logger for a module."""

    return logging.getLogger(name)
