"""Logging configuration for the command line tool."""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """Send log records to stderr.

    Call this once at process startup. Library modules only create loggers.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logging.basicConfig(handlers=[handler], level=level.upper(), force=True)

    # GitPython logs every command at debug level
    logging.getLogger("git").setLevel(logging.WARNING)
