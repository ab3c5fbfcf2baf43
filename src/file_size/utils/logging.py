"""Logging setup for the file-size command line.

Library modules only create module-level loggers; handlers are installed
by :func:`configure_logging`, which the CLI calls once at startup. Log
records go to stderr so stdout carries nothing but the computed size.
"""

import logging
import sys
from typing import Final, TextIO

DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

DEFAULT_LOG_LEVEL: Final[str] = "WARNING"


def configure_logging(
    *,
    log_level: str = DEFAULT_LOG_LEVEL,
    enable_console: bool = True,
    stream: TextIO | None = None,
) -> None:
    """Configure root logging with a single console handler.

    Existing root handlers are removed so repeated calls do not duplicate
    output.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_console: Attach a stream handler; when False records are dropped
        stream: Stream for the console handler (defaults to stderr)

    Example:
        >>> configure_logging(log_level="DEBUG")
        >>> logging.getLogger("file_size").debug("Walking directory")
    """
    root_logger = logging.getLogger()

    level = getattr(logging, log_level.upper(), logging.WARNING)
    root_logger.setLevel(level)

    root_logger.handlers.clear()

    if enable_console:
        console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        console_handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT))
        root_logger.addHandler(console_handler)
    else:
        root_logger.addHandler(logging.NullHandler())

    logging.getLogger(__name__).debug("Logging configured", extra={"log_level": log_level})
