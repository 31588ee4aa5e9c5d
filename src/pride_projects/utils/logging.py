"""Console logging for applications using the PRIDE Archive client."""

import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = "pride_projects"

_LEVELS = {0: logging.WARNING, 1: logging.INFO}


def setup_logging(verbose: int = 0, stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Send the package's log records to a console stream.

    Only the ``pride_projects`` logger is touched; the root logger and other
    libraries keep their configuration.  Calling this again replaces the
    handler installed by the previous call.

    Args:
        verbose: Verbosity level (0=WARNING, 1=INFO, 2+=DEBUG)
        stream: Where to write records (default: stdout)

    Returns:
        The package logger
    """
    log_level = _LEVELS.get(verbose, logging.DEBUG)

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, "_pride_console", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    handler._pride_console = True
    logger.addHandler(handler)
    logger.setLevel(log_level)

    return logger
