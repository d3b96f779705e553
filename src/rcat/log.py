"""Diagnostic logging for rcat.

Diagnostics always go to stderr so they never mix with program output. The
verbosity count from the command line selects the level: 0 for INFO, 1 for
DEBUG and 2 or more for TRACE.
"""

import logging
import sys
from typing import Optional, TextIO

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LOG_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"


def level_for_verbosity(verbosity: int) -> int:
    """Map a ``-v`` count to a logging level."""
    if verbosity <= 0:
        return logging.INFO
    if verbosity == 1:
        return logging.DEBUG
    return TRACE


def configure_logging(verbosity: int = 0, stream: Optional[TextIO] = None) -> None:
    """Configure the ``rcat`` logger hierarchy.

    Args:
        verbosity: Number of ``-v`` flags given on the command line.
        stream: Destination of the diagnostics. Defaults to ``sys.stderr``.
    """
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger("rcat")
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level_for_verbosity(verbosity))
