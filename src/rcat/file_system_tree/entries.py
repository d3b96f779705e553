"""Directory enumeration shared by the printing and JSON traversals."""

import logging
import os
from pathlib import Path
from typing import List

from rcat.exceptions import DirectoryReadError
from rcat.log import TRACE

logger = logging.getLogger(__name__)


def list_entries(directory: Path) -> List[Path]:
    """Return the entries of a directory, sorted by name.

    Args:
        directory: Directory to enumerate.

    Returns:
        Paths of the directory's direct children.

    Raises:
        DirectoryReadError: If the directory cannot be read.
    """
    try:
        names = sorted(os.listdir(directory))
    except OSError as e:
        raise DirectoryReadError(str(directory), e) from e

    logger.log(TRACE, "Enumerated %d entries in %s", len(names), directory)
    return [directory / name for name in names]
