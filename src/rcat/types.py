from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class OutputMode(Enum):
    """Enumeration of the mutually exclusive output modes of a run.

    The mode is chosen once when the configuration is built and never changes
    while the run is in progress.

    Attributes:
        CONTENT: Print every qualifying file with a banner and its contents.
        LIST: Print only a path announcement for every qualifying file.
        JSON: Print the directory tree as a single pretty-printed JSON document.
    """

    CONTENT = "content"
    LIST = "list"
    JSON = "json"
