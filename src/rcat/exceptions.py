class RcatError(Exception):
    """Base class for errors raised while walking and rendering a directory tree."""

    pass


class PathNotFoundError(RcatError):
    """
    Exception raised when the root path given to a run does not exist.

    This error is fatal: nothing is printed and the CLI exits with a non-zero status.

    Attributes:
        path (str): The path that could not be found.

    Example:
        >>> error = PathNotFoundError("/no/such/dir")
        >>> str(error)
        'Path not found: /no/such/dir'
    """

    def __init__(self, path: str) -> None:
        """
        Initialize the exception with the missing path.

        Args:
            path (str): The path that does not exist.
        """
        self.path = path
        super().__init__(f"Path not found: {path}")


class DirectoryReadError(RcatError):
    """
    Exception raised when the entries of a directory cannot be enumerated.

    Enumeration failures are not recovered from, regardless of the depth at which
    they happen, so this error aborts the whole run.

    Attributes:
        path (str): The directory that could not be read.
        cause (OSError): The underlying operating system error.

    Example:
        >>> error = DirectoryReadError("/root/secret", PermissionError("Permission denied"))
        >>> str(error)
        'Failed to read directory /root/secret: Permission denied'
    """

    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to read directory {path}: {cause}")


class SyntaxHighlightingError(RcatError):
    """
    Exception raised when the highlighting engine fails on a file.

    The error only aborts rendering of the file it names; the traversal reports it
    and moves on to the next entry.

    Attributes:
        path (str): The file being highlighted.
        cause (Exception): The error raised by the highlighting engine.

    Example:
        >>> error = SyntaxHighlightingError("src/main.py", ValueError("bad token"))
        >>> str(error)
        'Syntax highlighting failed for src/main.py: bad token'
    """

    def __init__(self, path: str, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Syntax highlighting failed for {path}: {cause}")
