"""Signal-aware output writing for the rcat CLI."""

import errno
import os
import types
from pathlib import Path
from typing import BinaryIO, Optional, Type, Union

from rcat.cli.signal_handler import signal_handler


class SafeWriter:
    """Sends rendered output to a descriptor or a file and stops once interrupted.

    Text is encoded as UTF-8 with ``surrogateescape``, so file names the OS layer
    decoded with surrogate escapes are written back as their original bytes.

    Attributes:
        file: The descriptor or path given at construction.
        fd: Descriptor the output goes to.
    """

    def __init__(self, file: Union[int, Path, str]):
        """Open ``file`` for writing, truncating it, unless it is already a descriptor.

        Raises:
            TypeError: If ``file`` is neither an int nor path-like.
        """
        if not isinstance(file, (int, str, os.PathLike)):
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

        self.file = file
        self._closed = False
        self._file_obj: Optional[BinaryIO] = None
        if isinstance(file, int):
            self.fd = file
        else:
            self._file_obj = Path(file).open("wb")
            self.fd = self._file_obj.fileno()

    def write(self, data: str) -> None:
        """Write one chunk of output.

        Raises:
            BrokenPipeError: If a signal interrupted the run or the reader went away.
            OSError: On any other write failure.
            ValueError: If the writer is closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")
        if signal_handler.interrupted:
            raise BrokenPipeError()

        view = memoryview(data.encode("utf-8", errors="surrogateescape"))
        try:
            # Pipes may accept only part of the buffer per call
            while view:
                view = view[os.write(self.fd, view) :]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError() from e
            raise

    def close(self) -> None:
        """Close the file this writer opened. A broken pipe while closing is ignored."""
        if self._closed:
            return
        try:
            if self._file_obj is not None:
                self._file_obj.close()
        except OSError as e:
            if e.errno != errno.EPIPE:
                raise
        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        try:
            self.close()
        except OSError:
            # Keep the exception raised inside the with block
            if exc_type is None:
                raise
