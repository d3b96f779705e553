"""Signal handling utilities for the rcat CLI.

Piping rcat into a pager or ``head`` closes the read end of the pipe early; the
handlers here record such interruptions so output stops cleanly and the process
exits with the conventional status code.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Optional

# SIGPIPE does not exist on Windows
HAS_SIGPIPE = hasattr(signal, "SIGPIPE")

EXIT_SIGINT = 130
EXIT_SIGPIPE = 141


class SignalHandler:
    """Records SIGPIPE and SIGINT so the writer can stop and the CLI can exit properly.

    Attributes:
        sigpipe_received: Event that is set when a SIGPIPE signal is received.
        sigint_received: Event that is set when a SIGINT signal is received.
        original_sigpipe_handler: Original SIGPIPE signal handler, or None without SIGPIPE.
        original_sigint_handler: Original SIGINT signal handler.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self.original_sigpipe_handler = signal.getsignal(signal.SIGPIPE) if HAS_SIGPIPE else None
        self.original_sigint_handler = signal.getsignal(signal.SIGINT)

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigpipe_received.set()
        signal.signal(signal.SIGPIPE, self.original_sigpipe_handler)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigint_received.set()
        signal.signal(signal.SIGINT, self.original_sigint_handler)

    @property
    def interrupted(self) -> bool:
        """Whether output should stop because of a received signal."""
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def exit_code(self) -> Optional[int]:
        """Return the exit status implied by the received signals, if any.

        SIGPIPE takes precedence over SIGINT.
        """
        if self.sigpipe_received.is_set():
            return EXIT_SIGPIPE
        if self.sigint_received.is_set():
            return EXIT_SIGINT
        return None


# Create a singleton instance for the application
signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Install the SIGPIPE (where available) and SIGINT handlers."""
    if HAS_SIGPIPE:
        signal.signal(signal.SIGPIPE, signal_handler.handle_sigpipe)
    signal.signal(signal.SIGINT, signal_handler.handle_sigint)


def cleanup() -> None:
    """Redirect stdout to the null device after an interruption.

    This keeps the interpreter from reporting a broken pipe while flushing
    stdout during shutdown.
    """
    if signal_handler.interrupted:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
