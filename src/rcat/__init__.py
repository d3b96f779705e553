"""Recursive file printing utilities.

This package walks a directory tree and prints file contents (optionally
syntax-highlighted), lists file paths, or describes the tree as JSON.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("rcat")
except PackageNotFoundError:
    __version__ = "unknown"
