"""Run configuration for a traversal.

The configuration is built once from command-line input and is read-only for
the lifetime of the run.
"""

import argparse
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from rcat.exclusion_rules.base_rules import BaseExclusionRules
from rcat.exclusion_rules.name_rules import NameExclusionRules
from rcat.types import OutputMode

# Environment variable consulted for the root path when none is given
ROOT_PATH_ENV_VAR = "DNAME"


def default_root_path() -> Path:
    """Return the root path used when none is given on the command line."""
    return Path(os.environ.get(ROOT_PATH_ENV_VAR, "."))


@dataclass(frozen=True)
class RcatConfig:
    """Immutable parameters of a single run.

    Attributes:
        root_path: File or directory to process.
        no_color: Disable syntax highlighting and banner styling.
        extension: Only files whose extension equals this string (without the dot)
            are processed during directory enumeration. None disables the filter.
        max_depth: Maximum directory recursion depth below the root. None means
            unlimited; 0 means only the root's direct entries.
        mode: Output mode for the run.
        exclusion_rules: Rules deciding which entries are skipped by base name.
            Populate them before building the configuration; the run only reads them.
    """

    root_path: Path = field(default_factory=default_root_path)
    no_color: bool = False
    extension: Optional[str] = None
    max_depth: Optional[int] = None
    mode: OutputMode = OutputMode.CONTENT
    exclusion_rules: BaseExclusionRules = field(default_factory=NameExclusionRules)

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(f"max_depth must be a non-negative integer, got {self.max_depth}")

    @classmethod
    def from_args(cls, args: argparse.Namespace, exclusion_rules: BaseExclusionRules) -> "RcatConfig":
        """Build a configuration from parsed command-line arguments.

        The root is the positional path if given, else --dname, else $DNAME, else
        the current directory. When both --json and --list are set, JSON wins.

        Args:
            args: Namespace produced by the rcat argument parser.
            exclusion_rules: Rules already populated by the parser's exclusion actions.

        Returns:
            The configuration for the run.
        """
        if args.json:
            mode = OutputMode.JSON
        elif args.list:
            mode = OutputMode.LIST
        else:
            mode = OutputMode.CONTENT

        if args.path is not None:
            root_path = Path(args.path)
        elif args.dname is not None:
            root_path = Path(args.dname)
        else:
            root_path = default_root_path()

        return cls(
            root_path=root_path,
            no_color=args.no_color,
            extension=args.ext,
            max_depth=args.depth,
            mode=mode,
            exclusion_rules=exclusion_rules,
        )
