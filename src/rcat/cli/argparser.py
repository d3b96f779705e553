"""Command-line argument parsing for rcat.

This module defines the command-line interface for rcat,
handling argument parsing and validation.
"""

import argparse
import os
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from rcat import __version__
from rcat.config import ROOT_PATH_ENV_VAR
from rcat.exclusion_rules.base_rules import BaseExclusionRules


def non_negative_int(value: str) -> int:
    """Argparse type accepting integers greater than or equal to zero."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid depth: {value!r} is not an integer")
    if number < 0:
        raise argparse.ArgumentTypeError(f"invalid depth: {number} is negative")
    return number


def create_exclusion_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create a custom action class for handling exclusion rules.

    The returned action updates the provided exclusion rules object while
    arguments are processed, preserving the order in which ``-e`` and ``-i``
    options appear on the command line.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        """Action adding pattern files (-e) and single patterns (-i) to the exclusion rules."""

        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return

            if option_string in ("-e", "--exclude"):
                rules_file = values if isinstance(values, (str, os.PathLike)) else Path(str(values))
                try:
                    exclusion_rules.load_rules(rules_file)
                except FileNotFoundError as e:
                    parser.error(str(e))
            else:  # -i/--ignore
                exclusion_rules.add_rule(str(values))

            collected = getattr(namespace, self.dest, None) or []
            collected.append(values)
            setattr(namespace, self.dest, collected)

    return ExclusionRulesAction


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with rcat's options.
    """
    description = """
    rcat: recursive cat with syntax highlighting.

    Walks a directory tree depth-first and prints every file with a banner and
    syntax-highlighted contents, lists the files it would print, or describes
    the tree as JSON. Build artifacts, VCS and editor directories, lockfiles
    and ignore files (target, .idea, .vscode, .git, Cargo.lock, .gitignore)
    are always skipped.
    """

    epilog = f"""
    Examples:
      # Print every file below the current directory
      rcat

      # Only Rust sources, at most one directory level deep
      rcat src --ext rs --depth 1

      # List the files that would be printed
      rcat --list /path/to/project

      # Describe the tree as JSON
      rcat --json /path/to/project > tree.json

      # Skip additional names with gitignore-style patterns
      rcat -i "*.pyc" -i "node_modules/" /path/to/project

      # Plain output with debug diagnostics
      rcat --no-color -v /path/to/project

    Environment:
      {ROOT_PATH_ENV_VAR}  Root path used when none is given (default: current directory).
    """

    parser = argparse.ArgumentParser(
        prog="rcat",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"rcat {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(exclusion_rules)

    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        help=f"File or directory to process (default: --dname, ${ROOT_PATH_ENV_VAR} or the current directory).",
    )
    parser.add_argument(
        "--dname",
        type=Path,
        metavar="PATH",
        help="Root path as an option, for callers that pass it by name. Conflicts with the positional path.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable syntax highlighting and print lines verbatim.",
    )
    parser.add_argument(
        "--ext",
        metavar="EXT",
        help="Only process files whose extension is exactly EXT (without the dot, case-sensitive).",
    )
    parser.add_argument(
        "--depth",
        metavar="N",
        type=non_negative_int,
        help="Maximum directory recursion depth below the root (default: unlimited).",
    )

    parser.add_argument(
        "--list",
        action="store_true",
        help="List file paths without reading their contents.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the directory tree as JSON instead of file contents or a listing (overrides --list).",
    )

    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help=(
            "Additional gitignore-style pattern matched against file and directory names "
            "(can be specified multiple times)."
        ),
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="File of gitignore-style patterns matched against names (can be specified multiple times).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase diagnostic verbosity on stderr (-v debug, -vv trace).",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.ext is not None and args.ext.startswith("."):
        raise ValueError(f"--ext expects an extension without the leading dot, e.g. '{args.ext.lstrip('.')}'")
    if args.path is not None and args.dname is not None:
        raise ValueError("give the root either as a positional path or with --dname, not both")
