"""Command-line interface for rcat.

This module ties argument parsing, logging setup, the traversal and the output
writer together, and maps failures to exit codes.

Exit Codes:
    0: Successful completion (including runs where single files failed to render)
    1: Runtime error (path not found, unreadable directory, serialization failure)
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Print all Python files below src/
    $ rcat src --ext py

    # Describe the current directory as JSON
    $ rcat --json
"""

import logging
import sys

from rcat.cli.argparser import create_parser, validate_args
from rcat.cli.safe_writer import SafeWriter
from rcat.cli.signal_handler import setup_signal_handling, signal_handler
from rcat.config import RcatConfig
from rcat.exclusion_rules.name_rules import NameExclusionRules
from rcat.log import configure_logging
from rcat.traversal import FileProcessor

logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point for the rcat command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    setup_signal_handling()

    try:
        # Populated by the -e/-i actions while parsing
        exclusion_rules = NameExclusionRules()

        parser = create_parser(exclusion_rules)
        args = parser.parse_args()
        validate_args(args)

        configure_logging(args.verbose)
        config = RcatConfig.from_args(args, exclusion_rules)
        logger.debug("Running with %s", config)

        processor = FileProcessor(config)
        output_file = args.output if args.output else sys.stdout.fileno()

        with SafeWriter(output_file) as safe_writer:
            try:
                for chunk in processor.run():
                    safe_writer.write(chunk)
            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
