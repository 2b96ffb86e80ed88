"""
parbreak CLI

Command-line interface with subcommands.
"""

import argparse
import logging
import sys
from .cli import breaks
from .errors import LayoutError

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='parbreak',
        description='parbreak: Optimal-fit paragraph line breaking'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Add subcommand parsers
    breaks.add_parser(subparsers)

    # Parse arguments
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Execute the appropriate subcommand
    try:
        if args.command == 'break':
            breaks.run(args)
    except LayoutError as e:
        logger.error(f"Layout failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
