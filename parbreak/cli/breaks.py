"""Break subcommand - optimal line breaking of an item table"""

from __future__ import annotations
from argparse import ArgumentParser, Namespace, _SubParsersAction
from pathlib import Path
import logging
import sys

from ..config import BreakConfig
from ..errors import InfeasibleBreak
from ..io import read_items, write_breakpoints, breakpoints_to_frame
from ..layout import KnuthPlassLayout

logger = logging.getLogger(__name__)


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add break subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for break subcommand
    """
    parser = subparsers.add_parser(
        'break',
        help='Compute optimal line breaks for an item table'
    )

    # Input / output
    parser.add_argument('-i', '--items', required=True,
                       help='Item TSV file (kind, width, stretch, shrink, cost, flagged)')
    parser.add_argument('-w', '--width', type=float, required=True,
                       help='Target line width')
    parser.add_argument('-o', '--output',
                       help='Output breakpoint TSV (default: print to stdout)')

    # Breaking parameters
    defaults = BreakConfig()
    parser.add_argument('-t', '--threshold', type=float, default=defaults.threshold,
                       help='Maximum badness per line (default: inf)')
    parser.add_argument('-q', '--looseness', type=int, default=defaults.looseness,
                       help='Lines to add (>0) or remove (<0) from the optimum (default: 0)')
    parser.add_argument('--flagged-demerit', type=float, default=defaults.flagged_demerit,
                       help=f'Demerits for consecutive flagged breaks (default: {defaults.flagged_demerit:g})')
    parser.add_argument('--fitness-demerit', type=float, default=defaults.fitness_demerit,
                       help=f'Demerits for abrupt fitness changes (default: {defaults.fitness_demerit:g})')
    parser.add_argument('--fallback', action='store_true',
                       help='Retry with an infinite threshold if no feasible breaking exists')

    # Debug flag
    parser.add_argument('--debug', action='store_true', help='Enable debug logging for troubleshooting')

    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> None:
    """
    Execute break subcommand

    Args:
        args: Parsed command-line arguments from argparse
    """
    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "debug", False) else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    items_file = Path(args.items)
    logger.info(f"Input: {items_file}")
    logger.info(f"Width: {args.width:g}, threshold: {args.threshold:g}, looseness: {args.looseness}")

    items = read_items(items_file)
    logger.info(f"Loaded {len(items)} items")

    config = BreakConfig(
        threshold=args.threshold,
        looseness=args.looseness,
        flagged_demerit=args.flagged_demerit,
        fitness_demerit=args.fitness_demerit,
    )

    try:
        breakpoints = KnuthPlassLayout(config).layout_paragraph(items, args.width)
    except InfeasibleBreak as e:
        if not args.fallback:
            raise
        logger.warning(f"{e}; retrying with infinite threshold")
        breakpoints = KnuthPlassLayout(config.with_threshold(float('inf'))).layout_paragraph(items, args.width)

    logger.info(f"Paragraph broken into {len(breakpoints)} lines")

    if args.output:
        write_breakpoints(breakpoints, args.output)
    else:
        breakpoints_to_frame(breakpoints).to_csv(sys.stdout, sep='\t', index=False)
