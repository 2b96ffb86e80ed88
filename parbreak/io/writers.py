"""
I/O Writers

Handles writing of item and breakpoint tables.
"""

from __future__ import annotations
from typing import List, Sequence
import numpy as np
import pandas as pd
from pathlib import Path
import logging

from ..items import Box, Glue, Item, Penalty
from ..layout.types import Breakpoint
from ..types import BREAKPOINT_COLUMNS, ITEM_COLUMNS, BreakpointRecord, ItemRecord, PathLike

logger = logging.getLogger(__name__)


def breakpoints_to_frame(breakpoints: Sequence[Breakpoint]) -> pd.DataFrame:
    """
    Tabulate breakpoints, one row per line

    Args:
        breakpoints: Result of a layout call

    Returns:
        DataFrame with columns line, break_at, adjustment_ratio, fitness_class
    """
    records: List[BreakpointRecord] = [
        {
            'line': bp.line_number,
            'break_at': bp.break_at,
            'adjustment_ratio': bp.adjustment_ratio,
            'fitness_class': bp.fitness_class.name.lower(),
        }
        for bp in breakpoints
    ]
    frame = pd.DataFrame(records, columns=list(BREAKPOINT_COLUMNS))
    frame['line'] = frame['line'].astype(int)
    frame['break_at'] = frame['break_at'].astype(int)
    frame['adjustment_ratio'] = frame['adjustment_ratio'].astype(float)
    return frame


def items_to_frame(items: Sequence[Item]) -> pd.DataFrame:
    """
    Tabulate items in the format ItemReader accepts

    Args:
        items: Paragraph items

    Returns:
        DataFrame with columns kind, width, stretch, shrink, cost, flagged
    """
    records: List[ItemRecord] = []
    for item in items:
        if isinstance(item, Box):
            records.append({'kind': 'box', 'width': item.width})
        elif isinstance(item, Glue):
            records.append({'kind': 'glue', 'width': item.width,
                            'stretch': item.stretch, 'shrink': item.shrink})
        elif isinstance(item, Penalty):
            records.append({'kind': 'penalty', 'width': item.width,
                            'cost': item.cost, 'flagged': item.flagged})
    frame = pd.DataFrame(records, columns=list(ITEM_COLUMNS))
    frame[['stretch', 'shrink', 'cost']] = frame[['stretch', 'shrink', 'cost']].fillna(0.0)
    frame['flagged'] = np.where(frame['flagged'].eq(True), 1, 0)
    return frame


class BreakpointWriter:
    """Writes layout results in TSV format"""

    def __init__(self, precision: int = 6):
        """
        Initialize breakpoint writer

        Args:
            precision: Decimal places kept for adjustment ratios
        """
        self.precision = precision

    def write(self, breakpoints: Sequence[Breakpoint], output_file: PathLike) -> None:
        """
        Write breakpoints to TSV

        Args:
            breakpoints: Result of a layout call
            output_file: Path to output TSV file
        """
        if len(breakpoints) == 0:
            logger.warning("No breakpoints to save")

        Path(output_file).parent.mkdir(parents=True, exist_ok=True)

        frame = breakpoints_to_frame(breakpoints)
        frame['adjustment_ratio'] = np.round(frame['adjustment_ratio'].to_numpy(dtype=float), self.precision)

        frame.to_csv(output_file, sep='\t', index=False)
        logger.info(f"Breakpoints saved to {output_file}")
        logger.info(f"Lines: {len(frame)}")


def write_breakpoints(breakpoints: Sequence[Breakpoint], output_file: PathLike) -> None:
    """
    Convenience function to write breakpoints

    Args:
        breakpoints: Result of a layout call
        output_file: Output TSV file path
    """
    BreakpointWriter().write(breakpoints, output_file)


def write_items(items: Sequence[Item], output_file: PathLike) -> None:
    """
    Write an item table readable by ItemReader

    Args:
        items: Paragraph items
        output_file: Output TSV file path
    """
    Path(output_file).parent.mkdir(parents=True, exist_ok=True)
    items_to_frame(items).to_csv(output_file, sep='\t', index=False)
    logger.info(f"Items saved to {output_file}")
