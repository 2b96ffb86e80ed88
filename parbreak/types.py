"""
Type definitions for parbreak

Common types used by the I/O layer and the command line.
"""

from __future__ import annotations
from typing import TypedDict, Literal, Tuple, Union
from pathlib import Path

# Type aliases
PathLike = Union[str, Path]
"""File path as string or Path object"""

ItemKind = Literal['box', 'glue', 'penalty']
"""Value of the 'kind' column in an item table"""

FitnessName = Literal['tight', 'decent', 'loose', 'very_loose']
"""Fitness class as written to breakpoint tables"""

ITEM_COLUMNS: Tuple[str, ...] = ('kind', 'width', 'stretch', 'shrink', 'cost', 'flagged')
"""Column order of item tables"""

BREAKPOINT_COLUMNS: Tuple[str, ...] = ('line', 'break_at', 'adjustment_ratio', 'fitness_class')
"""Column order of breakpoint tables"""


# Structured data types

class ItemRecord(TypedDict, total=False):
    """One row of an item table"""
    kind: ItemKind
    width: float
    stretch: float
    shrink: float
    cost: float
    flagged: bool


class BreakpointRecord(TypedDict):
    """One row of a breakpoint table"""
    line: int
    break_at: int
    adjustment_ratio: float
    fitness_class: FitnessName
