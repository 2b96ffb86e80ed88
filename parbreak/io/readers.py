"""
I/O Readers

Handles reading of item tables.
"""

from __future__ import annotations
from typing import List
import numpy as np
import pandas as pd
from pathlib import Path
import logging

from ..errors import InvalidInput
from ..items import Box, Glue, Item, Penalty
from ..types import ITEM_COLUMNS, PathLike

logger = logging.getLogger(__name__)

_TRUE_STRINGS = {'1', '1.0', 'true', 'yes', 'y'}


class ItemReader:
    """Reads a paragraph's item sequence from a TSV table"""

    @staticmethod
    def read(filepath: PathLike) -> List[Item]:
        """
        Read items from TSV

        Expected format (header required, '#' starts a comment):
        kind     width  stretch  shrink  cost  flagged
        box      1
        glue     1      1        0
        penalty  0                       -inf  1

        Missing stretch/shrink/cost default to 0, missing flagged to False.

        Args:
            filepath: Path to item TSV file

        Returns:
            List of Box, Glue and Penalty items in file order
        """
        if not Path(filepath).exists():
            raise FileNotFoundError(f"Item file not found: {filepath}")

        table: pd.DataFrame = pd.read_csv(filepath, sep='\t', comment='#', dtype={'kind': str})
        return ItemReader.from_frame(table)

    @staticmethod
    def from_frame(table: pd.DataFrame) -> List[Item]:
        """
        Convert an item table to items

        Args:
            table: DataFrame with at least 'kind' and 'width' columns

        Returns:
            List of items
        """
        missing = [col for col in ('kind', 'width') if col not in table.columns]
        if missing:
            raise InvalidInput(f"Item table is missing columns: {missing}")

        table = table.copy()
        for col in ITEM_COLUMNS[1:-1]:
            if col not in table.columns:
                table[col] = 0.0
            table[col] = pd.to_numeric(table[col], errors='coerce')
        table[['stretch', 'shrink', 'cost']] = table[['stretch', 'shrink', 'cost']].fillna(0.0)

        bad_width = np.isnan(table['width'].to_numpy(dtype=float))
        if bad_width.any():
            rows = np.flatnonzero(bad_width).tolist()
            raise InvalidInput(f"Item table has missing or non-numeric widths in rows {rows}")

        if 'flagged' in table.columns:
            flagged = table['flagged'].fillna('').astype(str).str.strip().str.lower().isin(_TRUE_STRINGS)
        else:
            flagged = pd.Series(False, index=table.index)

        kinds = table['kind'].fillna('').astype(str).str.strip().str.lower()

        items: List[Item] = []
        for row, kind, width, stretch, shrink, cost, flag in zip(
            range(len(table)), kinds, table['width'], table['stretch'],
            table['shrink'], table['cost'], flagged
        ):
            if kind == 'box':
                items.append(Box(width=float(width)))
            elif kind == 'glue':
                items.append(Glue(width=float(width), stretch=float(stretch), shrink=float(shrink)))
            elif kind == 'penalty':
                items.append(Penalty(width=float(width), cost=float(cost), flagged=bool(flag)))
            else:
                raise InvalidInput(f"Unknown item kind {kind!r} in row {row}")

        logger.debug(f"Read {len(items)} items")
        return items


def read_items(filepath: PathLike) -> List[Item]:
    """
    Convenience function to read an item table

    Args:
        filepath: Path to item TSV file

    Returns:
        List of items
    """
    return ItemReader.read(filepath)
