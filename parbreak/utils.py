"""
Utility functions

Helpers for inspecting a finished layout: which items make up each line
and how wide each line renders.
"""

from __future__ import annotations
from typing import List, Sequence, Tuple

from .items import Box, Glue, Item, Penalty, dimensions, is_forced_break
from .layout.types import Breakpoint


def next_line_start(items: Sequence[Item], break_at: int) -> int:
    """
    Index of the first item of the line following a break

    Glue and penalties right after a break are discarded, up to the next
    box or forced break.

    Args:
        items: Paragraph items
        break_at: Index of the break ending the previous line

    Returns:
        Index of the first kept item (len(items) if none remain)
    """
    for i in range(break_at + 1, len(items)):
        if isinstance(items[i], Box) or is_forced_break(items[i]):
            return i
    return len(items)


def line_spans(items: Sequence[Item], breakpoints: Sequence[Breakpoint]) -> List[Tuple[int, int]]:
    """
    Item ranges for each laid-out line

    Args:
        items: Paragraph items
        breakpoints: Result of a layout call

    Returns:
        List of (start, end) pairs; the line holds items[start:end] and
        ends at the break item items[end]
    """
    spans: List[Tuple[int, int]] = []
    start = 0
    for bp in breakpoints:
        spans.append((start, bp.break_at))
        start = next_line_start(items, bp.break_at)
    return spans


def measure_line(items: Sequence[Item], start: int, end: int) -> Tuple[float, float, float]:
    """
    Natural width, stretch and shrink of a line

    Args:
        items: Paragraph items
        start: Index of the first item on the line
        end: Index of the break item ending the line

    Returns:
        Tuple of (width, stretch, shrink), including the width of a
        penalty taken as the break
    """
    width = stretch = shrink = 0.0
    for item in items[start:end]:
        w, y, z = dimensions(item)
        width += w
        stretch += y
        shrink += z
    if isinstance(items[end], Penalty):
        width += items[end].width
    return width, stretch, shrink


def adjusted_width(items: Sequence[Item], start: int, breakpoint: Breakpoint) -> float:
    """
    Rendered width of a line after its glue is adjusted

    Equals the target width for every line the engine considered feasible.
    """
    width = 0.0
    for item in items[start:breakpoint.break_at]:
        if isinstance(item, Glue):
            width += breakpoint.glue_width(item.width, item.stretch, item.shrink)
        elif isinstance(item, Box):
            width += item.width
    end = items[breakpoint.break_at]
    if isinstance(end, Penalty):
        width += end.width
    return width
