"""
Item model for parbreak

A paragraph is described as a linear sequence of typesetting primitives:
boxes, glue and penalties. Position of an item is its index in the sequence.

All item types are immutable (frozen) for safety and testability.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple, Union
import math


@dataclass(frozen=True)
class Box:
    """
    Unbreakable paragraph content (a glyph, a word, a glyph cluster)

    Attributes:
        width: Width of the box
    """
    width: float

    @property
    def stretch(self) -> float:
        return 0.0

    @property
    def shrink(self) -> float:
        return 0.0


@dataclass(frozen=True)
class Glue:
    """
    Breakable whitespace between boxes

    Attributes:
        width: Natural width of the whitespace
        stretch: How far the glue may stretch when a line is too short
        shrink: How far the glue may shrink when a line is too long
    """
    width: float
    stretch: float = 0.0
    shrink: float = 0.0


@dataclass(frozen=True)
class Penalty:
    """
    Explicit candidate breakpoint with an aesthetic cost

    A cost of -inf forces a break, +inf forbids one. Flagged penalties
    (typically hyphens) are discouraged on consecutive lines.

    Attributes:
        width: Width added to the line if the break is taken here
        cost: Aesthetic cost of breaking here
        flagged: Whether this is a flagged break
    """
    width: float = 0.0
    cost: float = 0.0
    flagged: bool = False

    @property
    def stretch(self) -> float:
        return 0.0

    @property
    def shrink(self) -> float:
        return 0.0

    @property
    def is_forced(self) -> bool:
        """Whether breaking here is mandatory"""
        return self.cost == -math.inf

    @property
    def is_forbidden(self) -> bool:
        """Whether breaking here is never allowed"""
        return self.cost == math.inf

    @classmethod
    def forced(cls, flagged: bool = False) -> 'Penalty':
        """Zero-width penalty that ends a paragraph"""
        return cls(width=0.0, cost=-math.inf, flagged=flagged)

    @classmethod
    def forbidden(cls) -> 'Penalty':
        """Zero-width penalty that prevents a break"""
        return cls(width=0.0, cost=math.inf)


Item = Union[Box, Glue, Penalty]
"""Any typesetting primitive"""


def is_forced_break(item: Item) -> bool:
    """Check whether an item is a mandatory break"""
    return isinstance(item, Penalty) and item.is_forced


def penalty_cost(item: Item) -> float:
    """Cost of breaking at item (zero for glue)"""
    return item.cost if isinstance(item, Penalty) else 0.0


def is_flagged(item: Optional[Item]) -> bool:
    """Whether item is a flagged penalty"""
    return isinstance(item, Penalty) and item.flagged


def is_legal_breakpoint(item: Item, previous: Optional[Item]) -> bool:
    """
    Check whether a line may end at item

    Legal breakpoints are glue directly preceded by a box, and penalties
    that are not forbidden. Boxes are never legal breakpoints.

    Args:
        item: Candidate item
        previous: Item immediately before it, or None at the start

    Returns:
        True if a break may be taken at item
    """
    if isinstance(item, Glue):
        return isinstance(previous, Box)
    if isinstance(item, Penalty):
        return not item.is_forbidden
    return False


def dimensions(item: Item) -> Tuple[float, float, float]:
    """
    Width, stretch and shrink contributed by item to the running totals

    A penalty's width only counts for the line that ends at it, so it
    contributes nothing here.
    """
    if isinstance(item, Penalty):
        return 0.0, 0.0, 0.0
    return item.width, item.stretch, item.shrink
