"""
Layout types for parbreak
Data structures for layout engine results

All types are immutable (frozen) for safety and testability.
"""
from dataclasses import dataclass
from enum import IntEnum


class FitnessClass(IntEnum):
    """
    Discrete bucket of a line's adjustment ratio

    Adjacent lines more than one class apart look uneven and cost extra
    demerits.
    """
    TIGHT = 0
    DECENT = 1
    LOOSE = 2
    VERY_LOOSE = 3

    @classmethod
    def from_ratio(cls, ratio: float) -> 'FitnessClass':
        """Classify an adjustment ratio"""
        if ratio < -0.5:
            return cls.TIGHT
        if ratio <= 0.5:
            return cls.DECENT
        if ratio <= 1.0:
            return cls.LOOSE
        return cls.VERY_LOOSE

    def distance(self, other: 'FitnessClass') -> int:
        return abs(int(self) - int(other))


@dataclass(frozen=True)
class Breakpoint:
    """
    One line of a laid-out paragraph

    Attributes:
        break_at: Index of the item at which the line ends
        line_number: 1-based line number
        adjustment_ratio: Fraction of glue stretch (>0) or shrink (<0)
            to apply so the line fills the target width exactly
        fitness_class: Bucket derived from adjustment_ratio
    """
    break_at: int
    line_number: int
    adjustment_ratio: float
    fitness_class: FitnessClass

    @property
    def is_stretched(self) -> bool:
        return self.adjustment_ratio > 0

    @property
    def is_shrunk(self) -> bool:
        return self.adjustment_ratio < 0

    def glue_width(self, width: float, stretch: float, shrink: float) -> float:
        """
        Rendered width of a glue item on this line

        Args:
            width: Natural glue width
            stretch: Glue stretchability
            shrink: Glue shrinkability

        Returns:
            Width after applying the line's adjustment ratio
        """
        if self.adjustment_ratio < 0 and shrink:
            return width + shrink * self.adjustment_ratio
        if self.adjustment_ratio > 0 and stretch:
            return width + stretch * self.adjustment_ratio
        return width
