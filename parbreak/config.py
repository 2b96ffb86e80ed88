"""
parbreak Configuration
Immutable parameters for one paragraph layout call
"""
from dataclasses import dataclass, replace
import math

from .errors import InvalidInput


@dataclass(frozen=True)
class BreakConfig:
    """
    Line breaking parameters

    Values follow Knuth & Plass, "Breaking Paragraphs into Lines" (1981).
    A config is fixed for the duration of a layout call; use the with_*
    helpers or dataclasses.replace() to derive variants.
    """

    # ============================================================
    # FEASIBILITY
    # ============================================================
    threshold: float = math.inf
    """Maximum badness tolerated for a line that is not a forced break (inf accepts anything)"""

    looseness: int = 0
    """Signed number of lines to add to (or remove from) the optimal line count"""

    # ============================================================
    # DEMERIT WEIGHTS
    # ============================================================
    line_penalty: float = 1.0
    """Added to each line's badness before squaring"""

    flagged_demerit: float = 100.0
    """Extra demerits when two consecutive lines end at flagged breaks (alpha)"""

    fitness_demerit: float = 100.0
    """Extra demerits when adjacent lines differ by more than one fitness class (gamma)"""

    def __post_init__(self):
        if math.isnan(self.threshold) or self.threshold < 0:
            raise InvalidInput(f"threshold must be a non-negative number, got {self.threshold}")
        if isinstance(self.looseness, bool) or not isinstance(self.looseness, int):
            raise InvalidInput(f"looseness must be an integer, got {self.looseness!r}")
        for name in ('line_penalty', 'flagged_demerit', 'fitness_demerit'):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise InvalidInput(f"{name} must be finite and non-negative, got {value}")

    @staticmethod
    def ratio_threshold(ratio: float) -> float:
        """
        Badness threshold equivalent to a maximum adjustment ratio

        Example:
            >>> BreakConfig.ratio_threshold(1.0)
            100.0
        """
        return 100.0 * abs(ratio) ** 3

    def with_threshold(self, threshold: float) -> 'BreakConfig':
        return replace(self, threshold=threshold)

    def with_looseness(self, looseness: int) -> 'BreakConfig':
        return replace(self, looseness=looseness)

    def with_flagged_demerit(self, flagged_demerit: float) -> 'BreakConfig':
        return replace(self, flagged_demerit=flagged_demerit)

    def with_fitness_demerit(self, fitness_demerit: float) -> 'BreakConfig':
        return replace(self, fitness_demerit=fitness_demerit)

    # ============================================================
    # PRESET CONFIGURATIONS
    # ============================================================

    @classmethod
    def strict(cls) -> 'BreakConfig':
        """
        Classical first-pass tolerance

        - Lines may stretch at most to their full stretchability (ratio 1)

        Example:
            >>> config = BreakConfig.strict()
            >>> layout_paragraph(items, 80, config)
        """
        return cls(threshold=cls.ratio_threshold(1.0))

    @classmethod
    def tolerant(cls) -> 'BreakConfig':
        """
        Second-pass tolerance

        - Accepts lines up to badness 2000 (ratio of roughly 2.7)
        """
        return cls(threshold=2000.0)

    @classmethod
    def emergency(cls) -> 'BreakConfig':
        """
        Accept any arrangement, including overfull lines

        Use as a fallback after InfeasibleBreak.
        """
        return cls(threshold=math.inf)
