"""
Layout Engine for parbreak
Optimal-fit paragraph breaking (Knuth-Plass)

Algorithm:
1. Scan legal breakpoints left to right, keeping a set of active nodes
   (feasible partial breakings ending at an earlier breakpoint)
2. For every active node, measure the line it would form up to the
   current breakpoint and score it (badness -> demerits)
3. Keep the cheapest candidate per fitness class and add it as a new
   active node; drop nodes whose line is already overfull
4. At the terminal forced break pick the cheapest completed breaking
   and walk predecessor links back to the start of the paragraph

Nodes live in a per-call arena (a list) and refer to their predecessor by
index, so a layout call keeps no state once it returns.
"""
from __future__ import annotations
from typing import Dict, List, Optional, Sequence, Tuple
from dataclasses import dataclass
import logging
import numbers
import math

from ..config import BreakConfig
from ..errors import InfeasibleBreak, InvalidInput
from ..items import (
    Box,
    Glue,
    Item,
    Penalty,
    dimensions,
    is_flagged,
    is_forced_break,
    is_legal_breakpoint,
    penalty_cost,
)
from .types import Breakpoint, FitnessClass

logger = logging.getLogger(__name__)

INFINITELY_BAD = 1e10
"""Badness assigned to lines that cannot be adjusted to fit at all"""


def _is_number(value) -> bool:
    # Accepts numpy scalars as well as int and float
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


@dataclass
class _Node:
    """A feasible break, linked to the best break preceding it"""
    position: int
    line: int
    fitness: FitnessClass
    total_width: float
    total_stretch: float
    total_shrink: float
    total_demerits: float
    adjustment_ratio: float = 0.0
    previous: Optional[int] = None


# (demerits, active node index, adjustment ratio)
_Candidate = Tuple[float, int, float]


class KnuthPlassLayout:
    """
    Optimal-fit line breaker

    Minimises total demerits over the whole paragraph rather than filling
    each line greedily. Satisfies the ParagraphLayout protocol.

    Example:
        >>> layout = KnuthPlassLayout(BreakConfig(threshold=math.inf))
        >>> breaks = layout.layout_paragraph(items, 80)
    """

    def __init__(self, config: Optional[BreakConfig] = None):
        """
        Initialize layout engine

        Args:
            config: Breaking parameters (defaults to BreakConfig())
        """
        self.config = config or BreakConfig()

        logger.debug(f"KnuthPlassLayout initialized: threshold={self.config.threshold}, "
                     f"looseness={self.config.looseness}")

    def layout_paragraph(self, items: Sequence[Item], max_width: float) -> List[Breakpoint]:
        """
        Compute the optimal breakpoints for a paragraph

        Args:
            items: Paragraph items, ending with a forced-break penalty
            max_width: Target line width (positive, finite)

        Returns:
            Breakpoints in ascending order of break_at, one per line

        Raises:
            InvalidInput: If items or max_width are malformed
            InfeasibleBreak: If no breaking satisfies the threshold
        """
        self._validate(items, max_width)
        return _LayoutRun(items, float(max_width), self.config).run()

    @staticmethod
    def _validate(items: Sequence[Item], max_width: float) -> None:
        """Reject inputs that cannot be laid out"""
        if not _is_number(max_width):
            raise InvalidInput(f"max_width must be a number, got {max_width!r}")
        if not math.isfinite(max_width) or max_width <= 0:
            raise InvalidInput(f"max_width must be positive and finite, got {max_width}")
        if len(items) == 0:
            raise InvalidInput("Cannot lay out an empty paragraph")

        for i, item in enumerate(items):
            if not isinstance(item, (Box, Glue, Penalty)):
                raise InvalidInput(f"Item {i} is not a Box, Glue or Penalty: {item!r}")
            if isinstance(item, Penalty):
                fields = [('width', item.width)]
                if not _is_number(item.cost):
                    raise InvalidInput(f"Item {i} has non-numeric cost: {item.cost!r}")
                if math.isnan(item.cost):
                    raise InvalidInput(f"Item {i} has NaN penalty cost")
            else:
                fields = zip(('width', 'stretch', 'shrink'), dimensions(item))
            for name, value in fields:
                if not _is_number(value):
                    raise InvalidInput(f"Item {i} has non-numeric {name}: {value!r}")
                if not math.isfinite(value) or value < 0:
                    raise InvalidInput(f"Item {i} has invalid {name}: {value}")

        if not is_forced_break(items[-1]):
            raise InvalidInput("Paragraph must end with a forced-break penalty (cost -inf)")


def layout_paragraph(
    items: Sequence[Item],
    max_width: float,
    config: Optional[BreakConfig] = None
) -> List[Breakpoint]:
    """
    Convenience function for optimal-fit layout

    Args:
        items: Paragraph items, ending with a forced-break penalty
        max_width: Target line width
        config: Breaking parameters (defaults to BreakConfig())

    Returns:
        Breakpoints in ascending order, one per line
    """
    return KnuthPlassLayout(config).layout_paragraph(items, max_width)


class _LayoutRun:
    """
    Working state for a single layout call

    Tracks the running width/stretch/shrink of all items scanned so far,
    the node arena and the indices of the active nodes.
    """

    def __init__(self, items: Sequence[Item], line_width: float, config: BreakConfig):
        self.items = items
        self.line_width = line_width
        self.config = config

        self.total_width = 0.0
        self.total_stretch = 0.0
        self.total_shrink = 0.0

        root = _Node(
            position=0,
            line=0,
            fitness=FitnessClass.TIGHT,
            total_width=0.0,
            total_stretch=0.0,
            total_shrink=0.0,
            total_demerits=0.0,
        )
        self.nodes: List[_Node] = [root]
        self.active: List[int] = [0]

    def run(self) -> List[Breakpoint]:
        """Scan all items and return the winning breakpoints"""
        for b, item in enumerate(self.items):
            previous = self.items[b - 1] if b > 0 else None
            if is_legal_breakpoint(item, previous):
                self._try_break(b)
                if not self.active:
                    logger.warning(f"No feasible breaking at item {b} "
                                   f"(threshold={self.config.threshold})")
                    raise InfeasibleBreak(
                        f"No line arrangement satisfies threshold {self.config.threshold} "
                        f"(active set exhausted at item {b})",
                        position=b,
                        threshold=self.config.threshold,
                    )

            width, stretch, shrink = dimensions(item)
            self.total_width += width
            self.total_stretch += stretch
            self.total_shrink += shrink

        chosen = self._choose_final()
        breakpoints = self._reconstruct(chosen)

        logger.debug(f"Laid out {len(self.items)} items into {len(breakpoints)} lines "
                     f"({len(self.nodes)} nodes, demerits={self.nodes[chosen].total_demerits:.2f})")
        return breakpoints

    def _adjustment_ratio(self, node: _Node, b: int, with_penalty: bool = True) -> float:
        """
        Adjustment ratio for the line from node to a break at b

        With with_penalty=False the width of a penalty at b is left out,
        giving the ratio of the material that carries on to later breaks.
        """
        item = self.items[b]
        width = self.total_width - node.total_width
        if with_penalty and isinstance(item, Penalty):
            width += item.width

        if width < self.line_width:
            stretch = self.total_stretch - node.total_stretch
            return (self.line_width - width) / stretch if stretch > 0 else math.inf
        if width > self.line_width:
            shrink = self.total_shrink - node.total_shrink
            return (self.line_width - width) / shrink if shrink > 0 else -math.inf
        return 0.0

    @staticmethod
    def _badness(ratio: float) -> float:
        if math.isinf(ratio):
            return INFINITELY_BAD
        return min(100.0 * abs(ratio) ** 3, INFINITELY_BAD)

    def _is_admissible(self, ratio: float, forced: bool) -> bool:
        # Forced breaks always close a line; an infinite threshold also
        # admits overfull lines so the search cannot run dry.
        if forced or math.isinf(self.config.threshold):
            return True
        # A finite threshold is compared against uncapped badness, so lines
        # that cannot be adjusted at all are never admissible.
        if math.isinf(ratio) or ratio < -1:
            return False
        return 100.0 * abs(ratio) ** 3 <= self.config.threshold

    def _line_demerits(self, ratio: float, badness: float, node: _Node, b: int) -> Tuple[float, FitnessClass]:
        """
        Demerits and fitness class for the line from node to b

        Returns:
            Tuple of (total demerits up to b, fitness class of the line)
        """
        item = self.items[b]
        cost = penalty_cost(item)
        base = self.config.line_penalty + badness

        if cost >= 0:
            demerits = (base + cost) ** 2
        elif cost != -math.inf:
            demerits = base ** 2 - cost ** 2
        else:
            demerits = base ** 2

        if node.previous is not None and is_flagged(item) and is_flagged(self.items[node.position]):
            demerits += self.config.flagged_demerit

        fitness = FitnessClass.from_ratio(ratio)
        if fitness.distance(node.fitness) > 1:
            demerits += self.config.fitness_demerit

        return node.total_demerits + demerits, fitness

    def _try_break(self, b: int) -> None:
        """Process legal breakpoint b against every active node"""
        forced = is_forced_break(self.items[b])
        group_by_line = self.config.looseness != 0

        groups: Dict[Optional[int], Dict[FitnessClass, _Candidate]] = {}
        survivors: List[int] = []

        for index in self.active:
            node = self.nodes[index]
            ratio = self._adjustment_ratio(node, b)

            # Overfull lines only get longer; every line ends at a forced break.
            # A penalty's own width is not carried past b.
            if not forced and self._adjustment_ratio(node, b, with_penalty=False) >= -1:
                survivors.append(index)

            if not self._is_admissible(ratio, forced):
                continue

            demerits, fitness = self._line_demerits(ratio, self._badness(ratio), node, b)
            best = groups.setdefault(node.line if group_by_line else None, {})
            current = best.get(fitness)
            if current is None or demerits < current[0]:
                best[fitness] = (demerits, index, ratio)

        created: List[int] = []
        if groups:
            total_width, total_stretch, total_shrink = self._totals_after(b)
            for best in groups.values():
                limit = min(candidate[0] for candidate in best.values()) + self.config.fitness_demerit
                for fitness in FitnessClass:
                    candidate = best.get(fitness)
                    if candidate is None or candidate[0] > limit:
                        continue
                    demerits, previous, ratio = candidate
                    self.nodes.append(_Node(
                        position=b,
                        line=self.nodes[previous].line + 1,
                        fitness=fitness,
                        total_width=total_width,
                        total_stretch=total_stretch,
                        total_shrink=total_shrink,
                        total_demerits=demerits,
                        adjustment_ratio=ratio,
                        previous=previous,
                    ))
                    created.append(len(self.nodes) - 1)

        self.active = survivors + created
        if group_by_line:
            self.active.sort(key=lambda i: self.nodes[i].line)

    def _totals_after(self, b: int) -> Tuple[float, float, float]:
        """
        Running totals just after a break at b

        Glue and penalties following the break are discarded at the start
        of the next line, up to the next box or forced break.
        """
        width, stretch, shrink = self.total_width, self.total_stretch, self.total_shrink
        for i in range(b, len(self.items)):
            item = self.items[i]
            if isinstance(item, Box):
                break
            if isinstance(item, Glue):
                width += item.width
                stretch += item.stretch
                shrink += item.shrink
            elif is_forced_break(item) and i > b:
                break
        return width, stretch, shrink

    def _choose_final(self) -> int:
        """Pick the completed breaking, honouring looseness"""
        best = min(self.active, key=lambda i: (self.nodes[i].total_demerits, self.nodes[i].line, i))

        looseness = self.config.looseness
        if looseness != 0:
            target = self.nodes[best].line + looseness
            matches = [i for i in self.active if self.nodes[i].line == target]
            if matches:
                best = min(matches, key=lambda i: (self.nodes[i].total_demerits, i))
            else:
                logger.debug(f"No breaking with {target} lines; keeping optimum of "
                             f"{self.nodes[best].line} lines")
        return best

    def _reconstruct(self, index: int) -> List[Breakpoint]:
        """Walk predecessor links from the chosen node back to the root"""
        breakpoints: List[Breakpoint] = []
        node = self.nodes[index]
        while node.previous is not None:
            breakpoints.append(Breakpoint(
                break_at=node.position,
                line_number=node.line,
                adjustment_ratio=node.adjustment_ratio,
                fitness_class=node.fitness,
            ))
            node = self.nodes[node.previous]
        breakpoints.reverse()
        return breakpoints
