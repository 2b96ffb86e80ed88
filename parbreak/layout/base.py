"""
Paragraph layout capability

Any strategy exposing layout_paragraph(items, max_width) can be used by
callers; no base class is required.
"""
from __future__ import annotations
from typing import List, Protocol, Sequence, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from ..items import Item
    from .types import Breakpoint


@runtime_checkable
class ParagraphLayout(Protocol):
    """Breaks a paragraph of items into lines of a given width"""

    def layout_paragraph(self, items: Sequence[Item], max_width: float) -> List[Breakpoint]:
        """
        Lay out a paragraph

        Args:
            items: Paragraph items, ending with a forced-break penalty
            max_width: Target line width (positive, finite)

        Returns:
            Breakpoints in ascending order, one per line
        """
        ...
