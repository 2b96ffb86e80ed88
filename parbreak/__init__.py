"""parbreak: Optimal-fit paragraph line breaking"""

from .config import BreakConfig
from .errors import LayoutError, InvalidInput, InfeasibleBreak
from .items import Box, Glue, Penalty, Item
from .layout import KnuthPlassLayout, ParagraphLayout, Breakpoint, FitnessClass, layout_paragraph
from . import utils

__version__ = "0.1.0"
__all__ = ["BreakConfig", "LayoutError", "InvalidInput", "InfeasibleBreak", "Box", "Glue", "Penalty", "Item",
           "KnuthPlassLayout", "ParagraphLayout", "Breakpoint", "FitnessClass", "layout_paragraph", "utils"]
