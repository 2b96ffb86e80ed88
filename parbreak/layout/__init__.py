"""
Layout Module for parbreak
Optimal-fit paragraph breaking

Public API:
    - KnuthPlassLayout: Optimal-fit layout engine
    - layout_paragraph: Convenience wrapper around KnuthPlassLayout
    - ParagraphLayout: Protocol implemented by layout strategies
    - Breakpoint: One laid-out line
    - FitnessClass: Adjustment ratio bucket
"""

from .base import ParagraphLayout
from .engine import KnuthPlassLayout, layout_paragraph, INFINITELY_BAD
from .types import Breakpoint, FitnessClass

__all__ = [
    'ParagraphLayout',
    'KnuthPlassLayout',
    'layout_paragraph',
    'INFINITELY_BAD',
    'Breakpoint',
    'FitnessClass',
]
