"""Exceptions raised by paragraph layout"""

from __future__ import annotations
from typing import Optional


class LayoutError(Exception):
    """Base class for all layout failures"""


class InvalidInput(LayoutError, ValueError):
    """The item sequence, width or configuration cannot be laid out"""


class InfeasibleBreak(LayoutError):
    """
    No admissible breaking exists under the configured threshold

    Attributes:
        position: Index of the breakpoint at which the active set ran dry
        threshold: Badness threshold in effect for the call
    """

    def __init__(self, message: str, position: Optional[int] = None,
                 threshold: Optional[float] = None):
        super().__init__(message)
        self.position = position
        self.threshold = threshold
