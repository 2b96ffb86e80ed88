"""I/O utilities for parbreak"""

from .readers import ItemReader, read_items
from .writers import BreakpointWriter, write_breakpoints, breakpoints_to_frame, items_to_frame, write_items

__all__ = [
    'ItemReader', 'read_items',
    'BreakpointWriter', 'write_breakpoints',
    'breakpoints_to_frame', 'items_to_frame', 'write_items']
