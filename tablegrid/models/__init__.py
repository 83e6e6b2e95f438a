"""
Models module for grid structures.

This module contains the value types describing table structure: the
logical/physical grid mapping, cell addressing and span records, and
data-table column definitions.
"""

from .cell import CellSpan, UNMERGED, cell_key, parse_cell_key
from .grid_structure import GridStructure, KeyAllocator
from .column_defs import ActionButton, ColumnDef, DEFAULT_COLUMN_DEFS

__all__ = [
    "CellSpan",
    "UNMERGED",
    "cell_key",
    "parse_cell_key",
    "GridStructure",
    "KeyAllocator",
    "ActionButton",
    "ColumnDef",
    "DEFAULT_COLUMN_DEFS",
]
