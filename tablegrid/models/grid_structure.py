"""
Grid structure model for editable table widgets.

A ``GridStructure`` maps logical positions (what the user sees) to physical
keys (stable identities that address cell content in an external store).
Rows and columns can be inserted or removed anywhere without changing the
key of any surviving row or column.

Every operation is a pure function: it returns a new structure and leaves
its input untouched. Invalid indices are clamped or turn the operation into
a no-op; nothing here raises for bad input.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple

from ..config import DEFAULTS

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class KeyAllocator:
    """
    Monotonic key source shared by row and column insertion.

    Keys are never reused. Allocation returns the issued key together with
    the advanced allocator instead of mutating in place.
    """

    next_key: int = 0

    def allocate(self) -> Tuple[int, "KeyAllocator"]:
        return self.next_key, KeyAllocator(self.next_key + 1)


@dataclass(frozen=True)
class GridStructure:
    """
    Logical to physical mapping of a table grid.

    Attributes:
        row_keys: Physical row key per logical row
        col_keys: Physical column key per logical column
        next_key: Next key the allocator will issue
        column_widths: Declared width per physical column key (as string)
    """

    row_keys: Tuple[int, ...]
    col_keys: Tuple[int, ...]
    next_key: int
    column_widths: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        # Each snapshot owns a read-only copy of its widths.
        object.__setattr__(self, "column_widths", MappingProxyType(dict(self.column_widths)))

    @classmethod
    def default(cls, rows: int = DEFAULTS.rows, cols: int = DEFAULTS.cols) -> "GridStructure":
        """Create the default grid: keys ``0..n-1`` on both axes."""
        rows = max(1, rows)
        cols = max(1, cols)
        return cls(
            row_keys=tuple(range(rows)),
            col_keys=tuple(range(cols)),
            next_key=max(rows, cols),
            column_widths={str(key): DEFAULTS.width for key in range(cols)},
        )

    # ------------------------------------------------------------------
    # Shape and lookups
    # ------------------------------------------------------------------

    @property
    def row_count(self) -> int:
        return len(self.row_keys)

    @property
    def col_count(self) -> int:
        return len(self.col_keys)

    @property
    def shape(self) -> Tuple[int, int]:
        """Grid dimensions (rows, columns)."""
        return (len(self.row_keys), len(self.col_keys))

    def allocator(self) -> KeyAllocator:
        return KeyAllocator(self.next_key)

    def contains(self, logical_row: int, logical_col: int) -> bool:
        return 0 <= logical_row < len(self.row_keys) and 0 <= logical_col < len(self.col_keys)

    def logical_to_physical(self, logical_row: int, logical_col: int) -> Optional[Tuple[int, int]]:
        """Physical ``(row_key, col_key)`` at a logical position, or None if out of bounds."""
        if not self.contains(logical_row, logical_col):
            return None
        return self.row_keys[logical_row], self.col_keys[logical_col]

    def physical_to_logical(self, phys_row: int, phys_col: int) -> Optional[Tuple[int, int]]:
        """Current logical position of a physical coordinate, or None if either key is gone."""
        try:
            return self.row_keys.index(phys_row), self.col_keys.index(phys_col)
        except ValueError:
            return None

    def width_of(self, phys_col: int) -> str:
        """Declared width of a physical column; ``auto`` when not set."""
        return self.column_widths.get(str(phys_col), DEFAULTS.width)

    def iter_cells(self) -> Iterator[Tuple[int, int, int, int]]:
        """Yield ``(logical_row, logical_col, phys_row, phys_col)`` in row-major order."""
        for logical_row, phys_row in enumerate(self.row_keys):
            for logical_col, phys_col in enumerate(self.col_keys):
                yield logical_row, logical_col, phys_row, phys_col

    # ------------------------------------------------------------------
    # Structural edits
    # ------------------------------------------------------------------

    def insert_row(self, at_index: int) -> "GridStructure":
        """Insert a new row at a logical index (clamped to the valid range)."""
        key, allocator = self.allocator().allocate()
        at_index = _clamp(at_index, len(self.row_keys))
        row_keys = self.row_keys[:at_index] + (key,) + self.row_keys[at_index:]
        logger.debug(f"Inserted row key {key} at logical index {at_index}")
        return replace(self, row_keys=row_keys, next_key=allocator.next_key)

    def remove_row(self, at_index: int) -> "GridStructure":
        """Remove the row at a logical index. No-op on the last row or an invalid index."""
        if len(self.row_keys) <= 1 or not 0 <= at_index < len(self.row_keys):
            logger.debug(f"Row removal at {at_index} ignored ({len(self.row_keys)} rows)")
            return self
        row_keys = self.row_keys[:at_index] + self.row_keys[at_index + 1:]
        return replace(self, row_keys=row_keys)

    def insert_column(self, at_index: int) -> "GridStructure":
        """Insert a new ``auto`` width column at a logical index (clamped)."""
        key, allocator = self.allocator().allocate()
        at_index = _clamp(at_index, len(self.col_keys))
        col_keys = self.col_keys[:at_index] + (key,) + self.col_keys[at_index:]
        widths = dict(self.column_widths)
        widths[str(key)] = DEFAULTS.width
        logger.debug(f"Inserted column key {key} at logical index {at_index}")
        return replace(self, col_keys=col_keys, next_key=allocator.next_key, column_widths=widths)

    def remove_column(self, at_index: int) -> "GridStructure":
        """Remove the column at a logical index and prune its width entry."""
        if len(self.col_keys) <= 1 or not 0 <= at_index < len(self.col_keys):
            logger.debug(f"Column removal at {at_index} ignored ({len(self.col_keys)} columns)")
            return self
        removed = self.col_keys[at_index]
        col_keys = self.col_keys[:at_index] + self.col_keys[at_index + 1:]
        widths = {key: value for key, value in self.column_widths.items() if key != str(removed)}
        return replace(self, col_keys=col_keys, column_widths=widths)

    def set_column_width(self, phys_col: int, width: str) -> "GridStructure":
        """Set the declared width of a physical column. Any string is accepted."""
        widths = dict(self.column_widths)
        widths[str(phys_col)] = width
        return replace(self, column_widths=widths)

    def to_dict(self) -> Dict[str, object]:
        """Persisted representation (``rowMap``/``colMap``/``nextKey``/``colWidths``)."""
        return {
            "rowMap": list(self.row_keys),
            "colMap": list(self.col_keys),
            "nextKey": self.next_key,
            "colWidths": dict(self.column_widths),
        }


def _clamp(index: int, upper: int) -> int:
    return max(0, min(index, upper))


# Functional aliases matching the operation names used by callers that treat
# the structure as a plain value.

def insert_row(structure: GridStructure, at_index: int) -> GridStructure:
    return structure.insert_row(at_index)


def remove_row(structure: GridStructure, at_index: int) -> GridStructure:
    return structure.remove_row(at_index)


def insert_column(structure: GridStructure, at_index: int) -> GridStructure:
    return structure.insert_column(at_index)


def remove_column(structure: GridStructure, at_index: int) -> GridStructure:
    return structure.remove_column(at_index)


def set_column_width(structure: GridStructure, phys_col: int, width: str) -> GridStructure:
    return structure.set_column_width(phys_col, width)


def width_of(structure: GridStructure, phys_col: int) -> str:
    return structure.width_of(phys_col)


def logical_to_physical(structure: GridStructure, logical_row: int, logical_col: int) -> Optional[Tuple[int, int]]:
    return structure.logical_to_physical(logical_row, logical_col)
