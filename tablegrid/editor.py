"""
Table editor session.

``TableEditor`` binds a grid structure stored as a document property to a
content store. Each structural edit reads the property, applies a pure
operation and writes the serialized result back, so a failed edit never
leaves a partial structure behind.

Selection follows the property panel: a set of logical cells for merging,
or a single row, or a single column. Selecting one kind clears the others.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, FrozenSet, MutableMapping, Optional, Set, Tuple

from .config import DEFAULTS
from .engine.span_engine import LogicalCell, compute_hidden_cells, merge_rectangle, unmerge_rectangle
from .models.cell import CellSpan
from .models.grid_structure import GridStructure
from .serialization import deserialize, serialize
from .store.content_store import ContentStore, span_lookup, span_writer

logger = logging.getLogger(__name__)


class TableEditor:
    """Read-modify-write editing of one table widget."""

    def __init__(self, props: MutableMapping[str, Any], store: ContentStore,
                 property_name: str = DEFAULTS.property_name):
        """
        Initialize editor.

        Args:
            props: Document property bag of the table widget
            store: Content store holding the widget's cells
            property_name: Property holding the serialized structure
        """
        self.props = props
        self.store = store
        self.property_name = property_name
        self.selected_cells: Set[LogicalCell] = set()
        self.selected_row: Optional[int] = None
        self.selected_col: Optional[int] = None

    @property
    def structure(self) -> GridStructure:
        return deserialize(self.props.get(self.property_name))

    def _update(self, operation: Callable[[GridStructure], GridStructure]) -> GridStructure:
        structure = operation(self.structure)
        self.props[self.property_name] = serialize(structure)
        return structure

    def hidden_cells(self) -> FrozenSet[LogicalCell]:
        return compute_hidden_cells(self.structure, span_lookup(self.store))

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def toggle_cell(self, logical_row: int, logical_col: int) -> None:
        """Toggle a cell in the merge selection. Hidden and out-of-grid cells cannot be selected."""
        cell = (logical_row, logical_col)
        if cell in self.selected_cells:
            self.selected_cells.discard(cell)
        elif not self.structure.contains(logical_row, logical_col):
            logger.debug(f"Cell {cell} is outside the grid, not selectable")
            return
        elif cell in self.hidden_cells():
            logger.debug(f"Cell {cell} is hidden, not selectable")
            return
        else:
            self.selected_cells.add(cell)
        self.selected_row = None
        self.selected_col = None

    def select_row(self, logical_row: int) -> None:
        self.selected_row = None if logical_row == self.selected_row else logical_row
        self.selected_col = None
        self.selected_cells = set()

    def select_column(self, logical_col: int) -> None:
        self.selected_col = None if logical_col == self.selected_col else logical_col
        self.selected_row = None
        self.selected_cells = set()

    def clear_selection(self) -> None:
        self.selected_cells = set()
        self.selected_row = None
        self.selected_col = None

    # ------------------------------------------------------------------
    # Rows and columns
    # ------------------------------------------------------------------

    def insert_row_before(self) -> GridStructure:
        at = self.selected_row if self.selected_row is not None else 0
        return self._update(lambda s: s.insert_row(at))

    def insert_row_after(self) -> GridStructure:
        if self.selected_row is not None:
            return self._update(lambda s: s.insert_row(self.selected_row + 1))
        return self._update(lambda s: s.insert_row(s.row_count))

    def remove_selected_row(self) -> GridStructure:
        if self.selected_row is None:
            return self.structure
        at = self.selected_row
        self.selected_row = None
        return self._update(lambda s: s.remove_row(at))

    def insert_column_before(self) -> GridStructure:
        at = self.selected_col if self.selected_col is not None else 0
        return self._update(lambda s: s.insert_column(at))

    def insert_column_after(self) -> GridStructure:
        if self.selected_col is not None:
            return self._update(lambda s: s.insert_column(self.selected_col + 1))
        return self._update(lambda s: s.insert_column(s.col_count))

    def remove_selected_column(self) -> GridStructure:
        if self.selected_col is None:
            return self.structure
        at = self.selected_col
        self.selected_col = None
        return self._update(lambda s: s.remove_column(at))

    def set_column_width(self, logical_col: int, width: str) -> GridStructure:
        """Set the width of the column currently shown at ``logical_col``."""
        structure = self.structure
        if not 0 <= logical_col < structure.col_count:
            return structure
        phys_col = structure.col_keys[logical_col]
        return self._update(lambda s: s.set_column_width(phys_col, width))

    # ------------------------------------------------------------------
    # Merging
    # ------------------------------------------------------------------

    def merge_selected(self) -> Optional[CellSpan]:
        """Merge the bounding box of the selected cells. Needs two or more cells."""
        if len(self.selected_cells) < 2:
            return None
        span = merge_rectangle(self.structure, self.selected_cells, span_writer(self.store))
        self.selected_cells = set()
        return span

    def unmerge_selected(self) -> int:
        written = unmerge_rectangle(self.structure, self.selected_cells, span_writer(self.store))
        self.selected_cells = set()
        return written

    def selection(self) -> Tuple[FrozenSet[LogicalCell], Optional[int], Optional[int]]:
        return frozenset(self.selected_cells), self.selected_row, self.selected_col
