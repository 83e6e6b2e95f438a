"""
Span engine - merged cell computations.

Only the top-left (anchor) cell of a merged block carries a span larger than
one. Every other cell the span covers is hidden. Span data is read and
written through caller supplied callables so the grid never holds a
reference into the content store.
"""

from __future__ import annotations

import logging
from typing import Callable, FrozenSet, Iterable, Optional, Set, Tuple

from ..models.cell import CellSpan, UNMERGED
from ..models.grid_structure import GridStructure

logger = logging.getLogger(__name__)

LogicalCell = Tuple[int, int]
SpanLookup = Callable[[int, int], CellSpan]
SpanWriter = Callable[[int, int, CellSpan], None]


def compute_hidden_cells(structure: GridStructure, span_lookup: SpanLookup) -> FrozenSet[LogicalCell]:
    """
    Compute the logical cells covered by a neighbouring anchor's span.

    Cells are visited in row-major order so an anchor is always processed
    before the cells it covers. A covered cell is skipped as an anchor even
    if its own record carries a span.

    Args:
        structure: Grid structure
        span_lookup: Returns the span stored for ``(phys_row, phys_col)``

    Returns:
        Set of hidden ``(logical_row, logical_col)`` positions
    """
    rows, cols = structure.shape
    hidden: Set[LogicalCell] = set()

    for logical_row, logical_col, phys_row, phys_col in structure.iter_cells():
        if (logical_row, logical_col) in hidden:
            continue
        span = span_lookup(phys_row, phys_col)
        for dr in range(span.rowspan):
            target_row = logical_row + dr
            if target_row >= rows:
                break
            for dc in range(span.colspan):
                if dr == 0 and dc == 0:
                    continue
                target_col = logical_col + dc
                if target_col >= cols:
                    break
                hidden.add((target_row, target_col))

    return frozenset(hidden)


def bounding_box(cells: Iterable[LogicalCell]) -> Optional[Tuple[int, int, int, int]]:
    """Return ``(min_row, min_col, max_row, max_col)`` or None for an empty set."""
    cells = list(cells)
    if not cells:
        return None
    rows = [row for row, _ in cells]
    cols = [col for _, col in cells]
    return min(rows), min(cols), max(rows), max(cols)


def merge_rectangle(structure: GridStructure, cells: Iterable[LogicalCell], span_writer: SpanWriter) -> Optional[CellSpan]:
    """
    Merge the bounding box of a cell selection into its top-left anchor.

    The selection does not have to fill the rectangle: the whole bounding box
    is merged. Only the anchor is written. A box reaching past the grid is
    written as is; :func:`compute_hidden_cells` clips it on read.

    Returns:
        The span written to the anchor, or None when nothing was merged
    """
    selection = set(cells)
    if len(selection) < 2:
        logger.debug(f"Merge ignored: {len(selection)} cell(s) selected")
        return None

    min_row, min_col, max_row, max_col = bounding_box(selection)
    physical = structure.logical_to_physical(min_row, min_col)
    if physical is None:
        logger.debug(f"Merge ignored: anchor ({min_row},{min_col}) is outside the grid")
        return None

    phys_row, phys_col = physical
    span = CellSpan(rowspan=max_row - min_row + 1, colspan=max_col - min_col + 1)
    span_writer(phys_row, phys_col, span)
    logger.debug(f"Merged ({min_row},{min_col})-({max_row},{max_col}) into cell_{phys_row}_{phys_col}")
    return span


def unmerge_rectangle(structure: GridStructure, cells: Iterable[LogicalCell], span_writer: SpanWriter) -> int:
    """
    Reset every selected cell to a 1x1 span.

    Each member is reset on its own; no bounding box is computed. Hidden
    cells receive a harmless reset as well.

    Returns:
        Number of cells written
    """
    written = 0
    for logical_row, logical_col in sorted(set(cells)):
        physical = structure.logical_to_physical(logical_row, logical_col)
        if physical is None:
            continue
        span_writer(physical[0], physical[1], UNMERGED)
        written += 1
    return written
