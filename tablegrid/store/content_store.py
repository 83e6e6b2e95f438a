"""
Content store collaborator.

Cell content is owned outside the grid and addressed by physical
coordinate. The grid reads spans through :func:`span_lookup` and writes
them through :func:`span_writer`; it never touches any other field.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, Iterator, List, Mapping, Optional, Protocol, Set, Tuple, runtime_checkable

from ..config import DEFAULTS
from ..engine.span_engine import LogicalCell, SpanLookup, SpanWriter, compute_hidden_cells
from ..exceptions import MissingCellError
from ..models.cell import CellSpan, cell_key, parse_cell_key
from ..models.grid_structure import GridStructure

logger = logging.getLogger(__name__)


@runtime_checkable
class ContentStore(Protocol):
    """Key-value access to cell records by physical coordinate."""

    def get(self, phys_row: int, phys_col: int) -> Optional[Mapping[str, Any]]:
        ...

    def set(self, phys_row: int, phys_col: int, fields: Mapping[str, Any]) -> None:
        ...


class InMemoryContentStore:
    """
    Dictionary backed content store keyed ``cell_<row>_<col>``.

    Writes merge fields into the addressed record. A non-strict store creates
    missing records on write; a strict one raises :class:`MissingCellError`.
    """

    def __init__(self, records: Optional[Mapping[str, Mapping[str, Any]]] = None,
                 strict: bool = False, prefix: str = DEFAULTS.cell_prefix):
        self.strict = strict
        self.prefix = prefix
        self._records: Dict[str, Dict[str, Any]] = {
            key: dict(value) for key, value in (records or {}).items()
        }

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def get(self, phys_row: int, phys_col: int) -> Optional[Dict[str, Any]]:
        return self._records.get(cell_key(phys_row, phys_col, self.prefix))

    def set(self, phys_row: int, phys_col: int, fields: Mapping[str, Any]) -> None:
        key = cell_key(phys_row, phys_col, self.prefix)
        record = self._records.get(key)
        if record is None:
            if self.strict:
                raise MissingCellError(phys_row, phys_col)
            record = self._records[key] = {}
        record.update(fields)

    def delete(self, phys_row: int, phys_col: int) -> bool:
        return self._records.pop(cell_key(phys_row, phys_col, self.prefix), None) is not None

    def coordinates(self) -> List[Tuple[int, int]]:
        """Physical coordinates of every record with a well-formed key."""
        result = []
        for key in self._records:
            coordinate = parse_cell_key(key, self.prefix)
            if coordinate is not None:
                result.append(coordinate)
        return result

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return copy.deepcopy(self._records)


def span_lookup(store: ContentStore) -> SpanLookup:
    """Adapt a content store into a span lookup callable."""

    def lookup(phys_row: int, phys_col: int) -> CellSpan:
        return CellSpan.from_record(store.get(phys_row, phys_col))

    return lookup


def span_writer(store: ContentStore) -> SpanWriter:
    """Adapt a content store into a span writer callable."""

    def write(phys_row: int, phys_col: int, span: CellSpan) -> None:
        store.set(phys_row, phys_col, span.to_fields())

    return write


def hidden_cells(structure: GridStructure, store: ContentStore) -> frozenset:
    """Hidden logical cells of a structure, with spans read from ``store``."""
    return compute_hidden_cells(structure, span_lookup(store))


def is_header(store: ContentStore, phys_row: int, phys_col: int) -> bool:
    record = store.get(phys_row, phys_col)
    return bool(record and record.get("isHeader"))


def orphaned_keys(store: InMemoryContentStore, structure: GridStructure) -> List[Tuple[int, int]]:
    """Coordinates in the store whose row or column no longer exists."""
    rows = set(structure.row_keys)
    cols = set(structure.col_keys)
    return sorted(
        (row, col) for row, col in store.coordinates()
        if row not in rows or col not in cols
    )


def prune_orphans(store: InMemoryContentStore, structure: GridStructure) -> int:
    """
    Delete records addressed by removed rows or columns.

    Returns:
        Number of records deleted
    """
    orphans = orphaned_keys(store, structure)
    for phys_row, phys_col in orphans:
        store.delete(phys_row, phys_col)
    if orphans:
        logger.info(f"Pruned {len(orphans)} orphaned cell record(s)")
    return len(orphans)


def anchors(structure: GridStructure, store: ContentStore) -> List[Tuple[LogicalCell, CellSpan]]:
    """
    Visible merged anchors with their spans clipped to the grid.

    Ranges never overlap. Spans from two anchors can cross, e.g. a rowspan
    from above reaching into a colspan from the left; a later anchor (in
    row-major order) is shrunk to stop before any cell an earlier range
    already covers, and dropped when nothing is left to merge.
    """
    lookup = span_lookup(store)
    hidden = compute_hidden_cells(structure, lookup)
    rows, cols = structure.shape
    claimed: Set[LogicalCell] = set()
    result = []
    for logical_row, logical_col, phys_row, phys_col in structure.iter_cells():
        if (logical_row, logical_col) in hidden:
            continue
        span = lookup(phys_row, phys_col)
        if not span.is_merged:
            continue
        colspan = 1
        while (colspan < min(span.colspan, cols - logical_col)
               and (logical_row, logical_col + colspan) not in claimed):
            colspan += 1
        rowspan = 1
        while (rowspan < min(span.rowspan, rows - logical_row)
               and not any((logical_row + rowspan, logical_col + dc) in claimed for dc in range(colspan))):
            rowspan += 1
        clipped = CellSpan(rowspan=rowspan, colspan=colspan)
        if clipped != span:
            logger.debug(f"Anchor ({logical_row},{logical_col}) clipped to {rowspan}x{colspan}")
        if not clipped.is_merged:
            continue
        claimed.update(
            (logical_row + dr, logical_col + dc) for dr in range(rowspan) for dc in range(colspan)
        )
        result.append(((logical_row, logical_col), clipped))
    return result
