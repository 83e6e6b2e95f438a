"""
tablegrid - grid structure model for editable table widgets.

A table widget shows a grid of logical rows and columns. Its cells hold
content owned elsewhere, addressed by stable physical keys. This package
keeps the mapping between the two so rows and columns can be inserted,
removed and merged without losing any surviving cell's content.

Quick Start:
    from tablegrid import GridStructure, InMemoryContentStore, hidden_cells
    from tablegrid import merge_rectangle, span_writer

    grid = GridStructure.default()
    store = InMemoryContentStore()
    merge_rectangle(grid, {(0, 0), (1, 1)}, span_writer(store))
    hidden_cells(grid, store)   # frozenset({(0, 1), (1, 0), (1, 1)})
"""

from .version import __version__, __version_info__

from .exceptions import (
    TableGridError,
    ContentStoreError,
    MissingCellError,
    ExportError,
)
from .config import DEFAULTS, GridDefaults
from .models import (
    ActionButton,
    CellSpan,
    ColumnDef,
    DEFAULT_COLUMN_DEFS,
    GridStructure,
    KeyAllocator,
    UNMERGED,
    cell_key,
    parse_cell_key,
)
from .models.grid_structure import (
    insert_column,
    insert_row,
    logical_to_physical,
    remove_column,
    remove_row,
    set_column_width,
    width_of,
)
from .engine import bounding_box, compute_hidden_cells, merge_rectangle, unmerge_rectangle
from .store import (
    ContentStore,
    InMemoryContentStore,
    hidden_cells,
    is_header,
    prune_orphans,
    span_lookup,
    span_writer,
)
from .serialization import deserialize, serialize, parse_column_defs, serialize_column_defs
from .editor import TableEditor

__all__ = [
    "__version__",
    "__version_info__",
    "TableGridError",
    "ContentStoreError",
    "MissingCellError",
    "ExportError",
    "DEFAULTS",
    "GridDefaults",
    "ActionButton",
    "CellSpan",
    "ColumnDef",
    "DEFAULT_COLUMN_DEFS",
    "GridStructure",
    "KeyAllocator",
    "UNMERGED",
    "cell_key",
    "parse_cell_key",
    "insert_row",
    "remove_row",
    "insert_column",
    "remove_column",
    "set_column_width",
    "width_of",
    "logical_to_physical",
    "bounding_box",
    "compute_hidden_cells",
    "merge_rectangle",
    "unmerge_rectangle",
    "ContentStore",
    "InMemoryContentStore",
    "hidden_cells",
    "is_header",
    "prune_orphans",
    "span_lookup",
    "span_writer",
    "deserialize",
    "serialize",
    "parse_column_defs",
    "serialize_column_defs",
    "TableEditor",
]
