"""
Serialization of grid structures and column definitions.

The persisted form is a compact JSON object stored as an opaque document
property::

    {"rowMap": [0, 1, 2], "colMap": [0, 1, 2], "nextKey": 3,
     "colWidths": {"0": "auto", "1": "auto", "2": "auto"}}

Reading never fails. Each field that is missing or malformed falls back to
its part of the default 3x3 grid on its own, so a document with valid rows
and corrupt widths keeps its rows.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional, Tuple

from .models.column_defs import DEFAULT_COLUMN_DEFS, ColumnDef
from .models.grid_structure import GridStructure

logger = logging.getLogger(__name__)


def serialize(structure: GridStructure) -> str:
    """Encode a structure as compact JSON."""
    return json.dumps(structure.to_dict(), separators=(",", ":"), ensure_ascii=False)


def deserialize(raw: Optional[str]) -> GridStructure:
    """
    Decode a stored structure, falling back per field to the default grid.

    Args:
        raw: Stored JSON text (``None`` or empty means no prior state)

    Returns:
        A valid GridStructure
    """
    default = GridStructure.default()
    if not raw:
        return default

    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as e:
        logger.warning(f"Stored grid structure is not valid JSON, using default: {e}")
        return default

    if not isinstance(data, dict):
        logger.warning(f"Stored grid structure is a {type(data).__name__}, using default")
        return default

    return from_dict(data)


def from_dict(data: Dict[str, Any]) -> GridStructure:
    """Build a structure from a decoded mapping with per-field fallback."""
    default = GridStructure.default()

    row_keys = _key_sequence(data.get("rowMap"))
    if row_keys is None:
        logger.warning("Field 'rowMap' missing or malformed, using default rows")
        row_keys = default.row_keys

    col_keys = _key_sequence(data.get("colMap"))
    if col_keys is None:
        logger.warning("Field 'colMap' missing or malformed, using default columns")
        col_keys = default.col_keys

    next_key = data.get("nextKey")
    if not _is_int(next_key) or next_key < 0:
        logger.warning("Field 'nextKey' missing or malformed, using default")
        next_key = default.next_key

    # The allocator must stay ahead of every key already in use.
    highest = max(row_keys + col_keys)
    if next_key <= highest:
        logger.warning(f"Field 'nextKey'={next_key} not above used key {highest}, advancing")
        next_key = highest + 1

    widths = _width_map(data.get("colWidths"))
    if widths is None:
        logger.warning("Field 'colWidths' missing or malformed, using default widths")
        widths = {}
    for key in col_keys:
        widths.setdefault(str(key), "auto")

    return GridStructure(
        row_keys=row_keys,
        col_keys=col_keys,
        next_key=next_key,
        column_widths=widths,
    )


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _key_sequence(value: Any) -> Optional[Tuple[int, ...]]:
    if not isinstance(value, list) or not value:
        return None
    if not all(_is_int(key) and key >= 0 for key in value):
        return None
    if len(set(value)) != len(value):
        return None
    return tuple(value)


def _width_map(value: Any) -> Optional[Dict[str, str]]:
    if not isinstance(value, dict):
        return None
    if not all(isinstance(width, str) for width in value.values()):
        return None
    return {str(key): width for key, width in value.items()}


def serialize_column_defs(defs: Tuple[ColumnDef, ...]) -> str:
    return json.dumps([column.to_dict() for column in defs], separators=(",", ":"), ensure_ascii=False)


def parse_column_defs(raw: Optional[str]) -> Tuple[ColumnDef, ...]:
    """Decode column definitions; invalid, non-list or empty input gives the defaults."""
    if not raw:
        return DEFAULT_COLUMN_DEFS
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as e:
        logger.warning(f"Stored column definitions are not valid JSON, using default: {e}")
        return DEFAULT_COLUMN_DEFS
    if not isinstance(data, list) or not data:
        return DEFAULT_COLUMN_DEFS
    return tuple(ColumnDef.from_dict(item) for item in data if isinstance(item, dict)) or DEFAULT_COLUMN_DEFS
