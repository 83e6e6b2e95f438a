"""
Cell addressing and span records.

Cell content lives in an external content store. The grid only knows a cell
by its physical coordinate, which maps to a store key of the form
``cell_<physRow>_<physCol>``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from ..config import DEFAULTS


def cell_key(phys_row: int, phys_col: int, prefix: str = DEFAULTS.cell_prefix) -> str:
    """Build the content-store key for a physical coordinate."""
    return f"{prefix}_{phys_row}_{phys_col}"


def parse_cell_key(key: str, prefix: str = DEFAULTS.cell_prefix) -> Optional[Tuple[int, int]]:
    """Inverse of :func:`cell_key`; ``None`` for keys of any other form."""
    if not isinstance(key, str):
        return None
    parts = key.split("_")
    if len(parts) != 3 or parts[0] != prefix:
        return None
    try:
        return int(parts[1]), int(parts[2])
    except ValueError:
        return None


def _positive_int(value: Any) -> int:
    # Missing, zero, negative, non-finite or non-numeric spans all read as 1.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 1
    if isinstance(value, float) and not math.isfinite(value):
        return 1
    value = int(value)
    return value if value >= 1 else 1


@dataclass(frozen=True, slots=True)
class CellSpan:
    """Row and column span carried by an anchor cell."""

    rowspan: int = 1
    colspan: int = 1

    @classmethod
    def from_record(cls, record: Optional[Mapping[str, Any]]) -> "CellSpan":
        """Read a span from a content record, defaulting absent fields to 1."""
        if not record:
            return cls()
        return cls(
            rowspan=_positive_int(record.get("rowspan")),
            colspan=_positive_int(record.get("colspan")),
        )

    @property
    def is_merged(self) -> bool:
        return self.rowspan > 1 or self.colspan > 1

    def to_fields(self) -> Dict[str, int]:
        """Partial record fields for a content-store write."""
        return {"rowspan": self.rowspan, "colspan": self.colspan}


UNMERGED = CellSpan()
