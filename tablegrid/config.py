"""
Default configuration for grid structures.

A single ``DEFAULTS`` instance drives the fallback grid used when no stored
structure exists, the document property name the editor reads and writes,
and the prefix used to build content-store keys.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GridDefaults:
    """Defaults for new and recovered grid structures."""

    rows: int = 3
    cols: int = 3
    width: str = "auto"
    property_name: str = "tableMeta"
    cell_prefix: str = "cell"


DEFAULTS = GridDefaults()
