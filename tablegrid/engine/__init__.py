"""Span computations over grid structures."""

from .span_engine import (
    bounding_box,
    compute_hidden_cells,
    merge_rectangle,
    unmerge_rectangle,
)

__all__ = [
    "bounding_box",
    "compute_hidden_cells",
    "merge_rectangle",
    "unmerge_rectangle",
]
