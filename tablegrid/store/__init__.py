"""Content store collaborators and span adapters."""

from .content_store import (
    ContentStore,
    InMemoryContentStore,
    anchors,
    hidden_cells,
    is_header,
    orphaned_keys,
    prune_orphans,
    span_lookup,
    span_writer,
)

__all__ = [
    "ContentStore",
    "InMemoryContentStore",
    "anchors",
    "hidden_cells",
    "is_header",
    "orphaned_keys",
    "prune_orphans",
    "span_lookup",
    "span_writer",
]
