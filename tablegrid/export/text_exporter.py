"""
Text exporter - diagnostic map of a grid structure.

Prints one line per logical row. Each cell shows its physical coordinate,
anchors show their span, hidden cells are drawn as ``.`` and header cells
are suffixed with ``*``::

    r\\c      0:auto  1:120px  2:auto
    0         0,0 2x2  .        0,2
    1         .        .        1,2
"""

from typing import Any, Dict, List, Optional
import logging

from .base_exporter import BaseExporter
from ..store.content_store import hidden_cells, is_header, span_lookup

logger = logging.getLogger(__name__)


class GridTextExporter(BaseExporter):
    """Exports a grid structure as a plain-text map."""

    def __init__(self, structure, store=None, output_path: Optional[str] = None,
                 export_options: Optional[Dict[str, Any]] = None):
        super().__init__(structure, store, output_path, export_options)
        self.hidden_marker = self.get_export_option('hidden_marker', '.')
        self.show_widths = self.get_export_option('show_widths', True)

    def _rows(self) -> List[List[str]]:
        structure = self.structure
        hidden = hidden_cells(structure, self.store)
        lookup = span_lookup(self.store)

        header = ["r\\c"]
        for phys_col in structure.col_keys:
            label = str(phys_col)
            if self.show_widths:
                label += f":{structure.width_of(phys_col)}"
            header.append(label)

        rows = [header]
        for logical_row, phys_row in enumerate(structure.row_keys):
            line = [str(phys_row)]
            for logical_col, phys_col in enumerate(structure.col_keys):
                if (logical_row, logical_col) in hidden:
                    line.append(self.hidden_marker)
                    continue
                text = f"{phys_row},{phys_col}"
                span = lookup(phys_row, phys_col)
                if span.is_merged:
                    text += f" {span.rowspan}x{span.colspan}"
                if is_header(self.store, phys_row, phys_col):
                    text += "*"
                line.append(text)
            rows.append(line)
        return rows

    def export_to_string(self) -> str:
        rows = self._rows()
        widths = [max(len(row[i]) for row in rows) for i in range(len(rows[0]))]
        lines = ["  ".join(cell.ljust(widths[i]) for i, cell in enumerate(row)).rstrip() for row in rows]
        return "\n".join(lines) + "\n"

    def export_to_file(self, file_path: Optional[str] = None) -> bool:
        path = self.resolve_output_path(file_path)
        path.write_text(self.export_to_string(), encoding="utf-8")
        logger.info(f"Grid map exported to {path}")
        return True

    def get_export_info(self) -> Dict[str, Any]:
        return {
            'format': 'text',
            'hidden_marker': self.hidden_marker,
            'show_widths': self.show_widths,
        }
