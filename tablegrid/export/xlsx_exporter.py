"""
XLSX interchange for grid structures.

Writes a grid to a worksheet using openpyxl: visible cells carry the
record's ``text`` field, every anchor becomes a merged range and declared
pixel widths become column widths. The serialized structure is kept on a
hidden sheet so :func:`import_xlsx` can restore the physical keys.
"""

from typing import Any, Dict, Optional, Tuple
from pathlib import Path
import logging
import re

from openpyxl import Workbook, load_workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from .base_exporter import BaseExporter
from ..models.cell import CellSpan
from ..models.grid_structure import GridStructure
from ..serialization import deserialize, serialize
from ..store.content_store import InMemoryContentStore, anchors, hidden_cells, is_header

logger = logging.getLogger(__name__)

META_SHEET = "tableMeta"
_PX_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(px)?\s*$")


def width_to_chars(width: str, px_per_char: float = 7.0) -> Optional[float]:
    """Convert a declared width (``120px`` or ``120``) to Excel character units."""
    match = _PX_RE.match(width or "")
    if not match:
        return None
    return round(float(match.group(1)) / px_per_char, 2)


class XLSXExporter(BaseExporter):
    """
    Exports a grid structure to XLSX format.
    """

    def __init__(self, structure, store=None, output_path: Optional[str] = None,
                 export_options: Optional[Dict[str, Any]] = None):
        """
        Initialize XLSX exporter.

        Args:
            structure: Grid structure to export
            store: Content store with the cell records
            output_path: Output path for XLSX file
            export_options: Export options
        """
        super().__init__(structure, store, output_path, export_options)

        self.sheet_name = self.get_export_option('sheet_name', 'Table')
        self.include_text = self.get_export_option('include_text', True)
        self.include_meta = self.get_export_option('include_meta', True)
        self.px_per_char = self.get_export_option('px_per_char', 7.0)

        self.export_options.setdefault('sheet_name', self.sheet_name)
        self.export_options.setdefault('include_text', self.include_text)
        self.export_options.setdefault('include_meta', self.include_meta)
        self.export_options.setdefault('px_per_char', self.px_per_char)

    def build_workbook(self) -> Workbook:
        wb = Workbook()
        ws = wb.active
        ws.title = self.sheet_name

        structure = self.structure
        hidden = hidden_cells(structure, self.store)

        for logical_row, logical_col, phys_row, phys_col in structure.iter_cells():
            if (logical_row, logical_col) in hidden:
                continue
            record = self.store.get(phys_row, phys_col) or {}
            cell = ws.cell(row=logical_row + 1, column=logical_col + 1)
            if self.include_text and record.get('text') is not None:
                cell.value = str(record['text'])
            if is_header(self.store, phys_row, phys_col):
                cell.font = Font(bold=True)

        for (logical_row, logical_col), span in anchors(structure, self.store):
            ws.merge_cells(
                start_row=logical_row + 1,
                start_column=logical_col + 1,
                end_row=logical_row + span.rowspan,
                end_column=logical_col + span.colspan,
            )

        for logical_col, phys_col in enumerate(structure.col_keys):
            chars = width_to_chars(structure.width_of(phys_col), self.px_per_char)
            if chars is not None:
                ws.column_dimensions[get_column_letter(logical_col + 1)].width = chars

        if self.include_meta:
            meta = wb.create_sheet(META_SHEET)
            meta["A1"] = serialize(structure)
            meta.sheet_state = "hidden"

        return wb

    def export_to_file(self, file_path: Optional[str] = None) -> bool:
        """
        Export structure to XLSX file.

        Args:
            file_path: Output file path (uses output_path if not provided)

        Returns:
            True if successful
        """
        path = self.resolve_output_path(file_path)
        try:
            self.build_workbook().save(path)
        except OSError as e:
            logger.error(f"Failed to export to XLSX file: {e}")
            raise
        logger.info(f"XLSX exported to {path}")
        return True

    def get_export_info(self) -> Dict[str, Any]:
        return {
            'format': 'XLSX',
            'sheet_name': self.sheet_name,
            'include_text': self.include_text,
            'include_meta': self.include_meta,
            'px_per_char': self.px_per_char,
        }


def import_xlsx(file_path, sheet_name: Optional[str] = None) -> Tuple[GridStructure, InMemoryContentStore]:
    """
    Rebuild a structure and content store from a worksheet.

    The hidden meta sheet, when present, restores physical keys and widths;
    otherwise a default grid sized to the worksheet is used. Merged ranges
    become anchor spans and cell values become ``text`` fields.
    """
    wb = load_workbook(Path(file_path))
    ws = wb[sheet_name] if sheet_name else wb.worksheets[0]

    if META_SHEET in wb.sheetnames:
        structure = deserialize(wb[META_SHEET]["A1"].value)
    else:
        structure = GridStructure.default(rows=ws.max_row, cols=ws.max_column)
    logger.debug(f"Importing {structure.row_count}x{structure.col_count} grid from {file_path}")

    store = InMemoryContentStore()
    for logical_row, logical_col, phys_row, phys_col in structure.iter_cells():
        value = ws.cell(row=logical_row + 1, column=logical_col + 1).value
        if value is not None:
            store.set(phys_row, phys_col, {"text": str(value)})

    for merged in ws.merged_cells.ranges:
        physical = structure.logical_to_physical(merged.min_row - 1, merged.min_col - 1)
        if physical is None:
            continue
        span = CellSpan(
            rowspan=merged.max_row - merged.min_row + 1,
            colspan=merged.max_col - merged.min_col + 1,
        )
        store.set(physical[0], physical[1], span.to_fields())

    return structure, store
