"""
Export module for grid structures.

Provides a plain-text grid map and XLSX interchange.
"""

from .base_exporter import BaseExporter
from .text_exporter import GridTextExporter
from .xlsx_exporter import XLSXExporter, import_xlsx, width_to_chars

__all__ = [
    "BaseExporter",
    "GridTextExporter",
    "XLSXExporter",
    "import_xlsx",
    "width_to_chars",
]
