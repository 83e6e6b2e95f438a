"""
Base exporter for grid structures.

Provides common functionality for all exporters.
"""

from typing import Dict, Any, Optional
from pathlib import Path
import logging

from ..exceptions import ExportError
from ..models.grid_structure import GridStructure
from ..store.content_store import ContentStore, InMemoryContentStore

logger = logging.getLogger(__name__)


class BaseExporter:
    """
    Base class for all exporters.
    """

    def __init__(self, structure: GridStructure, store: Optional[ContentStore] = None,
                 output_path: Optional[str] = None,
                 export_options: Optional[Dict[str, Any]] = None):
        """
        Initialize base exporter.

        Args:
            structure: Grid structure to export
            store: Content store with the cell records (empty when omitted)
            output_path: Output path for export file
            export_options: Export options
        """
        self.structure = structure
        self.store = store if store is not None else InMemoryContentStore()
        self.output_path = output_path
        self.export_options = export_options or {}
        self.logger = logging.getLogger(self.__class__.__name__)

    def get_export_option(self, key: str, default: Any = None) -> Any:
        """
        Get export option value.

        Args:
            key: Option key
            default: Default value if key not found

        Returns:
            Option value
        """
        return self.export_options.get(key, default)

    def set_export_option(self, key: str, value: Any):
        self.export_options[key] = value

    def resolve_output_path(self, file_path: Optional[str] = None) -> Path:
        """Pick the explicit path or the configured one and create its directory."""
        if file_path is None:
            file_path = self.output_path
        if file_path is None:
            raise ExportError("No output path specified")
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        return path

    def get_export_info(self) -> Dict[str, Any]:
        raise NotImplementedError("Subclasses must implement get_export_info")

    def export_to_string(self) -> str:
        raise NotImplementedError("Subclasses must implement export_to_string")

    def export_to_file(self, file_path: Optional[str] = None) -> bool:
        """
        Export structure to file.

        Args:
            file_path: Output file path (uses output_path if not provided)

        Returns:
            True if successful
        """
        raise NotImplementedError("Subclasses must implement export_to_file")
