"""Custom exceptions for tablegrid.

The grid model itself never raises for malformed input. These exceptions are
reserved for collaborators (content stores) and exporters.
"""

from typing import Optional


class TableGridError(Exception):
    """Base exception for tablegrid errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ContentStoreError(TableGridError):
    """Exception raised by a content store collaborator."""

    pass


class MissingCellError(ContentStoreError):
    """Exception raised when a physical coordinate has no linked content."""

    def __init__(self, phys_row: int, phys_col: int):
        super().__init__(
            "No content linked to cell",
            f"cell_{phys_row}_{phys_col}",
        )
        self.phys_row = phys_row
        self.phys_col = phys_col


class ExportError(TableGridError):
    """Exception raised during export."""

    pass
