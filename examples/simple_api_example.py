#!/usr/bin/env python3
"""
Example usage of the tablegrid API.

Builds a small table, merges a header block, inserts a row above it and
exports the result.
"""

from tablegrid import GridStructure, InMemoryContentStore, TableEditor
from tablegrid.export import GridTextExporter, XLSXExporter


def main():
    """Walk through a short editing session."""

    props = {}
    store = InMemoryContentStore()
    editor = TableEditor(props, store)

    # 1. Label every cell of the default grid
    print("📋 Filling default grid...")
    for logical_row, logical_col, phys_row, phys_col in editor.structure.iter_cells():
        store.set(phys_row, phys_col, {"text": f"R{logical_row}C{logical_col}"})

    # 2. Merge the first row into a header
    print("🔗 Merging header row...")
    editor.toggle_cell(0, 0)
    editor.toggle_cell(0, 2)
    editor.merge_selected()
    store.set(0, 0, {"isHeader": True, "text": "Header"})

    # 3. Insert a row above and widen the last column
    print("➕ Inserting row...")
    editor.insert_row_before()
    editor.set_column_width(2, "140px")

    structure: GridStructure = editor.structure
    print(f"   Stored property: {props['tableMeta']}")
    print(GridTextExporter(structure, store).export_to_string())

    # 4. Export to XLSX
    print("📊 Exporting to XLSX...")
    XLSXExporter(structure, store, "output/simple_api_example.xlsx").export_to_file()
    print("   ✅ XLSX saved: output/simple_api_example.xlsx")


if __name__ == "__main__":
    main()
