"""
Command-line interface for tablegrid.

Usage:
    tablegrid show meta.json --cells cells.json
    tablegrid edit meta.json insert-row 1
    tablegrid edit meta.json set-width 2 120px -o meta.json
    tablegrid export meta.json --cells cells.json -o table.xlsx
    tablegrid import table.xlsx
    tablegrid version

META arguments accept either a path to a file holding the serialized
structure or the JSON text itself.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

EDIT_OPERATIONS = ["insert-row", "remove-row", "insert-column", "remove-column", "set-width"]


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="tablegrid",
        description="tablegrid - grid structure model for editable table widgets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tablegrid show '{"rowMap":[0,1],"colMap":[0,1],"nextKey":2}'
  tablegrid edit meta.json insert-column 1 -o meta.json
  tablegrid export meta.json --cells cells.json -o table.xlsx
        """,
    )
    parser.add_argument(
        "--loglevel",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log verbosity (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    show_parser = subparsers.add_parser("show", help="Print the grid map")
    show_parser.add_argument("meta", help="Serialized structure (file or JSON)")
    show_parser.add_argument("--cells", help="JSON file of cell records keyed cell_<row>_<col>")
    show_parser.add_argument("--json", action="store_true", help="Output hidden cells as JSON")

    edit_parser = subparsers.add_parser("edit", help="Apply one structural edit")
    edit_parser.add_argument("meta", help="Serialized structure (file or JSON)")
    edit_parser.add_argument("operation", choices=EDIT_OPERATIONS)
    edit_parser.add_argument("index", type=int, help="Logical index (physical column key for set-width)")
    edit_parser.add_argument("value", nargs="?", help="Width for set-width")
    edit_parser.add_argument("-o", "--output", help="Write the result here instead of stdout")

    export_parser = subparsers.add_parser("export", help="Export to XLSX")
    export_parser.add_argument("meta", help="Serialized structure (file or JSON)")
    export_parser.add_argument("--cells", help="JSON file of cell records keyed cell_<row>_<col>")
    export_parser.add_argument("-o", "--output", required=True, help="Output XLSX file path")
    export_parser.add_argument("--sheet-name", default="Table", help="Worksheet title")

    import_parser = subparsers.add_parser("import", help="Import structure and cells from XLSX")
    import_parser.add_argument("input", help="Input XLSX file")
    import_parser.add_argument("--cells-output", help="Write cell records to this JSON file")

    subparsers.add_parser("version", help="Show version information")

    return parser


def _read_meta(value: str) -> Optional[str]:
    path = Path(value)
    try:
        if path.is_file():
            return path.read_text(encoding="utf-8")
    except OSError:
        pass
    return value


def _load_store(cells_path: Optional[str]):
    from .store.content_store import InMemoryContentStore

    if not cells_path:
        return InMemoryContentStore()
    records = json.loads(Path(cells_path).read_text(encoding="utf-8"))
    return InMemoryContentStore(records)


def cmd_show(args):
    """Handle show command."""
    from .export.text_exporter import GridTextExporter
    from .serialization import deserialize
    from .store.content_store import hidden_cells

    structure = deserialize(_read_meta(args.meta))
    store = _load_store(args.cells)
    if args.json:
        hidden = sorted(hidden_cells(structure, store))
        print(json.dumps({"shape": list(structure.shape), "hidden": [list(cell) for cell in hidden]}))
    else:
        print(GridTextExporter(structure, store).export_to_string(), end="")
    return 0


def cmd_edit(args):
    """Handle edit command."""
    from .serialization import deserialize, serialize

    structure = deserialize(_read_meta(args.meta))
    if args.operation == "insert-row":
        structure = structure.insert_row(args.index)
    elif args.operation == "remove-row":
        structure = structure.remove_row(args.index)
    elif args.operation == "insert-column":
        structure = structure.insert_column(args.index)
    elif args.operation == "remove-column":
        structure = structure.remove_column(args.index)
    elif args.operation == "set-width":
        if args.value is None:
            print("Error: set-width needs a width value", file=sys.stderr)
            return 1
        structure = structure.set_column_width(args.index, args.value)

    result = serialize(structure)
    if args.output:
        Path(args.output).write_text(result, encoding="utf-8")
        logger.info(f"Structure written to {args.output}")
    else:
        print(result)
    return 0


def cmd_export(args):
    """Handle export command."""
    from .export.xlsx_exporter import XLSXExporter
    from .serialization import deserialize

    structure = deserialize(_read_meta(args.meta))
    store = _load_store(args.cells)
    exporter = XLSXExporter(structure, store, args.output, {"sheet_name": args.sheet_name})
    exporter.export_to_file()
    print(f"Saved: {args.output}")
    return 0


def cmd_import(args):
    """Handle import command."""
    from .export.xlsx_exporter import import_xlsx
    from .serialization import serialize

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1
    structure, store = import_xlsx(input_path)
    print(serialize(structure))
    if args.cells_output:
        Path(args.cells_output).write_text(json.dumps(store.to_dict(), indent=2), encoding="utf-8")
    return 0


def cmd_version(args=None):
    """Handle version command."""
    from .version import __version__
    print(f"tablegrid v{__version__}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.loglevel, format="%(asctime)s - %(levelname)s - %(message)s")

    if args.command == "show":
        return cmd_show(args)
    elif args.command == "edit":
        return cmd_edit(args)
    elif args.command == "export":
        return cmd_export(args)
    elif args.command == "import":
        return cmd_import(args)
    elif args.command == "version":
        return cmd_version(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
