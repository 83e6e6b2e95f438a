"""
Entry point for running tablegrid as a module.

Usage:
    python -m tablegrid show meta.json
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main() or 0)
