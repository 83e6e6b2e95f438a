"""
Test suite for the tablegrid project.

This module contains all tests for the tablegrid package.
"""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
