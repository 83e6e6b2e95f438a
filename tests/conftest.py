"""
Pytest configuration for tablegrid
"""

import pytest
import logging
import sys

from tablegrid.models.grid_structure import GridStructure
from tablegrid.store.content_store import InMemoryContentStore


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid file handler issues."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()


@pytest.fixture
def grid():
    """Default 3x3 grid."""
    return GridStructure.default()


@pytest.fixture
def store():
    """Empty content store."""
    return InMemoryContentStore()


@pytest.fixture
def filled_store(grid):
    """Content store with a text record for every cell of the default grid."""
    store = InMemoryContentStore()
    for _, _, phys_row, phys_col in grid.iter_cells():
        store.set(phys_row, phys_col, {"text": f"r{phys_row}c{phys_col}"})
    return store


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    logging.raiseExceptions = False


def pytest_collection_modifyitems(config, items):
    """Add the unit marker to every test not marked as integration."""
    for item in items:
        if "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)
