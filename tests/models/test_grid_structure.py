"""
Tests for GridStructure.

This module contains unit tests for key allocation, row/column insertion and
removal, column widths and the logical/physical query surface.
"""

import dataclasses

import pytest

from tablegrid.models.grid_structure import (
    GridStructure,
    KeyAllocator,
    insert_column,
    insert_row,
    logical_to_physical,
    remove_column,
    remove_row,
    set_column_width,
    width_of,
)


def make_grid(rows, cols, next_key=None, widths=None):
    return GridStructure(
        row_keys=tuple(rows),
        col_keys=tuple(cols),
        next_key=next_key if next_key is not None else max(list(rows) + list(cols)) + 1,
        column_widths=widths if widths is not None else {str(c): "auto" for c in cols},
    )


class TestKeyAllocator:
    """Test cases for KeyAllocator."""

    def test_allocate_returns_key_and_advanced_allocator(self):
        allocator = KeyAllocator(5)
        key, advanced = allocator.allocate()

        assert key == 5
        assert advanced.next_key == 6
        assert allocator.next_key == 5

    def test_allocator_seeded_from_structure(self, grid):
        assert grid.allocator() == KeyAllocator(3)


class TestDefaultGrid:
    """Test cases for the default grid."""

    def test_default_is_three_by_three(self, grid):
        assert grid.row_keys == (0, 1, 2)
        assert grid.col_keys == (0, 1, 2)
        assert grid.next_key == 3
        assert grid.column_widths == {"0": "auto", "1": "auto", "2": "auto"}
        assert grid.shape == (3, 3)

    def test_default_custom_size(self):
        grid = GridStructure.default(rows=2, cols=4)

        assert grid.row_keys == (0, 1)
        assert grid.col_keys == (0, 1, 2, 3)
        assert grid.next_key == 4

    def test_structure_is_immutable(self, grid):
        with pytest.raises(dataclasses.FrozenInstanceError):
            grid.next_key = 10

    def test_widths_are_read_only(self, grid):
        with pytest.raises(TypeError):
            grid.column_widths["0"] = "999px"

    def test_widths_not_shared_between_versions(self):
        widths = {"0": "auto"}
        grid = GridStructure(row_keys=(0,), col_keys=(0,), next_key=1, column_widths=widths)
        widths["0"] = "999px"
        moved = grid.insert_row(0)

        assert grid.width_of(0) == "auto"
        assert moved.column_widths is not grid.column_widths
        assert moved.width_of(0) == "auto"

    def test_structure_is_hashable(self, grid):
        assert hash(grid) == hash(GridStructure.default())
        assert len({grid, grid.insert_row(0), GridStructure.default()}) == 2


class TestInsertRow:
    """Test cases for row insertion."""

    def test_insert_row_allocates_next_key(self, grid):
        result = grid.insert_row(1)

        assert result.row_keys == (0, 3, 1, 2)
        assert result.next_key == 4
        assert result.col_keys == grid.col_keys
        assert result.column_widths == grid.column_widths

    def test_insert_row_does_not_mutate_input(self, grid):
        grid.insert_row(0)

        assert grid.row_keys == (0, 1, 2)
        assert grid.next_key == 3

    @pytest.mark.parametrize("index,expected", [
        (-5, (3, 0, 1, 2)),
        (0, (3, 0, 1, 2)),
        (3, (0, 1, 2, 3)),
        (99, (0, 1, 2, 3)),
    ])
    def test_insert_row_clamps_index(self, grid, index, expected):
        assert grid.insert_row(index).row_keys == expected

    def test_keys_never_reused_after_removal(self, grid):
        result = grid.insert_row(3).remove_row(3).insert_row(3)

        assert result.row_keys == (0, 1, 2, 4)
        assert result.next_key == 5

    def test_row_and_column_share_allocator(self, grid):
        result = grid.insert_row(0).insert_column(0)

        assert result.row_keys[0] == 3
        assert result.col_keys[0] == 4
        assert result.next_key == 5


class TestRemoveRow:
    """Test cases for row removal."""

    def test_remove_row(self, grid):
        result = grid.remove_row(1)

        assert result.row_keys == (0, 2)
        assert result.next_key == 3

    def test_remove_single_row_is_noop(self):
        grid = make_grid([7], [0, 1])

        assert grid.remove_row(0) == grid

    @pytest.mark.parametrize("index", [-1, 3, 100])
    def test_remove_row_out_of_bounds_is_noop(self, grid, index):
        assert grid.remove_row(index) == grid

    def test_insert_then_remove_restores_rows(self):
        grid = make_grid([4, 9, 2], [0])

        for index in range(4):
            result = grid.insert_row(index).remove_row(index)
            assert result.row_keys == grid.row_keys
            assert result.next_key == grid.next_key + 1


class TestColumns:
    """Test cases for column insertion, removal and widths."""

    def test_insert_column_adds_auto_width(self):
        grid = make_grid([0], [0, 1], next_key=2)
        result = grid.insert_column(1)

        assert result.col_keys == (0, 2, 1)
        assert result.column_widths == {"0": "auto", "1": "auto", "2": "auto"}
        assert result.next_key == 3

    def test_remove_inserted_column_restores_pair(self):
        grid = make_grid([0], [0, 1], next_key=2)
        result = grid.insert_column(1).remove_column(1)

        assert result.col_keys == (0, 1)
        assert result.column_widths == {"0": "auto", "1": "auto"}

    def test_remove_column_prunes_width(self, grid):
        widened = grid.set_column_width(1, "120px")
        result = widened.remove_column(1)

        assert result.col_keys == (0, 2)
        assert "1" not in result.column_widths
        assert widened.column_widths["1"] == "120px"

    def test_remove_single_column_is_noop(self):
        grid = make_grid([0, 1], [5])

        assert grid.remove_column(0) == grid

    def test_remove_column_out_of_bounds_is_noop(self, grid):
        assert grid.remove_column(3) == grid
        assert grid.remove_column(-1) == grid

    def test_set_column_width_accepts_any_string(self, grid):
        result = grid.set_column_width(2, "not a css length")

        assert result.width_of(2) == "not a css length"
        assert grid.width_of(2) == "auto"

    def test_width_of_missing_entry_is_auto(self):
        grid = make_grid([0], [0, 1], widths={"0": "40%"})

        assert grid.width_of(0) == "40%"
        assert grid.width_of(1) == "auto"


class TestQueries:
    """Test cases for logical/physical lookups."""

    def test_logical_to_physical(self):
        grid = make_grid([10, 11], [20, 21, 22])

        assert grid.logical_to_physical(1, 2) == (11, 22)
        assert grid.logical_to_physical(2, 0) is None
        assert grid.logical_to_physical(0, -1) is None

    def test_physical_to_logical(self):
        grid = make_grid([10, 11], [20, 21, 22])

        assert grid.physical_to_logical(11, 20) == (1, 0)
        assert grid.physical_to_logical(12, 20) is None

    def test_physical_key_survives_insert_elsewhere(self, grid):
        before = grid.logical_to_physical(1, 1)
        after = grid.insert_row(0).insert_column(0)

        assert after.logical_to_physical(2, 2) == before

    def test_iter_cells_row_major(self):
        grid = make_grid([5, 6], [7, 8])

        assert list(grid.iter_cells()) == [
            (0, 0, 5, 7), (0, 1, 5, 8), (1, 0, 6, 7), (1, 1, 6, 8),
        ]

    def test_functional_aliases(self, grid):
        assert insert_row(grid, 0) == grid.insert_row(0)
        assert remove_row(grid, 0) == grid.remove_row(0)
        assert insert_column(grid, 0) == grid.insert_column(0)
        assert remove_column(grid, 0) == grid.remove_column(0)
        assert set_column_width(grid, 0, "1em") == grid.set_column_width(0, "1em")
        assert width_of(grid, 0) == "auto"
        assert logical_to_physical(grid, 0, 0) == (0, 0)

    def test_to_dict(self, grid):
        assert grid.to_dict() == {
            "rowMap": [0, 1, 2],
            "colMap": [0, 1, 2],
            "nextKey": 3,
            "colWidths": {"0": "auto", "1": "auto", "2": "auto"},
        }
