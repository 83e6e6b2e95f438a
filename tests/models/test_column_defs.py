"""
Tests for data-table column definitions.
"""

from tablegrid.models.column_defs import (
    DEFAULT_COLUMN_DEFS,
    ActionButton,
    ColumnDef,
    add_action_button,
    add_column,
    move_down,
    move_up,
    remove_action_button,
    remove_column,
    set_action_button_field,
    set_field,
)


class TestColumnDefEdits:
    """Test cases for column definition edits."""

    def test_add_column_uses_positional_key(self):
        result = add_column(DEFAULT_COLUMN_DEFS)

        assert len(result) == 5
        assert result[-1] == ColumnDef(key="col_4")

    def test_remove_column(self):
        result = remove_column(DEFAULT_COLUMN_DEFS, 1)

        assert [d.key for d in result] == ["name", "email", "actions"]

    def test_remove_last_column_is_noop(self):
        defs = (ColumnDef(key="only"),)

        assert remove_column(defs, 0) == defs

    def test_move_up_and_down(self):
        up = move_up(DEFAULT_COLUMN_DEFS, 2)
        down = move_down(DEFAULT_COLUMN_DEFS, 0)

        assert [d.key for d in up] == ["name", "email", "status", "actions"]
        assert [d.key for d in down] == ["status", "name", "email", "actions"]

    def test_move_at_edges_is_noop(self):
        assert move_up(DEFAULT_COLUMN_DEFS, 0) == DEFAULT_COLUMN_DEFS
        assert move_down(DEFAULT_COLUMN_DEFS, 3) == DEFAULT_COLUMN_DEFS

    def test_set_field(self):
        result = set_field(DEFAULT_COLUMN_DEFS, 2, "width", 120)

        assert result[2].width == 120
        assert DEFAULT_COLUMN_DEFS[2].width is None

    def test_set_unknown_field_is_noop(self):
        assert set_field(DEFAULT_COLUMN_DEFS, 0, "color", "red") == DEFAULT_COLUMN_DEFS


class TestActionButtons:
    """Test cases for action button edits."""

    def test_add_action_button(self):
        result = add_action_button(DEFAULT_COLUMN_DEFS, 3)

        assert result[3].action_buttons == (ActionButton(label="Button"),)

    def test_set_and_remove_action_button(self):
        defs = add_action_button(add_action_button(DEFAULT_COLUMN_DEFS, 3), 3)
        defs = set_action_button_field(defs, 3, 1, "bg_class", "bg-red-500")

        assert defs[3].action_buttons[1].bg_class == "bg-red-500"
        assert defs[3].action_buttons[0].bg_class is None

        defs = remove_action_button(defs, 3, 0)
        assert len(defs[3].action_buttons) == 1
        assert defs[3].action_buttons[0].bg_class == "bg-red-500"


class TestColumnDefDicts:
    """Test cases for dictionary conversion."""

    def test_to_dict_omits_unset_fields(self):
        assert ColumnDef(key="email", label="Email").to_dict() == {"key": "email", "label": "Email"}

    def test_from_dict_with_buttons(self):
        column = ColumnDef.from_dict({
            "key": "actions",
            "type": "actions",
            "actionButtons": [{"label": "Edit", "textClass": "text-white"}],
        })

        assert column.is_actions
        assert column.action_buttons == (ActionButton(label="Edit", text_class="text-white"),)
        assert column.to_dict()["actionButtons"] == [{"label": "Edit", "textClass": "text-white"}]

    def test_from_dict_drops_invalid_values(self):
        column = ColumnDef.from_dict({"key": "x", "type": "chart", "width": "wide", "sortable": "yes"})

        assert column.type is None
        assert column.width is None
        assert column.sortable is None
        assert column.is_data
