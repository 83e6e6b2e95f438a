"""
Column definitions for data-table widgets.

Data tables declare their columns as an ordered list of definitions instead
of a physical key grid. Edits are pure functions over a tuple of
``ColumnDef`` values, addressed by position.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, List, Optional, Tuple
import logging

logger = logging.getLogger(__name__)

COLUMN_TYPES = ("data", "actions", "slot")


@dataclass(frozen=True)
class ActionButton:
    """A button rendered inside an ``actions`` column."""

    label: str = "Button"
    bg_class: Optional[str] = None
    text_class: Optional[str] = None
    border_class: Optional[str] = None
    border_width: Optional[str] = None
    shadow_class: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"label": self.label}
        for name, attr in _BUTTON_FIELDS.items():
            value = getattr(self, attr)
            if value is not None:
                data[name] = value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ActionButton":
        kwargs = {attr: data.get(name) for name, attr in _BUTTON_FIELDS.items()}
        return cls(label=str(data.get("label", "")), **kwargs)


_BUTTON_FIELDS = {
    "bgClass": "bg_class",
    "textClass": "text_class",
    "borderClass": "border_class",
    "borderWidth": "border_width",
    "shadowClass": "shadow_class",
}


@dataclass(frozen=True)
class ColumnDef:
    """
    One data-table column.

    ``type`` is None for a plain data column. ``width`` is in pixels.
    """

    key: str
    label: Optional[str] = None
    type: Optional[str] = None
    sortable: Optional[bool] = None
    width: Optional[int] = None
    action_buttons: Tuple[ActionButton, ...] = field(default_factory=tuple)

    @property
    def is_data(self) -> bool:
        return self.type is None or self.type == "data"

    @property
    def is_actions(self) -> bool:
        return self.type == "actions"

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"key": self.key}
        if self.label is not None:
            data["label"] = self.label
        if self.type is not None:
            data["type"] = self.type
        if self.sortable is not None:
            data["sortable"] = self.sortable
        if self.width is not None:
            data["width"] = self.width
        if self.action_buttons:
            data["actionButtons"] = [button.to_dict() for button in self.action_buttons]
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ColumnDef":
        column_type = data.get("type")
        if column_type not in COLUMN_TYPES:
            column_type = None
        width = data.get("width")
        if isinstance(width, bool) or not isinstance(width, int):
            width = None
        sortable = data.get("sortable")
        buttons = data.get("actionButtons")
        return cls(
            key=str(data.get("key", "")),
            label=data.get("label") if isinstance(data.get("label"), str) else None,
            type=column_type,
            sortable=sortable if isinstance(sortable, bool) else None,
            width=width,
            action_buttons=tuple(
                ActionButton.from_dict(button) for button in buttons if isinstance(button, dict)
            ) if isinstance(buttons, list) else (),
        )


DEFAULT_COLUMN_DEFS: Tuple[ColumnDef, ...] = (
    ColumnDef(key="name", label="Name", sortable=True),
    ColumnDef(key="status", label="Status", sortable=True),
    ColumnDef(key="email", label="Email"),
    ColumnDef(key="actions", type="actions"),
)

_COLUMN_FIELDS = {f.name for f in fields(ColumnDef)}
_BUTTON_ATTRS = {f.name for f in fields(ActionButton)}


def add_column(defs: Tuple[ColumnDef, ...]) -> Tuple[ColumnDef, ...]:
    """Append a data column keyed ``col_<n>``."""
    return defs + (ColumnDef(key=f"col_{len(defs)}"),)


def remove_column(defs: Tuple[ColumnDef, ...], index: int) -> Tuple[ColumnDef, ...]:
    """Remove a column. The last remaining column is never removed."""
    if len(defs) <= 1 or not 0 <= index < len(defs):
        return defs
    return defs[:index] + defs[index + 1:]


def move_up(defs: Tuple[ColumnDef, ...], index: int) -> Tuple[ColumnDef, ...]:
    if not 0 < index < len(defs):
        return defs
    items = list(defs)
    items[index - 1], items[index] = items[index], items[index - 1]
    return tuple(items)


def move_down(defs: Tuple[ColumnDef, ...], index: int) -> Tuple[ColumnDef, ...]:
    if not 0 <= index < len(defs) - 1:
        return defs
    items = list(defs)
    items[index], items[index + 1] = items[index + 1], items[index]
    return tuple(items)


def set_field(defs: Tuple[ColumnDef, ...], index: int, name: str, value: Any) -> Tuple[ColumnDef, ...]:
    """Replace one field of the column at ``index``."""
    if name not in _COLUMN_FIELDS or not 0 <= index < len(defs):
        logger.debug(f"Ignoring column field update {name!r} at {index}")
        return defs
    return tuple(replace(d, **{name: value}) if i == index else d for i, d in enumerate(defs))


def add_action_button(defs: Tuple[ColumnDef, ...], index: int) -> Tuple[ColumnDef, ...]:
    if not 0 <= index < len(defs):
        return defs
    column = defs[index]
    updated = replace(column, action_buttons=column.action_buttons + (ActionButton(),))
    return defs[:index] + (updated,) + defs[index + 1:]


def remove_action_button(defs: Tuple[ColumnDef, ...], index: int, button_index: int) -> Tuple[ColumnDef, ...]:
    if not 0 <= index < len(defs):
        return defs
    column = defs[index]
    buttons = tuple(b for i, b in enumerate(column.action_buttons) if i != button_index)
    return defs[:index] + (replace(column, action_buttons=buttons),) + defs[index + 1:]


def set_action_button_field(
    defs: Tuple[ColumnDef, ...], index: int, button_index: int, name: str, value: Any
) -> Tuple[ColumnDef, ...]:
    if name not in _BUTTON_ATTRS or not 0 <= index < len(defs):
        return defs
    column = defs[index]
    buttons: List[ActionButton] = [
        replace(b, **{name: value}) if i == button_index else b
        for i, b in enumerate(column.action_buttons)
    ]
    return defs[:index] + (replace(column, action_buttons=tuple(buttons)),) + defs[index + 1:]
