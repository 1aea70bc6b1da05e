"""Widgets for the input settings screen."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.widgets import Checkbox, Input, Label, Static

import ui.ids as ids

if TYPE_CHECKING:
    from controller.bindings import ConfigBinding
    from controller.controller_section import SettingRow
    from controller.session import BindRow
    from model.ui_field import UIField

log = logging.getLogger(__name__)


def format_value(field: UIField, value: object) -> str:
    """Text shown in a ranged input for a value."""
    if field.step is not None and field.step < 0.01:
        return f"{value:.3f}"
    return f"{value:.2f}"


def parse_range_value(field: UIField, text: str) -> float | None:
    """Parse text typed into a ranged input, clamped to the field's range.

    Returns None for text that isn't a number (typing in progress).
    """
    try:
        value = float(text.strip())
    except ValueError:
        return None
    return field.clamp(value)


class SettingCard(Container):
    """A checkbox or numeric input for one SettingRow, with explanation."""

    def __init__(self, row: SettingRow, widget_id: str) -> None:
        super().__init__(classes="setting-card")
        self.row = row
        self.widget_id = widget_id

    def compose(self) -> ComposeResult:
        field = self.row.field
        value = self.row.binding.get()
        if field.type_ is bool:
            yield Checkbox(field.label, value=bool(value), id=self.widget_id)
        else:
            with Horizontal(classes="setting-row"):
                yield Label(f"{field.label}:", classes="setting-label")
                yield Input(
                    value=format_value(field, value),
                    type="number",
                    id=self.widget_id,
                    classes="setting-input",
                )
        yield Static(field.explanation, classes="option-explanation")

    def refresh_value(self) -> None:
        """Show the binding's current value."""
        field = self.row.field
        value = self.row.binding.get()
        if field.type_ is bool:
            self.query_one(Checkbox).value = bool(value)
        else:
            self.query_one(Input).value = format_value(field, value)


class BindRowItem(Horizontal):
    """Label plus one input per slot for a bind."""

    def __init__(self, row: BindRow) -> None:
        super().__init__(classes="bind-row")
        self.row = row

    def compose(self) -> ComposeResult:
        yield Label(self.row.label, classes="bind-label")
        for binding in self.row.slots:
            yield Input(
                value=binding.get() or "",
                placeholder="unbound",
                id=ids.bind_input_id(self.row.bind_id, binding.slot),
                classes="bind-input",
            )

    def refresh_value(self) -> None:
        for binding in self.row.slots:
            widget_id = ids.bind_input_id(self.row.bind_id, binding.slot)
            self.query_one(ids.css(widget_id), Input).value = binding.get() or ""


def write_through(binding: ConfigBinding, field: UIField | None, value: object) -> bool:
    """Write a widget value through its binding.

    Ranged inputs are parsed and clamped first; unparseable text is left
    for the user to finish. Returns True when a write happened.
    """
    if field is not None and field.is_range:
        value = parse_range_value(field, str(value))
        if value is None:
            return False
    elif isinstance(value, str):
        value = value.strip().upper() or None
    binding.set(value)
    return True
