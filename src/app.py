"""Main TUI application for input-settings."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, VerticalScroll
from textual.widgets import Button, Checkbox, Input, Label, Static

from constants import state_dir
from ui import BindRowItem, SettingCard, write_through
from ui.ids import css
import ui.ids as ids

if TYPE_CHECKING:
    from controller.bindings import ConfigBinding
    from controller.session import InputSettingsSession
    from model.ui_field import UIField

log = logging.getLogger(__name__)


def setup_logging(debug: bool = False) -> None:
    """Log to a file in the XDG state directory."""
    log_dir = state_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=str(log_dir / "input-settings.log"),
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )


APP_CSS = """
#main-content { height: 1fr; padding: 0 2; }
.section-label { text-style: bold; margin-top: 1; }
.setting-card { height: auto; }
.setting-row, .bind-row { height: auto; }
.setting-label, .bind-label { width: 40%; padding-top: 1; }
.setting-input { width: 16; }
.bind-input { width: 1fr; }
.option-explanation { color: $text-muted; padding-left: 4; }
#footer-buttons { height: auto; align: center middle; }
#status-bar { height: 1; padding: 0 2; }
"""


class InputSettingsApp(App):
    """TUI for editing mouse, bind and controller settings."""

    TITLE = "Input Settings"
    ENABLE_COMMAND_PALETTE = False
    CSS = APP_CSS

    BINDINGS = [
        Binding("escape", "close", "Back", show=True),
    ]

    def __init__(self, session: InputSettingsSession) -> None:
        super().__init__()
        self.session = session
        if not session.is_open:
            session.open()
        # widget id -> (binding, field); field is None for bind slots
        self._bindings: dict[str, tuple[ConfigBinding, UIField | None]] = {}

    def compose(self) -> ComposeResult:
        with VerticalScroll(id=ids.MAIN_CONTENT):
            with Container(id=ids.MOUSE_SECTION):
                yield Label("Mouse", classes="section-label")
                for row in self.session.mouse_rows:
                    widget_id = ids.mouse_setting_id(row.field.widget_id)
                    self._bindings[widget_id] = (row.binding, row.field)
                    yield SettingCard(row, widget_id)

            with Container(id=ids.BIND_SECTIONS):
                for section in self.session.bind_sections:
                    yield Label(section.title, classes="section-label")
                    for bind_row in section.rows:
                        for binding in bind_row.slots:
                            widget_id = ids.bind_input_id(bind_row.bind_id, binding.slot)
                            self._bindings[widget_id] = (binding, None)
                        yield BindRowItem(bind_row)

            with Container(id=ids.CONTROLLER_SECTIONS):
                for index, section in enumerate(self.session.controller_sections):
                    yield Label(section.name, classes="section-label")
                    for row in section.rows:
                        widget_id = ids.controller_setting_id(index, row.field.widget_id)
                        self._bindings[widget_id] = (row.binding, row.field)
                        yield SettingCard(row, widget_id)

        with Horizontal(id=ids.FOOTER_BUTTONS):
            yield Button("Restore Defaults", id=ids.RESET_BTN, variant="warning")
            yield Button("Back", id=ids.CLOSE_BTN, variant="primary")
        yield Static("", id=ids.STATUS_BAR)

    def _set_status(self, message: str) -> None:
        self.query_one(css(ids.STATUS_BAR), Static).update(message)

    def _write(self, widget_id: str | None, value: object) -> None:
        if widget_id is None or widget_id not in self._bindings:
            return
        binding, field = self._bindings[widget_id]
        write_through(binding, field, value)

    @on(Checkbox.Changed)
    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        self._write(event.checkbox.id, event.value)

    @on(Input.Changed)
    def on_input_changed(self, event: Input.Changed) -> None:
        self._write(event.input.id, event.value)

    @on(Button.Pressed, css(ids.RESET_BTN))
    def on_reset_pressed(self, event: Button.Pressed) -> None:
        self.session.reset()
        for widget in self.query(SettingCard):
            widget.refresh_value()
        for widget in self.query(BindRowItem):
            widget.refresh_value()
        self._set_status("Restored default input settings")

    @on(Button.Pressed, css(ids.CLOSE_BTN))
    def on_close_pressed(self, event: Button.Pressed) -> None:
        self.action_close()

    def action_close(self) -> None:
        """Apply binds and leave the screen."""
        if self.session.is_open:
            self.session.close()
        self.exit()
