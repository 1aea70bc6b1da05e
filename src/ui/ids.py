"""Widget ID constants for the TUI.

Using constants prevents typos and makes refactoring easier.
"""

import re


def css(widget_id: str) -> str:
    """Return a CSS selector for a widget ID.

    Usage:
        from ui.ids import css, STATUS_BAR
        self.query_one(css(STATUS_BAR), Static)
    """
    return f"#{widget_id}"


def _slug(text: str) -> str:
    return re.sub(r"[^a-z0-9_-]+", "-", text.lower()).strip("-")


def bind_input_id(bind_id: object, slot: int) -> str:
    """Widget ID of one input slot of a bind row."""
    return f"bind-{_slug(str(bind_id))}-{slot}"


def mouse_setting_id(widget_id: str) -> str:
    return f"mouse-{widget_id}"


def controller_setting_id(index: int, widget_id: str) -> str:
    """Widget ID of a controller row (names may not be valid IDs, so index them)."""
    return f"controller-{index}-{widget_id}"


# Container IDs
MAIN_CONTENT = "main-content"
MOUSE_SECTION = "mouse-section"
BIND_SECTIONS = "bind-sections"
CONTROLLER_SECTIONS = "controller-sections"
FOOTER_BUTTONS = "footer-buttons"
STATUS_BAR = "status-bar"

# Footer buttons
RESET_BTN = "reset-btn"
CLOSE_BTN = "close-btn"
