"""UI module containing widgets and IDs for the input settings screen."""

from ui.widgets import (
    BindRowItem,
    SettingCard,
    format_value,
    parse_range_value,
    write_through,
)
from ui import ids

__all__ = [
    "BindRowItem",
    "SettingCard",
    "format_value",
    "parse_range_value",
    "write_through",
    "ids",
]
