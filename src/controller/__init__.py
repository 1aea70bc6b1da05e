"""Controller layer: builds the bind catalog and mediates UI <-> config.

This package contains:
- catalog_builder: scans modules into a ResolvedBindCatalog
- ordering: orders binds within each category section
- bindings: ConfigBinding two-way links with side effects
- controller_section: per-controller calibration rows
- session: one activation of the input settings screen
"""

from controller.bindings import ConfigBinding, InputConfigBinding, bind_field
from controller.catalog_builder import build_catalog
from controller.controller_section import ControllerSection, SettingRow, build_controller_rows
from controller.ordering import iter_sections, order_section
from controller.session import BindRow, BindSection, InputSettingsSession, SessionClosedError

__all__ = [
    # Bindings
    "ConfigBinding",
    "InputConfigBinding",
    "bind_field",
    # Catalog
    "build_catalog",
    "iter_sections",
    "order_section",
    # Rows
    "BindRow",
    "BindSection",
    "ControllerSection",
    "SettingRow",
    "build_controller_rows",
    # Session
    "InputSettingsSession",
    "SessionClosedError",
]
