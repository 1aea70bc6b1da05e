"""Per-controller calibration rows."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from controller.bindings import ConfigBinding, bind_field
from model.controller_config import ControllerInfo

if TYPE_CHECKING:
    from devices import ControllerDriver
    from model.controller_config import ControllersConfig
    from model.ui_field import UIField


@dataclass
class SettingRow:
    """One labelled control bound to a config field."""

    field: UIField
    binding: ConfigBinding

    @property
    def label(self) -> str:
        return self.field.label


@dataclass
class ControllerSection:
    """Calibration rows for one connected controller."""

    name: str
    rows: list[SettingRow] = field(default_factory=list)


def build_controller_rows(
    driver: ControllerDriver, controllers: ControllersConfig
) -> list[ControllerSection]:
    """Build invert-X, invert-Y and both dead-zone rows per controller.

    Dead-zone writes are also pushed to the driver. Values are not clamped
    here; the slider's own range does that.
    """
    sections = []
    for name in driver.list_controllers():
        info = controllers.get_controller(name)
        movement = bind_field(info, "movement_dead_zone").then(
            lambda value, name=name: driver.set_movement_dead_zone(name, value)
        )
        rotation = bind_field(info, "rotation_dead_zone").then(
            lambda value, name=name: driver.set_rotation_dead_zone(name, value)
        )
        sections.append(ControllerSection(name, [
            SettingRow(ControllerInfo.invert_x, bind_field(info, "invert_x")),
            SettingRow(ControllerInfo.invert_y, bind_field(info, "invert_y")),
            SettingRow(ControllerInfo.movement_dead_zone, movement),
            SettingRow(ControllerInfo.rotation_dead_zone, rotation),
        ]))
    return sections
