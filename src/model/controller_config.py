"""Per-controller calibration records."""

from __future__ import annotations

from constants import DEAD_ZONE_MAX, DEAD_ZONE_MIN, DEAD_ZONE_STEP, DEFAULT_DEAD_ZONE
from model.ui_field import ConfigBase, UIField


class ControllerInfo(ConfigBase):
    """Calibration for one controller device."""

    invert_x = UIField(
        type_=bool,
        default=False,
        widget_id="invert-x",
        label="Invert X Axis",
        explanation="Flip the horizontal stick axis",
    )
    invert_y = UIField(
        type_=bool,
        default=False,
        widget_id="invert-y",
        label="Invert Y Axis",
        explanation="Flip the vertical stick axis",
    )
    movement_dead_zone = UIField(
        type_=float,
        default=DEFAULT_DEAD_ZONE,
        widget_id="movement-dead-zone",
        label="Movement Axis Dead Zone",
        explanation="Stick travel ignored before movement starts",
        minimum=DEAD_ZONE_MIN,
        maximum=DEAD_ZONE_MAX,
        step=DEAD_ZONE_STEP,
    )
    rotation_dead_zone = UIField(
        type_=float,
        default=DEFAULT_DEAD_ZONE,
        widget_id="rotation-dead-zone",
        label="Rotation Axis Dead Zone",
        explanation="Stick travel ignored before the camera turns",
        minimum=DEAD_ZONE_MIN,
        maximum=DEAD_ZONE_MAX,
        step=DEAD_ZONE_STEP,
    )


class ControllersConfig:
    """Calibration records keyed by controller name."""

    def __init__(self, controllers: dict[str, ControllerInfo] | None = None) -> None:
        self._controllers: dict[str, ControllerInfo] = dict(controllers or {})

    def get_controller(self, name: str) -> ControllerInfo:
        """Calibration for ``name``, created with defaults on first access."""
        if name not in self._controllers:
            self._controllers[name] = ControllerInfo()
        return self._controllers[name]

    def names(self) -> list[str]:
        return list(self._controllers)

    def items(self):
        return self._controllers.items()

    def __contains__(self, name: object) -> bool:
        return name in self._controllers

    def __len__(self) -> int:
        return len(self._controllers)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ControllersConfig):
            return NotImplemented
        return self._controllers == other._controllers
