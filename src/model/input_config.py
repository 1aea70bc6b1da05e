"""Global input settings record."""

from __future__ import annotations

from typing import TYPE_CHECKING

from constants import DEFAULT_MOUSE_SENSITIVITY, MOUSE_SENSITIVITY_MAX, MOUSE_SENSITIVITY_STEP
from model.binds_config import BindsConfig
from model.controller_config import ControllersConfig
from model.ui_field import ConfigBase, Field, UIField

if TYPE_CHECKING:
    from model.catalog import ResolvedBindCatalog


class InputConfig(ConfigBase):
    """Root of the persisted input configuration."""

    mouse_sensitivity = UIField(
        type_=float,
        default=DEFAULT_MOUSE_SENSITIVITY,
        widget_id="mouse-sensitivity",
        label="Mouse Sensitivity",
        explanation="Camera turn rate per unit of mouse travel",
        minimum=0.0,
        maximum=MOUSE_SENSITIVITY_MAX,
        step=MOUSE_SENSITIVITY_STEP,
    )
    mouse_y_axis_inverted = UIField(
        type_=bool,
        default=False,
        widget_id="mouse-y-inverted",
        label="Invert Mouse",
        explanation="Moving the mouse up looks down",
    )
    binds = Field(type_=BindsConfig, default_factory=BindsConfig)
    controllers = Field(type_=ControllersConfig, default_factory=ControllersConfig)

    def reset(self, catalog: ResolvedBindCatalog) -> None:
        """Restore mouse settings and binds to their defaults.

        Controller calibration is left alone.
        """
        self.reset_ui_fields()
        self.binds.reset(catalog)
