"""Model classes for input-settings."""

from model.ui_field import ConfigBase, Field, UIField
from model.bind_id import QualifiedBindId
from model.catalog import BindCategory, BindDescriptor, ResolvedBindCatalog
from model.binds_config import BindsConfig
from model.controller_config import ControllerInfo, ControllersConfig
from model.input_config import InputConfig

__all__ = [
    "ConfigBase",
    "Field",
    "UIField",
    "QualifiedBindId",
    "BindCategory",
    "BindDescriptor",
    "ResolvedBindCatalog",
    "BindsConfig",
    "ControllerInfo",
    "ControllersConfig",
    "InputConfig",
]
