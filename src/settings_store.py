"""Persistence of the input configuration as JSON."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from constants import config_dir
from model.bind_id import QualifiedBindId
from model.binds_config import BindsConfig
from model.controller_config import ControllerInfo, ControllersConfig
from model.input_config import InputConfig
from model.ui_field import ConfigBase, UIField

log = logging.getLogger(__name__)

SETTINGS_FILE = "input.json"


class SettingsValidationError(ValueError):
    """Raised when a settings file can't be used."""


def default_settings_path() -> Path:
    return config_dir() / SETTINGS_FILE


def serialize(obj: Any) -> dict | list | str | int | float | bool | None:
    """Recursively serialize a config record to a JSON-compatible value."""
    if isinstance(obj, ConfigBase):
        return {name: serialize(getattr(obj, name)) for name in obj.get_all_fields()}
    if isinstance(obj, BindsConfig):
        return {str(bind_id): inputs for bind_id, inputs in obj.items()}
    if isinstance(obj, ControllersConfig):
        return {name: serialize(info) for name, info in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [serialize(v) for v in obj]
    return obj


def _deserialize_ui_value(value: Any, field: UIField, warnings: list[str]) -> Any:
    """Coerce a stored value to a field's type, clamping ranged values."""
    if field.type_ is bool:
        if not isinstance(value, bool):
            raise SettingsValidationError(f"{field.name}: expected true/false, got {value!r}")
        return value
    if field.type_ is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise SettingsValidationError(f"{field.name}: expected a number, got {value!r}")
        clamped = field.clamp(float(value))
        if clamped != value:
            warnings.append(f"{field.name} {value} out of range, using {clamped}")
        return clamped
    return value


def _deserialize_record(cls: type[ConfigBase], data: Any, warnings: list[str]) -> ConfigBase:
    if not isinstance(data, dict):
        raise SettingsValidationError(f"{cls.__name__}: expected an object")
    record = cls()
    for name, field in cls.get_ui_fields().items():
        if name in data:
            setattr(record, name, _deserialize_ui_value(data[name], field, warnings))
    return record


def _deserialize_binds(data: Any, warnings: list[str]) -> BindsConfig:
    if not isinstance(data, dict):
        raise SettingsValidationError("binds: expected an object")
    binds = BindsConfig()
    for key, inputs in data.items():
        bind_id = QualifiedBindId.parse(key)
        if not bind_id.is_valid:
            warnings.append(f"Ignoring bind with invalid id '{key}'")
            continue
        if not isinstance(inputs, list):
            raise SettingsValidationError(f"binds.{key}: expected a list")
        binds.set_binds(bind_id, [i if isinstance(i, str) and i else None for i in inputs])
    return binds


def deserialize(data: Any) -> tuple[InputConfig, list[str]]:
    """Build an InputConfig from serialized data.

    Unknown keys are ignored so older or newer files still load.

    Returns:
        Tuple of (config, warnings) where warnings are non-critical issues.

    Raises:
        SettingsValidationError: When a value has the wrong type.
    """
    warnings: list[str] = []
    config = _deserialize_record(InputConfig, data, warnings)
    config.binds = _deserialize_binds(data.get("binds", {}), warnings)
    controllers = data.get("controllers", {})
    if not isinstance(controllers, dict):
        raise SettingsValidationError("controllers: expected an object")
    config.controllers = ControllersConfig({
        name: _deserialize_record(ControllerInfo, info, warnings)
        for name, info in controllers.items()
    })
    return config, warnings


class SettingsStore:
    """Loads and saves the input settings file."""

    def __init__(self, path: Path | None = None):
        self.path = path or default_settings_path()

    def exists(self) -> bool:
        return self.path.exists()

    def save(self, config: InputConfig) -> None:
        """Save config to the settings file."""
        data = serialize(config)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2))
        log.debug("Saved input settings to %s", self.path)

    def load(self) -> tuple[InputConfig, list[str]]:
        """Load the settings file, or defaults when it doesn't exist.

        Returns:
            Tuple of (config, warnings).

        Raises:
            SettingsValidationError: For unreadable or invalid files.
        """
        if not self.path.exists():
            return InputConfig(), []
        try:
            data = json.loads(self.path.read_text())
        except (OSError, json.JSONDecodeError) as e:
            raise SettingsValidationError(f"{self.path}: {e}") from e
        if not isinstance(data, dict):
            raise SettingsValidationError(f"{self.path}: expected an object")
        config, warnings = deserialize(data)
        for warning in warnings:
            log.warning("%s: %s", self.path.name, warning)
        return config, warnings
