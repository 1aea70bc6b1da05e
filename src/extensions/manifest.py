"""JSON module manifests: the explicit registration table for modules.

A manifest describes one module version:

    {
      "id": "combat",
      "version": "1.2.0",
      "code": true,
      "dependencies": [{"id": "engine", "min_version": "1.0.0"}],
      "categories": [
        {"id": "combat", "display_name": "Combat",
         "ordering": ["combat:attack", "combat:block"]}
      ],
      "binds": [
        {"id": "attack", "description": "Attack", "category": "combat",
         "default_inputs": ["MOUSE_LEFT"]}
      ]
    }

Declarations are read from disk when the module's environment is loaded,
not when the registry is built.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from extensions.module import (
    BindAxisEvent,
    BindButtonDeclaration,
    BindButtonEvent,
    CategoryDeclaration,
    DependencyInfo,
    ExtensionModule,
    ModuleDeclarations,
    parse_version,
)
from extensions.registry import ModuleRegistry

log = logging.getLogger(__name__)

# Manifest "event" names -> event types
EVENT_TYPES: dict[str, type] = {
    "button": BindButtonEvent,
    "axis": BindAxisEvent,
}


class ManifestError(ValueError):
    """Raised when a module manifest is malformed."""


def _require(data: dict, key: str, expected: type, where: str) -> Any:
    if key not in data:
        raise ManifestError(f"{where}: missing '{key}'")
    value = data[key]
    if not isinstance(value, expected):
        raise ManifestError(f"{where}: '{key}' must be {expected.__name__}")
    return value


def _optional(data: dict, key: str, expected: type, default: Any, where: str) -> Any:
    if key not in data:
        return default
    return _require(data, key, expected, where)


def _string_list(data: dict, key: str, where: str) -> tuple[str, ...]:
    values = _optional(data, key, list, [], where)
    if not all(isinstance(v, str) for v in values):
        raise ManifestError(f"{where}: '{key}' must be a list of strings")
    return tuple(values)


def _version(value: Any, what: str, where: str) -> str:
    version = str(value)
    try:
        parse_version(version)
    except ValueError:
        raise ManifestError(f"{where}: invalid {what} '{version}'")
    return version


def _parse_dependency(data: Any, where: str) -> DependencyInfo:
    if not isinstance(data, dict):
        raise ManifestError(f"{where}: dependency must be an object")
    max_version = data.get("max_version")
    return DependencyInfo(
        id=_require(data, "id", str, where),
        min_version=_version(data.get("min_version", "0"), "min_version", where),
        max_version=None if max_version is None else _version(max_version, "max_version", where),
    )


def parse_declarations(data: dict, where: str) -> ModuleDeclarations:
    """Parse the ``categories`` and ``binds`` sections of a manifest."""
    declarations = ModuleDeclarations()
    for entry in _optional(data, "categories", list, [], where):
        if not isinstance(entry, dict):
            raise ManifestError(f"{where}: category must be an object")
        category_id = _require(entry, "id", str, where)
        declarations.categories.append(CategoryDeclaration(
            id=category_id,
            display_name=_optional(entry, "display_name", str, "", where) or category_id,
            ordering=_string_list(entry, "ordering", where),
        ))
    for entry in _optional(data, "binds", list, [], where):
        if not isinstance(entry, dict):
            raise ManifestError(f"{where}: bind must be an object")
        bind_id = _require(entry, "id", str, where)
        event_name = _optional(entry, "event", str, "button", where)
        if event_name not in EVENT_TYPES:
            raise ManifestError(f"{where}: unknown event '{event_name}'")
        declarations.binds.append(BindButtonDeclaration(
            id=bind_id,
            description=_optional(entry, "description", str, bind_id, where),
            category=_optional(entry, "category", str, "", where),
            event_type=EVENT_TYPES[event_name],
            default_inputs=_string_list(entry, "default_inputs", where),
        ))
    return declarations


class ManifestModule(ExtensionModule):
    """A module backed by a manifest file on disk."""

    def __init__(self, path: Path, data: dict) -> None:
        where = str(path)
        module_id = _require(data, "id", str, where)
        version = _version(data.get("version", "1.0.0"), "version", where)
        dependencies = [
            _parse_dependency(d, where) for d in _optional(data, "dependencies", list, [], where)
        ]
        super().__init__(
            module_id,
            version,
            is_code=bool(data.get("code", True)),
            dependencies=dependencies,
        )
        self.path = path
        self._declarations: ModuleDeclarations | None = None

    def exposes(self) -> ModuleDeclarations:
        if self._declarations is None:
            data = json.loads(self.path.read_text())
            self._declarations = parse_declarations(data, str(self.path))
        return self._declarations

    def release(self) -> None:
        self._declarations = None


def load_manifest(path: Path) -> ManifestModule:
    """Read one manifest file."""
    try:
        data = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as e:
        raise ManifestError(f"{path}: {e}") from e
    if not isinstance(data, dict):
        raise ManifestError(f"{path}: manifest must be an object")
    # Validate declarations up front so errors surface at load time
    parse_declarations(data, str(path))
    return ManifestModule(path, data)


def load_manifest_dir(directory: Path, registry: ModuleRegistry | None = None) -> ModuleRegistry:
    """Register every ``*.json`` manifest in a directory."""
    registry = registry if registry is not None else ModuleRegistry()
    if not directory.is_dir():
        raise ManifestError(f"Module directory not found: {directory}")
    for path in sorted(directory.glob("*.json")):
        registry.add(load_manifest(path))
    log.info("Loaded %d module(s) from %s", len(registry), directory)
    return registry
