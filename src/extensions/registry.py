"""Registry of known extension modules and their versions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from extensions.module import parse_version

if TYPE_CHECKING:
    from extensions.module import ExtensionModule

log = logging.getLogger(__name__)


class ModuleRegistry:
    """Holds every known version of every module.

    Iteration order of ``module_ids()`` follows registration order, but
    callers shouldn't rely on it beyond that.
    """

    def __init__(self, modules: list[ExtensionModule] | None = None) -> None:
        self._modules: dict[str, dict[str, ExtensionModule]] = {}
        for module in modules or []:
            self.add(module)

    def add(self, module: ExtensionModule) -> None:
        """Register a module version, replacing an identical id+version."""
        versions = self._modules.setdefault(module.id, {})
        if module.version in versions:
            log.warning("Module %s v%s already registered, replacing", module.id, module.version)
        versions[module.version] = module
        log.debug("Registered module %s v%s", module.id, module.version)

    def remove(self, module_id: str) -> None:
        """Forget every version of a module."""
        self._modules.pop(module_id.lower(), None)

    def module_ids(self) -> list[str]:
        return list(self._modules)

    def versions(self, module_id: str) -> list[ExtensionModule]:
        """All versions of a module, newest first."""
        versions = self._modules.get(module_id.lower(), {})
        return sorted(versions.values(), key=lambda m: parse_version(m.version), reverse=True)

    def latest_version(self, module_id: str) -> ExtensionModule | None:
        versions = self.versions(module_id)
        return versions[0] if versions else None

    def get(self, module_id: str, version: str) -> ExtensionModule | None:
        return self._modules.get(module_id.lower(), {}).get(version)

    def __contains__(self, module_id: object) -> bool:
        return isinstance(module_id, str) and module_id.lower() in self._modules

    def __len__(self) -> int:
        return len(self._modules)
