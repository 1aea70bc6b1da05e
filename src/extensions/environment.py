"""Scoped, queryable view over the declarations of a resolved module set."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from extensions.module import MarkerKind

if TYPE_CHECKING:
    from extensions.module import ExtensionModule, ModuleDeclarations

log = logging.getLogger(__name__)


class EnvironmentClosedError(RuntimeError):
    """Raised when a closed environment is queried."""


class ModuleEnvironment:
    """Loaded declarations of a resolved module set.

    Use as a context manager; every module's ``release()`` is called on
    exit, even when the body raises.

        with ModuleEnvironment(result.modules) as env:
            env.types_annotated(MarkerKind.CATEGORY, from_module="engine")
    """

    def __init__(self, modules: Iterable[ExtensionModule]) -> None:
        self._modules = {module.id: module for module in modules}
        self._declarations: dict[str, ModuleDeclarations] = {}
        self._closed = False

    @property
    def module_ids(self) -> list[str]:
        return list(self._modules)

    def types_annotated(self, kind: MarkerKind, from_module: str | None = None) -> list:
        """Declarations of ``kind``, optionally restricted to one owning module.

        Restricting to the owning module keeps declarations of dependencies
        (which share the environment) from being reported twice.
        """
        if self._closed:
            raise EnvironmentClosedError("environment is closed")
        owners = [from_module.lower()] if from_module else list(self._modules)
        found = []
        for module_id in owners:
            if module_id in self._modules:
                found.extend(self._load(module_id).of_kind(kind))
        return found

    def _load(self, module_id: str) -> ModuleDeclarations:
        if module_id not in self._declarations:
            self._declarations[module_id] = self._modules[module_id].exposes()
        return self._declarations[module_id]

    def close(self) -> None:
        """Release every loaded module.

        All modules are released even if one fails; the first failure is
        re-raised afterwards.
        """
        if self._closed:
            return
        self._closed = True
        first_error: Exception | None = None
        for module_id in list(self._declarations):
            try:
                self._modules[module_id].release()
            except Exception as e:
                log.debug("Failed to release module %s: %s", module_id, e)
                if first_error is None:
                    first_error = e
        self._declarations.clear()
        if first_error is not None:
            raise first_error

    def __enter__(self) -> ModuleEnvironment:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
