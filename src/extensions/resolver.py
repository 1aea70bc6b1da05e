"""Dependency resolution over a module registry."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from extensions.module import DependencyInfo, ExtensionModule
    from extensions.registry import ModuleRegistry

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolutionResult:
    """Outcome of resolving a module and its dependencies."""

    success: bool
    modules: tuple[ExtensionModule, ...] = field(default=())


class DependencyResolver:
    """Picks one version of each module so every dependency range is met.

    Newer versions are tried first; on a conflict the search backtracks to
    the next older candidate.
    """

    def __init__(self, registry: ModuleRegistry) -> None:
        self.registry = registry

    def resolve(self, *module_ids: str) -> ResolutionResult:
        """Resolve the given root modules and everything they depend on."""
        pending = [m.lower() for m in module_ids]
        chosen = self._search(pending, {}, {})
        if chosen is None:
            log.debug("Could not resolve dependencies for %s", ", ".join(module_ids))
            return ResolutionResult(success=False)
        return ResolutionResult(success=True, modules=tuple(chosen.values()))

    def _candidates(
        self, module_id: str, constraints: dict[str, list[DependencyInfo]]
    ) -> list[ExtensionModule]:
        return [
            module
            for module in self.registry.versions(module_id)
            if all(c.allows(module.version) for c in constraints.get(module_id, []))
        ]

    def _search(
        self,
        pending: list[str],
        chosen: dict[str, ExtensionModule],
        constraints: dict[str, list[DependencyInfo]],
    ) -> dict[str, ExtensionModule] | None:
        if not pending:
            return chosen

        module_id, rest = pending[0], pending[1:]
        if module_id in chosen:
            version = chosen[module_id].version
            if all(c.allows(version) for c in constraints.get(module_id, [])):
                return self._search(rest, chosen, constraints)
            return None

        for candidate in self._candidates(module_id, constraints):
            next_constraints = {k: list(v) for k, v in constraints.items()}
            for dep in candidate.dependencies:
                next_constraints.setdefault(dep.id, []).append(dep)
            result = self._search(
                rest + [dep.id for dep in candidate.dependencies],
                {**chosen, module_id: candidate},
                next_constraints,
            )
            if result is not None:
                return result
        return None
