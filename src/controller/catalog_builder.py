"""Builds the bind catalog by scanning every code module in a registry."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Iterable

from constants import ID_SEPARATOR
from extensions.environment import ModuleEnvironment
from extensions.module import BindButtonEvent, MarkerKind
from extensions.resolver import DependencyResolver
from model.bind_id import QualifiedBindId
from model.catalog import BindCategory, BindDescriptor, ResolvedBindCatalog

if TYPE_CHECKING:
    from extensions.module import BindButtonDeclaration, ExtensionModule
    from extensions.registry import ModuleRegistry

log = logging.getLogger(__name__)

EnvironmentLoader = Callable[[Iterable["ExtensionModule"]], ModuleEnvironment]


def _is_bind_button(declaration: BindButtonDeclaration) -> bool:
    event_type = declaration.event_type
    return isinstance(event_type, type) and issubclass(event_type, BindButtonEvent)


def build_catalog(
    registry: ModuleRegistry,
    resolver: DependencyResolver | None = None,
    load_environment: EnvironmentLoader = ModuleEnvironment,
) -> ResolvedBindCatalog:
    """Scan the latest version of every code module for categories and binds.

    Modules whose dependencies can't be resolved are skipped. Each module's
    environment is released before the next module is processed. A key
    that was already inserted by an earlier module is kept. Category keys
    are lowercased like bind ids.
    """
    resolver = resolver or DependencyResolver(registry)
    categories: dict[str, BindCategory] = {}
    binds: dict[QualifiedBindId, BindDescriptor] = {}

    for module_id in registry.module_ids():
        module = registry.latest_version(module_id)
        if module is None or not module.is_code:
            continue

        try:
            result = resolver.resolve(module_id)
        except Exception as e:
            log.debug("Skipping %s: resolution failed: %s", module_id, e)
            continue
        if not result.success:
            log.debug("Skipping %s: dependencies unresolvable", module_id)
            continue

        try:
            with load_environment(result.modules) as environment:
                _scan_module(environment, module.id, categories, binds)
        except Exception as e:
            # Binds merged before the failure stay; later modules still load
            log.debug("Skipping rest of %s: %s", module_id, e)

    log.debug("Catalog built: %d categories, %d binds", len(categories), len(binds))
    return ResolvedBindCatalog(categories=categories, binds=binds)


def _scan_module(
    environment: ModuleEnvironment,
    module_id: str,
    categories: dict[str, BindCategory],
    binds: dict[QualifiedBindId, BindDescriptor],
) -> None:
    for declaration in environment.types_annotated(MarkerKind.CATEGORY, from_module=module_id):
        key = f"{module_id}{ID_SEPARATOR}{declaration.id.lower()}"
        if key in categories:
            log.debug("Duplicate category %s ignored", key)
            continue
        categories[key] = BindCategory(
            id=declaration.id,
            display_name=declaration.display_name,
            ordering=tuple(declaration.ordering),
        )

    for declaration in environment.types_annotated(MarkerKind.BIND_BUTTON, from_module=module_id):
        if not _is_bind_button(declaration):
            log.debug("Ignoring %s:%s, not a bind button event", module_id, declaration.id)
            continue
        bind_id = QualifiedBindId(module_id, declaration.id)
        if not bind_id.is_valid:
            continue
        if bind_id in binds:
            log.debug("Duplicate bind %s ignored", bind_id)
            continue
        binds[bind_id] = BindDescriptor(
            description=str(declaration.description),
            category_id=declaration.category,
            default_inputs=tuple(declaration.default_inputs),
        )
