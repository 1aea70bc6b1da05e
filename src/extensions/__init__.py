"""Extension modules: registry, dependency resolution and scoped environments.

Usage:
    from extensions import DependencyResolver, ModuleEnvironment, ModuleRegistry

    registry = load_manifest_dir(Path("modules"), ModuleRegistry([EngineModule()]))
    result = DependencyResolver(registry).resolve("combat")
    if result.success:
        with ModuleEnvironment(result.modules) as env:
            env.types_annotated(MarkerKind.BIND_BUTTON, from_module="combat")
"""

from extensions.module import (
    BindAxisEvent,
    BindButtonDeclaration,
    BindButtonEvent,
    CategoryDeclaration,
    DeclaredModule,
    DependencyInfo,
    ExtensionModule,
    MarkerKind,
    ModuleDeclarations,
    parse_version,
)
from extensions.registry import ModuleRegistry
from extensions.resolver import DependencyResolver, ResolutionResult
from extensions.environment import EnvironmentClosedError, ModuleEnvironment
from extensions.manifest import ManifestError, ManifestModule, load_manifest, load_manifest_dir
from extensions.engine import EngineModule

__all__ = [
    "BindAxisEvent",
    "BindButtonDeclaration",
    "BindButtonEvent",
    "CategoryDeclaration",
    "DeclaredModule",
    "DependencyInfo",
    "ExtensionModule",
    "MarkerKind",
    "ModuleDeclarations",
    "parse_version",
    "ModuleRegistry",
    "DependencyResolver",
    "ResolutionResult",
    "EnvironmentClosedError",
    "ModuleEnvironment",
    "ManifestError",
    "ManifestModule",
    "load_manifest",
    "load_manifest_dir",
    "EngineModule",
]
