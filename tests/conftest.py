"""Shared fixtures for input-settings tests."""

import pytest

from extensions import (
    BindButtonDeclaration,
    CategoryDeclaration,
    DeclaredModule,
    DependencyInfo,
    EngineModule,
    ModuleDeclarations,
    ModuleRegistry,
)
from model import BindCategory, BindDescriptor, InputConfig, QualifiedBindId, ResolvedBindCatalog


def make_module(
    module_id,
    version="1.0.0",
    *,
    categories=(),
    binds=(),
    dependencies=(),
    is_code=True,
):
    """Build a DeclaredModule from plain tuples.

    categories: (id, display_name, ordering)
    binds: (id, description, category) or (id, description, category, event_type)
    dependencies: module ids or DependencyInfo
    """
    declarations = ModuleDeclarations(
        categories=[CategoryDeclaration(c[0], c[1], tuple(c[2])) for c in categories],
        binds=[
            BindButtonDeclaration(b[0], b[1], b[2], *b[3:])
            for b in binds
        ],
    )
    deps = [d if isinstance(d, DependencyInfo) else DependencyInfo(d) for d in dependencies]
    return DeclaredModule(
        module_id,
        version,
        is_code=is_code,
        dependencies=deps,
        declarations=declarations,
    )


class FakeDriver:
    """Controller driver recording every dead-zone push."""

    def __init__(self, names=("Gamepad",)):
        self.names = list(names)
        self.calls = []

    def list_controllers(self):
        return list(self.names)

    def set_movement_dead_zone(self, name, value):
        self.calls.append(("movement", name, value))

    def set_rotation_dead_zone(self, name, value):
        self.calls.append(("rotation", name, value))


class RecordingDispatcher:
    """Input dispatcher remembering what it was given."""

    def __init__(self):
        self.applied = []

    def apply_binds(self, binds):
        self.applied.append(dict(binds))


@pytest.fixture
def fake_driver():
    return FakeDriver()


@pytest.fixture
def dispatcher():
    return RecordingDispatcher()


@pytest.fixture
def demo_module():
    """The combat example: attack and block ordered, dodge as extension."""
    return make_module(
        "demo",
        categories=[("combat", "Combat", ["demo:attack", "demo:block"])],
        binds=[
            ("attack", "Attack", "combat"),
            ("block", "Block", "combat"),
            ("dodge", "Dodge", "combat"),
        ],
    )


@pytest.fixture
def demo_registry(demo_module):
    """Engine plus the demo module."""
    return ModuleRegistry([EngineModule(), demo_module])


@pytest.fixture
def demo_catalog():
    """Hand-built catalog for ordering tests."""
    return ResolvedBindCatalog(
        categories={
            "demo:combat": BindCategory("combat", "Combat", ("demo:attack", "demo:block")),
        },
        binds={
            QualifiedBindId("demo", "attack"): BindDescriptor("Attack", "combat", ("MOUSE_LEFT",)),
            QualifiedBindId("demo", "block"): BindDescriptor("Block", "combat", ("MOUSE_RIGHT",)),
            QualifiedBindId("demo", "dodge"): BindDescriptor("Dodge", "combat"),
        },
    )


@pytest.fixture
def input_config():
    return InputConfig()


@pytest.fixture
def module_factory():
    """The make_module helper, for tests building their own registries."""
    return make_module
