"""Extension modules and the declarations they expose."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum


class BindButtonEvent:
    """Event fired when a bind button is pressed or released."""


class BindAxisEvent:
    """Event fired when a bind axis changes value.

    Axis binds are not rebindable from the buttons list.
    """


class MarkerKind(Enum):
    """Kinds of declaration a module can expose."""

    CATEGORY = "category"
    BIND_BUTTON = "bind_button"


def parse_version(text: str) -> tuple[int, ...]:
    """Parse a dotted version ("1.2.0") into a comparable tuple.

    Raises ValueError for non-numeric components.
    """
    parts = tuple(int(p) for p in text.strip().split("."))
    # Trailing zeros don't change the version ("1.0" == "1")
    while len(parts) > 1 and parts[-1] == 0:
        parts = parts[:-1]
    return parts


@dataclass(frozen=True)
class DependencyInfo:
    """A dependency on another module, optionally version-bounded.

    ``max_version`` is exclusive.
    """

    id: str
    min_version: str = "0"
    max_version: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", self.id.lower())

    def allows(self, version: str) -> bool:
        v = parse_version(version)
        if v < parse_version(self.min_version):
            return False
        if self.max_version is not None and v >= parse_version(self.max_version):
            return False
        return True


@dataclass(frozen=True)
class CategoryDeclaration:
    """Declares a bind category (the marker on a category holder)."""

    id: str
    display_name: str
    ordering: tuple[str, ...] = ()


@dataclass(frozen=True)
class BindButtonDeclaration:
    """Declares a bind button and the event type it fires."""

    id: str
    description: str
    category: str = ""
    event_type: type = BindButtonEvent
    default_inputs: tuple[str, ...] = ()


@dataclass
class ModuleDeclarations:
    """Everything a module exposes to the input settings."""

    categories: list[CategoryDeclaration] = field(default_factory=list)
    binds: list[BindButtonDeclaration] = field(default_factory=list)

    def of_kind(self, kind: MarkerKind) -> list[CategoryDeclaration] | list[BindButtonDeclaration]:
        if kind is MarkerKind.CATEGORY:
            return list(self.categories)
        return list(self.binds)


class ExtensionModule(ABC):
    """Base class for a versioned extension module.

    Subclasses provide the module identity and implement ``exposes()``
    to return the categories and binds the module declares.
    """

    def __init__(
        self,
        id: str,
        version: str = "1.0.0",
        *,
        is_code: bool = True,
        dependencies: list[DependencyInfo] | None = None,
    ) -> None:
        self.id = id.lower()
        self.version = version
        self.is_code = is_code
        self.dependencies = list(dependencies or [])
        # Validate eagerly so a bad version never reaches the resolver
        parse_version(version)

    @abstractmethod
    def exposes(self) -> ModuleDeclarations:
        """Return the declarations owned by this module."""
        ...

    def release(self) -> None:
        """Release anything acquired by ``exposes()``."""

    def __repr__(self) -> str:
        kind = "code" if self.is_code else "data"
        return f"<{type(self).__name__}: {self.id} v{self.version} ({kind})>"


class DeclaredModule(ExtensionModule):
    """A module whose declarations are given up front."""

    def __init__(
        self,
        id: str,
        version: str = "1.0.0",
        *,
        is_code: bool = True,
        dependencies: list[DependencyInfo] | None = None,
        declarations: ModuleDeclarations | None = None,
    ) -> None:
        super().__init__(id, version, is_code=is_code, dependencies=dependencies)
        self.declarations = declarations or ModuleDeclarations()

    def exposes(self) -> ModuleDeclarations:
        return self.declarations
