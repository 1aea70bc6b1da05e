"""Resolved bind catalog: categories and bind descriptors from all modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from model.bind_id import QualifiedBindId


@dataclass(frozen=True)
class BindCategory:
    """A named group of binds with an optional designer ordering.

    ``ordering`` holds qualified bind id strings. Entries may be malformed
    or reference binds that don't exist; the orderer skips those.
    """

    id: str
    display_name: str
    ordering: tuple[str, ...] = ()


@dataclass(frozen=True)
class BindDescriptor:
    """A rebindable input action declared by a module."""

    description: str
    category_id: str  # loose reference, may match no category
    default_inputs: tuple[str, ...] = ()


@dataclass(frozen=True)
class ResolvedBindCatalog:
    """Merged result of scanning every module.

    Keys of ``categories`` are ``"<module>:<category id>"``. Both mappings
    are read-only and keep insertion (module processing) order.
    """

    categories: Mapping[str, BindCategory] = field(default_factory=dict)
    binds: Mapping[QualifiedBindId, BindDescriptor] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "categories", MappingProxyType(dict(self.categories)))
        object.__setattr__(self, "binds", MappingProxyType(dict(self.binds)))

    def binds_in(self, category_id: str) -> list[tuple[QualifiedBindId, BindDescriptor]]:
        """All binds whose category reference equals ``category_id``."""
        return [(bind_id, bind) for bind_id, bind in self.binds.items() if bind.category_id == category_id]

    def default_binds(self) -> dict[QualifiedBindId, list[str]]:
        """Default inputs for every bind in the catalog."""
        return {bind_id: list(bind.default_inputs) for bind_id, bind in self.binds.items()}
