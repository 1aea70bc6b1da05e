"""Persisted input assignments per bind."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator

from model.bind_id import QualifiedBindId

if TYPE_CHECKING:
    from dispatch import InputDispatcher
    from model.catalog import ResolvedBindCatalog

log = logging.getLogger(__name__)


class BindsConfig:
    """Maps each bind to its ordered list of inputs.

    Slot 0 is the primary input, slot 1 the secondary. A ``None`` entry is
    an empty slot.
    """

    def __init__(self, binds: dict[QualifiedBindId, list[str | None]] | None = None) -> None:
        self._binds: dict[QualifiedBindId, list[str | None]] = {}
        for bind_id, inputs in (binds or {}).items():
            self.set_binds(bind_id, inputs)

    def get_binds(self, bind_id: QualifiedBindId) -> list[str | None]:
        """Inputs assigned to a bind (a copy; empty when unassigned)."""
        return list(self._binds.get(bind_id, []))

    def set_binds(self, bind_id: QualifiedBindId, inputs: list[str | None]) -> None:
        self._binds[bind_id] = list(inputs)

    def has_binds(self, bind_id: QualifiedBindId) -> bool:
        return bind_id in self._binds

    def bind_ids(self) -> list[QualifiedBindId]:
        return list(self._binds)

    def items(self) -> Iterator[tuple[QualifiedBindId, list[str | None]]]:
        for bind_id, inputs in self._binds.items():
            yield bind_id, list(inputs)

    def reset(self, catalog: ResolvedBindCatalog) -> None:
        """Replace every assignment with the catalog's default inputs."""
        self._binds = {bind_id: list(inputs) for bind_id, inputs in catalog.default_binds().items()}
        log.debug("Reset %d binds to defaults", len(self._binds))

    def fill_defaults(self, catalog: ResolvedBindCatalog) -> int:
        """Add default inputs for binds that have no entry yet.

        Returns the number of binds that were filled.
        """
        added = 0
        for bind_id, inputs in catalog.default_binds().items():
            if bind_id not in self._binds:
                self._binds[bind_id] = inputs
                added += 1
        return added

    def apply_binds(self, dispatcher: InputDispatcher) -> None:
        """Push the current assignments to a live input dispatcher."""
        binds = {bind_id: [i for i in inputs if i] for bind_id, inputs in self._binds.items()}
        dispatcher.apply_binds(binds)

    def __len__(self) -> int:
        return len(self._binds)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BindsConfig):
            return NotImplemented
        return self._binds == other._binds

    def __repr__(self) -> str:
        return f"BindsConfig({len(self._binds)} binds)"
