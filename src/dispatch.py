"""Live input dispatch: maps raw inputs to the binds they trigger."""

from __future__ import annotations

import logging
from typing import Mapping, Protocol

from model.bind_id import QualifiedBindId

log = logging.getLogger(__name__)


class InputDispatcher(Protocol):
    """Receives the finalized bind assignments."""

    def apply_binds(self, binds: Mapping[QualifiedBindId, list[str]]) -> None: ...


class BindTable:
    """Input dispatcher keeping an input -> binds lookup.

    One input may trigger several binds; they're returned in bind id order.
    """

    def __init__(self) -> None:
        self._by_input: dict[str, list[QualifiedBindId]] = {}
        self.apply_count = 0

    def apply_binds(self, binds: Mapping[QualifiedBindId, list[str]]) -> None:
        by_input: dict[str, list[QualifiedBindId]] = {}
        for bind_id in sorted(binds):
            for input_name in binds[bind_id]:
                by_input.setdefault(input_name.upper(), []).append(bind_id)
        self._by_input = by_input
        self.apply_count += 1
        log.info("Applied %d binds over %d inputs", len(binds), len(by_input))

    def binds_for(self, input_name: str) -> list[QualifiedBindId]:
        """Binds triggered by an input (empty when unbound)."""
        return list(self._by_input.get(input_name.upper(), []))

    def conflicts(self) -> dict[str, list[QualifiedBindId]]:
        """Inputs assigned to more than one bind."""
        return {name: ids for name, ids in self._by_input.items() if len(ids) > 1}
