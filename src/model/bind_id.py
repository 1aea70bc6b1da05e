"""Qualified bind identifiers ("module:local")."""

from __future__ import annotations

from dataclasses import dataclass, field

from constants import ID_SEPARATOR


@dataclass(frozen=True, order=True)
class QualifiedBindId:
    """A bind id scoped to the module that declares it.

    Both parts are compared case-insensitively: they are stored lowercased,
    while ``display`` keeps the spelling used at declaration time.
    Ordering is by module id, then local id.
    """

    module_id: str
    local_id: str
    display: str = field(default="", compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self.display:
            object.__setattr__(self, "display", f"{self.module_id}{ID_SEPARATOR}{self.local_id}")
        object.__setattr__(self, "module_id", self.module_id.strip().lower())
        object.__setattr__(self, "local_id", self.local_id.strip().lower())

    @classmethod
    def parse(cls, text: str) -> QualifiedBindId:
        """Parse ``"module:local"``.

        Never raises: text that isn't exactly two non-empty parts yields an
        id whose ``is_valid`` is False.
        """
        parts = text.split(ID_SEPARATOR)
        if len(parts) != 2:
            return cls("", "", display=text)
        return cls(parts[0], parts[1], display=text.strip())

    @property
    def is_valid(self) -> bool:
        return bool(self.module_id) and bool(self.local_id)

    def __str__(self) -> str:
        return f"{self.module_id}{ID_SEPARATOR}{self.local_id}"
