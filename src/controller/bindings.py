"""ConfigBinding: live two-way link between a control and a config slot.

A binding is a getter/setter pair over one slot of the persisted config.
Controls read through ``get()`` and write through ``set()``; writes land
in the config immediately. An optional side-effect hook runs after every
write with the new value, which is how calibration changes reach the
controller driver without a separate "apply" step.

    binding = bind_field(info, "movement_dead_zone").then(
        lambda value: driver.set_movement_dead_zone(name, value)
    )
    binding.set(0.2)   # info.movement_dead_zone == 0.2, driver notified
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

if TYPE_CHECKING:
    from model.bind_id import QualifiedBindId
    from model.binds_config import BindsConfig

T = TypeVar("T")


class ConfigBinding(Generic[T]):
    """Getter/setter pair with an optional post-write hook."""

    def __init__(
        self,
        getter: Callable[[], T],
        setter: Callable[[T], None],
        on_change: Callable[[T], None] | None = None,
    ) -> None:
        self._getter = getter
        self._setter = setter
        self._on_change = on_change

    def get(self) -> T:
        return self._getter()

    def set(self, value: T) -> None:
        """Write the value, then run the hook (if any) with it."""
        self._setter(value)
        if self._on_change is not None:
            self._on_change(value)

    def then(self, hook: Callable[[T], None]) -> ConfigBinding[T]:
        """A new binding running ``hook`` after this binding's own hook."""
        previous = self._on_change
        if previous is None:
            return ConfigBinding(self._getter, self._setter, hook)

        def chained(value: T) -> None:
            previous(value)
            hook(value)

        return ConfigBinding(self._getter, self._setter, chained)


def bind_field(
    record: Any, name: str, on_change: Callable[[Any], None] | None = None
) -> ConfigBinding[Any]:
    """Bind a named attribute of a config record."""
    return ConfigBinding(
        lambda: getattr(record, name),
        lambda value: setattr(record, name, value),
        on_change,
    )


class InputConfigBinding(ConfigBinding["str | None"]):
    """Binding over one slot of a bind's input list.

    Slot 0 is the primary input and slot 1 the secondary. Reading a slot
    past the end of the list gives ``None``; writing one pads the list.
    """

    def __init__(
        self,
        binds: BindsConfig,
        bind_id: QualifiedBindId,
        slot: int = 0,
        on_change: Callable[[str | None], None] | None = None,
    ) -> None:
        self.binds = binds
        self.bind_id = bind_id
        self.slot = slot
        super().__init__(self._read, self._write, on_change)

    def _read(self) -> str | None:
        inputs = self.binds.get_binds(self.bind_id)
        if self.slot < len(inputs):
            return inputs[self.slot]
        return None

    def _write(self, value: str | None) -> None:
        inputs = self.binds.get_binds(self.bind_id)
        while len(inputs) <= self.slot:
            inputs.append(None)
        inputs[self.slot] = value or None
        self.binds.set_binds(self.bind_id, inputs)
