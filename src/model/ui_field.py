"""UIField descriptor for config records with UI metadata.

Config records (``InputConfig``, ``ControllerInfo``) declare their
persisted settings as descriptors. Each descriptor:

1. Stores the configuration value on the instance (like a plain attribute)
2. Carries UI metadata (widget id, label, explanation)
3. Carries the control's input constraints (minimum, maximum, step)

Keeping the metadata on the field means the settings screen, the
serializer and the two-way bindings all read from one declaration:

    class ControllerInfo(ConfigBase):
        invert_x = UIField(
            type_=bool,
            default=False,
            widget_id="invert-x",
            label="Invert X Axis",
            explanation="Flip the horizontal stick axis",
        )

    info = ControllerInfo()
    info.invert_x = True              # Set value
    info.invert_x                     # True

    field = ControllerInfo.invert_x   # Class access returns the descriptor
    field.label                       # "Invert X Axis"

Integration points
------------------
1. controller.bindings: ``bind_field`` wraps a descriptor-backed attribute
   in a ConfigBinding.
2. settings_store: iterates ``_ui_fields`` and ``_data_fields`` to
   serialize records to JSON and back.
3. ui: builds checkboxes and inputs from ``label`` / ``widget_id``.
"""

from typing import Any, Callable


class UIField:
    """Descriptor that holds field value + all metadata.

    When accessed on the class, returns the UIField itself (with metadata).
    When accessed on an instance, returns the actual value.
    """

    def __init__(
        self,
        type_: type,
        default: Any,
        widget_id: str,
        label: str,
        explanation: str = "",
        *,
        minimum: float | None = None,
        maximum: float | None = None,
        step: float | None = None,
    ):
        """Create a UIField descriptor.

        Args:
            type_: The Python type of this field (bool, float, ...)
            default: Default value for the field
            widget_id: Widget ID suffix for this field's control
            label: Short label shown next to the control
            explanation: Longer hint text
            minimum: Lowest value the control accepts (sliders only)
            maximum: Highest value the control accepts (sliders only)
            step: Increment of the control (sliders only)
        """
        self.type_ = type_
        self.default = default
        self.widget_id = widget_id
        self.label = label
        self.explanation = explanation
        self.minimum = minimum
        self.maximum = maximum
        self.step = step
        self.name: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        """Called when the descriptor is assigned to a class attribute."""
        self.name = name
        # Copy so subclasses don't share the parent's registry
        fields = dict(owner.__dict__.get("_ui_fields", {}))
        fields[name] = self
        owner._ui_fields = fields

    def __get__(self, obj: Any, owner: type | None = None) -> Any:
        """Get the field value or the descriptor itself.

        - Class access (obj is None): returns UIField with metadata
        - Instance access: returns the actual value
        """
        if obj is None:
            return self
        return obj.__dict__.get(self.name, self.default)

    def __set__(self, obj: Any, value: Any) -> None:
        """Set the field value on an instance."""
        obj.__dict__[self.name] = value

    @property
    def is_range(self) -> bool:
        """True when the control is a bounded slider."""
        return self.minimum is not None and self.maximum is not None

    def clamp(self, value: float) -> float:
        """Clamp a value into the control's range."""
        if not self.is_range:
            return value
        return min(max(value, self.minimum), self.maximum)


class Field:
    """Descriptor for data-only fields (no UI, but still serialized)."""

    def __init__(
        self,
        type_: type,
        default: Any = None,
        *,
        default_factory: Callable[[], Any] | None = None,
    ):
        """Create a data field descriptor.

        Args:
            type_: The Python type of this field
            default: Default value (use None with default_factory for mutable defaults)
            default_factory: Factory function for mutable defaults
        """
        self.type_ = type_
        self.default = default
        self.default_factory = default_factory
        self.name: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        fields = dict(owner.__dict__.get("_data_fields", {}))
        fields[name] = self
        owner._data_fields = fields

    def __get__(self, obj: Any, owner: type | None = None) -> Any:
        if obj is None:
            return self
        if self.name not in obj.__dict__:
            if self.default_factory:
                obj.__dict__[self.name] = self.default_factory()
            else:
                return self.default
        return obj.__dict__[self.name]

    def __set__(self, obj: Any, value: Any) -> None:
        obj.__dict__[self.name] = value


class ConfigBase:
    """Base class for UIField-based config records."""

    _ui_fields: dict[str, UIField]
    _data_fields: dict[str, Field]

    def __init__(self, **kwargs: Any) -> None:
        """Initialize config with optional field values."""
        all_fields = self.get_all_fields()
        for name, value in kwargs.items():
            if name in all_fields:
                setattr(self, name, value)

    @classmethod
    def get_ui_fields(cls) -> dict[str, UIField]:
        """Get all UIField descriptors for this class."""
        return getattr(cls, "_ui_fields", {})

    @classmethod
    def get_data_fields(cls) -> dict[str, Field]:
        """Get all data Field descriptors for this class."""
        return getattr(cls, "_data_fields", {})

    @classmethod
    def get_all_fields(cls) -> dict[str, UIField | Field]:
        """Get all fields (UI and data) for this class."""
        return {**cls.get_ui_fields(), **cls.get_data_fields()}

    def reset_ui_fields(self) -> None:
        """Restore every UIField to its declared default."""
        for name, field in self.get_ui_fields().items():
            setattr(self, name, field.default)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return all(
            getattr(self, name) == getattr(other, name) for name in self.get_all_fields()
        )

    def __repr__(self) -> str:
        values = ", ".join(f"{name}={getattr(self, name)!r}" for name in self.get_ui_fields())
        return f"{type(self).__name__}({values})"
