"""Tests for config records."""

from extensions import EngineModule
from model import (
    BindCategory,
    BindDescriptor,
    BindsConfig,
    ControllerInfo,
    ControllersConfig,
    InputConfig,
    QualifiedBindId,
    ResolvedBindCatalog,
)

JUMP = QualifiedBindId("engine", "jump")
CROUCH = QualifiedBindId("engine", "crouch")


def _catalog():
    return ResolvedBindCatalog(
        categories={"engine:movement": BindCategory("movement", "Movement")},
        binds={
            JUMP: BindDescriptor("Jump", "movement", ("SPACE",)),
            CROUCH: BindDescriptor("Crouch", "movement", ("C", "GAMEPAD_B")),
        },
    )


class TestUIField:
    """Test UIField metadata and clamping."""

    def test_class_access_returns_descriptor(self):
        """Class access gives the field with its metadata."""
        field = InputConfig.mouse_sensitivity
        assert field.label == "Mouse Sensitivity"
        assert field.is_range
        assert field.clamp(7.0) == 5.0
        assert field.clamp(-1.0) == 0.0

    def test_bool_fields_are_not_ranges(self):
        """Checkbox fields have no range."""
        assert not ControllerInfo.invert_x.is_range
        assert ControllerInfo.invert_x.clamp(True) is True

    def test_fields_registered_per_class(self):
        """Each record lists only its own fields."""
        assert list(InputConfig.get_ui_fields()) == ["mouse_sensitivity", "mouse_y_axis_inverted"]
        assert list(InputConfig.get_data_fields()) == ["binds", "controllers"]
        assert "mouse_sensitivity" not in ControllerInfo.get_ui_fields()

    def test_reset_ui_fields(self):
        """reset_ui_fields() restores declared defaults."""
        info = ControllerInfo(invert_x=True, movement_dead_zone=0.5)
        info.reset_ui_fields()
        assert info == ControllerInfo()


class TestBindsConfig:
    """Test BindsConfig."""

    def test_get_returns_copy(self):
        """Mutating the returned list doesn't change the config."""
        binds = BindsConfig({JUMP: ["SPACE"]})
        binds.get_binds(JUMP).append("X")
        assert binds.get_binds(JUMP) == ["SPACE"]

    def test_unassigned_is_empty(self):
        """Binds never set have no inputs."""
        assert BindsConfig().get_binds(JUMP) == []
        assert not BindsConfig().has_binds(JUMP)

    def test_fill_defaults_only_adds_missing(self):
        """Existing entries survive; missing ones get defaults."""
        binds = BindsConfig({JUMP: ["J"]})
        assert binds.fill_defaults(_catalog()) == 1
        assert binds.get_binds(JUMP) == ["J"]
        assert binds.get_binds(CROUCH) == ["C", "GAMEPAD_B"]

    def test_reset_replaces_everything(self):
        """reset() drops assignments for binds no longer in the catalog."""
        stale = QualifiedBindId("gone", "bind")
        binds = BindsConfig({JUMP: ["J"], stale: ["X"]})
        binds.reset(_catalog())
        assert binds.get_binds(JUMP) == ["SPACE"]
        assert not binds.has_binds(stale)


class TestControllersConfig:
    """Test ControllersConfig."""

    def test_created_on_first_access(self):
        """Unknown controllers get a default record, kept for later."""
        controllers = ControllersConfig()
        info = controllers.get_controller("Pad")
        info.invert_y = True
        assert controllers.get_controller("Pad").invert_y is True
        assert controllers.names() == ["Pad"]


class TestInputConfig:
    """Test InputConfig."""

    def test_defaults(self):
        """A fresh config has the documented defaults."""
        config = InputConfig()
        assert config.mouse_sensitivity == 1.0
        assert config.mouse_y_axis_inverted is False
        assert len(config.binds) == 0
        assert len(config.controllers) == 0

    def test_independent_instances(self):
        """Data fields aren't shared between records."""
        a, b = InputConfig(), InputConfig()
        a.binds.set_binds(JUMP, ["SPACE"])
        assert not b.binds.has_binds(JUMP)

    def test_reset_keeps_calibration(self):
        """reset() leaves controller records alone."""
        config = InputConfig(mouse_sensitivity=3.0)
        config.controllers.get_controller("Pad").invert_x = True
        config.reset(_catalog())
        assert config.mouse_sensitivity == 1.0
        assert config.controllers.get_controller("Pad").invert_x is True


class TestEngineModule:
    """Test the built-in engine module."""

    def test_leading_categories_declared(self):
        """The engine declares the four leading categories."""
        declarations = EngineModule().exposes()
        assert [c.id for c in declarations.categories] == [
            "movement", "interaction", "inventory", "general",
        ]

    def test_orderings_reference_own_binds(self):
        """Every ordering entry names an engine bind."""
        declarations = EngineModule().exposes()
        bind_ids = {f"engine:{b.id.lower()}" for b in declarations.binds}
        for category in declarations.categories:
            for entry in category.ordering:
                assert QualifiedBindId.parse(entry).is_valid
                assert str(QualifiedBindId.parse(entry)) in bind_ids
