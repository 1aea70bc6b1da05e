"""Tests for loading and saving input settings."""

import json

import pytest

from model import InputConfig, QualifiedBindId
from settings_store import SettingsStore, SettingsValidationError, deserialize, serialize

JUMP = QualifiedBindId("engine", "jump")


@pytest.fixture
def store(tmp_path):
    return SettingsStore(tmp_path / "settings" / "input.json")


class TestSerialize:
    """Test serialize()."""

    def test_layout(self):
        """Mouse fields, binds and controllers sit at the top level."""
        config = InputConfig(mouse_sensitivity=2.0)
        config.binds.set_binds(JUMP, ["SPACE", None])
        config.controllers.get_controller("Pad").invert_x = True
        data = serialize(config)
        assert data["mouse_sensitivity"] == 2.0
        assert data["mouse_y_axis_inverted"] is False
        assert data["binds"] == {"engine:jump": ["SPACE", None]}
        assert data["controllers"]["Pad"]["invert_x"] is True

    def test_json_compatible(self):
        """The result survives json.dumps."""
        config = InputConfig()
        config.binds.set_binds(JUMP, ["SPACE"])
        json.dumps(serialize(config))


class TestDeserialize:
    """Test deserialize()."""

    def test_unknown_keys_ignored(self):
        """Keys from other versions don't break loading."""
        config, warnings = deserialize({"mouse_sensitivity": 1.5, "fov": 90})
        assert config.mouse_sensitivity == 1.5
        assert warnings == []

    def test_out_of_range_clamped(self):
        """Ranged values are clamped with a warning."""
        config, warnings = deserialize({
            "mouse_sensitivity": 12.0,
            "controllers": {"Pad": {"movement_dead_zone": -0.5}},
        })
        assert config.mouse_sensitivity == 5.0
        assert config.controllers.get_controller("Pad").movement_dead_zone == 0.0
        assert len(warnings) == 2

    def test_int_accepted_for_float(self):
        """Whole numbers load as floats."""
        config, _ = deserialize({"mouse_sensitivity": 2})
        assert config.mouse_sensitivity == 2.0

    @pytest.mark.parametrize("data", [
        {"mouse_sensitivity": "fast"},
        {"mouse_sensitivity": True},
        {"mouse_y_axis_inverted": 1},
        {"binds": []},
        {"binds": {"engine:jump": "SPACE"}},
        {"controllers": []},
        {"controllers": {"Pad": "default"}},
    ])
    def test_wrong_types_rejected(self, data):
        """Values of the wrong type raise SettingsValidationError."""
        with pytest.raises(SettingsValidationError):
            deserialize(data)

    def test_invalid_bind_id_warns(self):
        """Malformed bind ids are dropped with a warning."""
        config, warnings = deserialize({"binds": {"jump": ["SPACE"], "engine:jump": ["J"]}})
        assert config.binds.bind_ids() == [JUMP]
        assert warnings == ["Ignoring bind with invalid id 'jump'"]

    def test_bind_ids_case_insensitive(self):
        """Stored ids match regardless of case."""
        config, _ = deserialize({"binds": {"Engine:Jump": ["SPACE"]}})
        assert config.binds.get_binds(JUMP) == ["SPACE"]

    def test_empty_slots_become_none(self):
        """Empty strings and non-strings are empty slots."""
        config, _ = deserialize({"binds": {"engine:jump": ["", "SPACE", 3]}})
        assert config.binds.get_binds(JUMP) == [None, "SPACE", None]


class TestSettingsStore:
    """Test SettingsStore."""

    def test_missing_file_gives_defaults(self, store):
        """No file, default config and no warnings."""
        config, warnings = store.load()
        assert config == InputConfig()
        assert warnings == []
        assert not store.exists()

    def test_save_then_load(self, store):
        """A saved config loads back equal."""
        config = InputConfig(mouse_sensitivity=0.75, mouse_y_axis_inverted=True)
        config.binds.set_binds(JUMP, ["SPACE", "GAMEPAD_A"])
        config.controllers.get_controller("Pad").rotation_dead_zone = 0.2
        store.save(config)
        assert store.exists()
        loaded, warnings = store.load()
        assert loaded == config
        assert warnings == []

    def test_invalid_json_raises(self, store):
        """Unparseable files raise SettingsValidationError."""
        store.path.parent.mkdir(parents=True)
        store.path.write_text("{oops")
        with pytest.raises(SettingsValidationError):
            store.load()

    def test_non_object_raises(self, store):
        """A top-level list is rejected."""
        store.path.parent.mkdir(parents=True)
        store.path.write_text("[]")
        with pytest.raises(SettingsValidationError):
            store.load()

    def test_default_path_uses_xdg(self, monkeypatch, tmp_path):
        """The default location follows XDG_CONFIG_HOME."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert SettingsStore().path == tmp_path / "input-settings" / "input.json"
