"""Tests for the joystick driver."""

import pytest

from devices import JoystickDriver


@pytest.fixture
def driver(monkeypatch):
    """A driver that never touches SDL."""
    joystick = JoystickDriver()
    monkeypatch.setattr(joystick, "ensure_ready", lambda: False)
    return joystick


class TestJoystickDriver:
    """Test JoystickDriver without hardware."""

    def test_unavailable_lists_nothing(self, driver):
        """No joystick subsystem, no controllers."""
        assert driver.list_controllers() == []
        assert driver.refresh() == []

    def test_dead_zones_per_controller(self, driver):
        """Dead zones are stored per controller name."""
        driver.set_movement_dead_zone("Pad", 0.2)
        driver.set_rotation_dead_zone("Pad", 0.3)
        assert driver.movement_dead_zone("Pad") == 0.2
        assert driver.rotation_dead_zone("Pad") == 0.3
        assert driver.movement_dead_zone("Other") == 0.08

    def test_shutdown_when_never_started(self, driver):
        """shutdown() is a no-op before initialisation."""
        driver.shutdown()


class TestApplyDeadZone:
    """Test JoystickDriver.apply_dead_zone()."""

    @pytest.mark.parametrize("value, dead_zone, expected", [
        (0.05, 0.1, 0.0),
        (-0.1, 0.1, 0.0),
        (1.0, 0.1, 1.0),
        (-1.0, 0.2, -1.0),
        (0.55, 0.1, 0.5),
        (0.5, 0.0, 0.5),
        (0.9, 1.0, 0.0),
    ])
    def test_scaling(self, value, dead_zone, expected):
        """Travel inside the dead zone is zero, the rest is rescaled."""
        assert JoystickDriver().apply_dead_zone(value, dead_zone) == pytest.approx(expected)
