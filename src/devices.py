"""Controller device access.

Uses pygame's joystick subsystem to enumerate connected controllers.
Dead-zone values are kept per controller name and applied to axis
readings.
"""

from __future__ import annotations

import logging
import os
from typing import Protocol

from constants import DEFAULT_DEAD_ZONE

log = logging.getLogger(__name__)


class ControllerDriver(Protocol):
    """What the settings screen needs from the controller layer."""

    def list_controllers(self) -> list[str]: ...

    def set_movement_dead_zone(self, name: str, value: float) -> None: ...

    def set_rotation_dead_zone(self, name: str, value: float) -> None: ...


class JoystickDriver:
    """Controller driver backed by pygame joysticks.

    pygame is initialised lazily on the first call that needs it. When it
    can't be initialised (no SDL, headless box) no controllers are listed.
    """

    def __init__(self) -> None:
        self._ready = False
        self._names: list[str] = []
        self._movement_dead_zones: dict[str, float] = {}
        self._rotation_dead_zones: dict[str, float] = {}

    def ensure_ready(self) -> bool:
        """Initialise the pygame joystick subsystem. Returns True on success."""
        if self._ready:
            return True
        try:
            import pygame

            # Joysticks need the display module, but never open a window
            os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
            pygame.display.init()
            pygame.joystick.init()
        except Exception as e:
            log.debug("Joystick subsystem unavailable: %s", e)
            return False
        self._ready = True
        self.refresh()
        return True

    def refresh(self) -> list[str]:
        """Re-scan connected controllers (handles hot-plug)."""
        if not self.ensure_ready():
            return []
        import pygame

        self._names = []
        for i in range(pygame.joystick.get_count()):
            joy = pygame.joystick.Joystick(i)
            self._names.append(joy.get_name())
        log.debug("Found %d controller(s)", len(self._names))
        return list(self._names)

    def shutdown(self) -> None:
        if not self._ready:
            return
        import pygame

        pygame.joystick.quit()
        pygame.display.quit()
        self._ready = False

    def list_controllers(self) -> list[str]:
        if not self.ensure_ready():
            return []
        return list(self._names)

    def set_movement_dead_zone(self, name: str, value: float) -> None:
        self._movement_dead_zones[name] = value
        log.debug("Movement dead zone for %s set to %.2f", name, value)

    def set_rotation_dead_zone(self, name: str, value: float) -> None:
        self._rotation_dead_zones[name] = value
        log.debug("Rotation dead zone for %s set to %.2f", name, value)

    def movement_dead_zone(self, name: str) -> float:
        return self._movement_dead_zones.get(name, DEFAULT_DEAD_ZONE)

    def rotation_dead_zone(self, name: str) -> float:
        return self._rotation_dead_zones.get(name, DEFAULT_DEAD_ZONE)

    def apply_dead_zone(self, value: float, dead_zone: float) -> float:
        """Scale an axis reading so travel inside the dead zone reads as 0."""
        if abs(value) <= dead_zone:
            return 0.0
        if dead_zone >= 1.0:
            return 0.0
        sign = 1.0 if value > 0 else -1.0
        return sign * (abs(value) - dead_zone) / (1.0 - dead_zone)
