"""Shared constants for input-settings."""

import os
from pathlib import Path

APP_NAME = "input-settings"

# Categories always rendered first, in this order
LEADING_CATEGORIES = (
    "engine:movement",
    "engine:interaction",
    "engine:inventory",
    "engine:general",
)

# Primary and secondary input per bind
BIND_SLOTS = 2

# Separator between module id and local id in qualified names
ID_SEPARATOR = ":"

DEFAULT_MOUSE_SENSITIVITY = 1.0
MOUSE_SENSITIVITY_STEP = 0.025
MOUSE_SENSITIVITY_MAX = 5.0

DEFAULT_DEAD_ZONE = 0.08
DEAD_ZONE_STEP = 0.01
DEAD_ZONE_MIN = 0.0
DEAD_ZONE_MAX = 1.0

ENGINE_MODULE = "engine"


def config_dir() -> Path:
    """Directory for persisted settings (XDG config home)."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME", str(Path.home() / ".config"))
    return Path(xdg_config) / APP_NAME


def state_dir() -> Path:
    """Directory for the log file (XDG state home)."""
    xdg_state = os.environ.get("XDG_STATE_HOME", str(Path.home() / ".local" / "state"))
    return Path(xdg_state) / APP_NAME
