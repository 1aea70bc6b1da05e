"""Command-line interface for input-settings."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from controller import InputSettingsSession
from devices import JoystickDriver
from dispatch import BindTable
from extensions import EngineModule, ManifestError, ModuleRegistry, load_manifest_dir
from settings_store import SettingsStore, SettingsValidationError

VERSION = "0.1.0"


def print_error_box(title: str, *lines: str) -> None:
    """Print a formatted error box to stderr.

    Args:
        title: The error title (will be prefixed with "Error: ")
        *lines: Additional lines to print in the box
    """
    print("=" * 60, file=sys.stderr)
    print(f"Error: {title}", file=sys.stderr)
    print("", file=sys.stderr)
    for line in lines:
        print(line, file=sys.stderr)
    print("=" * 60, file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="input-settings",
        description="Edit mouse, bind and controller settings for installed modules.",
    )
    parser.add_argument(
        "--modules",
        type=Path,
        help="Directory of module manifests (*.json) to scan besides the engine",
    )
    parser.add_argument(
        "--settings",
        type=Path,
        help="Settings file (default: $XDG_CONFIG_HOME/input-settings/input.json)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print the bind sections and exit without starting the TUI",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def build_registry(modules_dir: Path | None) -> ModuleRegistry:
    """Registry with the engine plus any manifests in ``modules_dir``."""
    registry = ModuleRegistry([EngineModule()])
    if modules_dir is not None:
        load_manifest_dir(modules_dir, registry)
    return registry


def print_sections(session: InputSettingsSession) -> None:
    """Print every section and its binds with their inputs."""
    for section in session.bind_sections:
        print(section.title)
        for row in section.rows:
            inputs = [binding.get() or "-" for binding in row.slots]
            print(f"  {row.label:<32} {'  '.join(inputs)}  ({row.bind_id})")
        print()
    for section in session.controller_sections:
        print(section.name)
        for row in section.rows:
            print(f"  {row.label:<32} {row.binding.get()}")
        print()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    from app import setup_logging

    setup_logging(args.debug)

    try:
        registry = build_registry(args.modules)
    except ManifestError as e:
        print_error_box("Invalid module manifest", str(e))
        return 1

    store = SettingsStore(args.settings)
    try:
        config, warnings = store.load()
    except SettingsValidationError as e:
        print_error_box("Invalid settings file", str(e))
        return 1
    for warning in warnings:
        print(f"Warning: {warning}", file=sys.stderr)

    session = InputSettingsSession(
        config,
        registry,
        dispatcher=BindTable(),
        driver=JoystickDriver(),
        store=None if args.list else store,
    )
    session.open()

    if args.list:
        print_sections(session)
        return 0

    from app import InputSettingsApp

    InputSettingsApp(session).run()
    # Quitting without Back (ctrl+q) still applies and saves
    if session.is_open:
        session.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
