"""Built-in engine module: the four leading categories and their binds."""

from extensions.module import (
    BindButtonDeclaration,
    CategoryDeclaration,
    ExtensionModule,
    ModuleDeclarations,
)
from constants import ENGINE_MODULE

ENGINE_VERSION = "1.0.0"

# (category id, display name, [(bind id, description, default inputs), ...])
_ENGINE_TABLE: list[tuple[str, str, list[tuple[str, str, tuple[str, ...]]]]] = [
    ("movement", "Movement", [
        ("forwards", "Forwards", ("W",)),
        ("backwards", "Backwards", ("S",)),
        ("left", "Left", ("A",)),
        ("right", "Right", ("D",)),
        ("jump", "Jump", ("SPACE",)),
        ("crouch", "Crouch", ("LEFT_CTRL",)),
        ("run", "Run", ("LEFT_SHIFT",)),
        ("toggleSpeedPermanently", "Toggle Speed Permanently", ("CAPS_LOCK",)),
        ("autoMoveMode", "Automatic Movement", ("N",)),
    ]),
    ("interaction", "Interaction", [
        ("attack", "Attack", ("MOUSE_LEFT",)),
        ("useItem", "Use Held Item", ("MOUSE_RIGHT",)),
        ("frob", "Activate Target", ("E",)),
        ("dropItem", "Drop Item", ("Q",)),
    ]),
    ("inventory", "Inventory", [
        ("inventory", "Inventory", ("I",)),
        *[(f"toolbarSlot{n}", f"Toolbar Slot {n + 1}", (str((n + 1) % 10),)) for n in range(10)],
        ("toolbarNext", "Toolbar Next", ("MOUSE_WHEEL_DOWN",)),
        ("toolbarPrev", "Toolbar Previous", ("MOUSE_WHEEL_UP",)),
    ]),
    ("general", "General", [
        ("console", "Console", ("GRAVE",)),
        ("chat", "Chat", ("T",)),
        ("pause", "Pause", ("ESCAPE",)),
        ("screenshot", "Screenshot", ("F12",)),
        ("hideHUD", "Hide HUD", ("F1",)),
    ]),
]


class EngineModule(ExtensionModule):
    """The engine itself, declared like any other module."""

    def __init__(self) -> None:
        super().__init__(ENGINE_MODULE, ENGINE_VERSION)

    def exposes(self) -> ModuleDeclarations:
        declarations = ModuleDeclarations()
        for category_id, display_name, binds in _ENGINE_TABLE:
            declarations.categories.append(CategoryDeclaration(
                id=category_id,
                display_name=display_name,
                ordering=tuple(f"{ENGINE_MODULE}:{bind_id}" for bind_id, _, _ in binds),
            ))
            for bind_id, description, defaults in binds:
                declarations.binds.append(BindButtonDeclaration(
                    id=bind_id,
                    description=description,
                    category=category_id,
                    default_inputs=defaults,
                ))
        return declarations
