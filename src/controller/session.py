"""One activation of the input settings screen."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from constants import BIND_SLOTS
from controller.bindings import InputConfigBinding, bind_field
from controller.catalog_builder import build_catalog
from controller.controller_section import ControllerSection, SettingRow, build_controller_rows
from controller.ordering import iter_sections
from model.input_config import InputConfig

if TYPE_CHECKING:
    from devices import ControllerDriver
    from dispatch import InputDispatcher
    from extensions.registry import ModuleRegistry
    from extensions.resolver import DependencyResolver
    from model.bind_id import QualifiedBindId
    from model.catalog import BindCategory, BindDescriptor, ResolvedBindCatalog
    from settings_store import SettingsStore

log = logging.getLogger(__name__)


@dataclass
class BindRow:
    """A bind with one binding per input slot."""

    bind_id: QualifiedBindId
    descriptor: BindDescriptor
    slots: list[InputConfigBinding] = field(default_factory=list)

    @property
    def label(self) -> str:
        return self.descriptor.description


@dataclass
class BindSection:
    """Header plus rows for one category."""

    category: BindCategory
    rows: list[BindRow] = field(default_factory=list)

    @property
    def title(self) -> str:
        return self.category.display_name


class SessionClosedError(RuntimeError):
    """Raised when a closed session is used."""


class InputSettingsSession:
    """Builds everything the settings screen shows and applies it on close.

    The catalog is rebuilt on every ``open()`` since modules may have been
    enabled or disabled since the last activation.

    Example:
        session = InputSettingsSession(config, registry, dispatcher, driver, store)
        session.open()
        for section in session.bind_sections:
            ...
        session.close()   # dispatcher gets the binds, settings are saved
    """

    def __init__(
        self,
        config: InputConfig,
        registry: ModuleRegistry,
        dispatcher: InputDispatcher,
        driver: ControllerDriver,
        store: SettingsStore | None = None,
        resolver: DependencyResolver | None = None,
    ) -> None:
        self.config = config
        self.registry = registry
        self.dispatcher = dispatcher
        self.driver = driver
        self.store = store
        self.resolver = resolver
        self.catalog: ResolvedBindCatalog | None = None
        self.mouse_rows: list[SettingRow] = []
        self.bind_sections: list[BindSection] = []
        self.controller_sections: list[ControllerSection] = []

    @property
    def is_open(self) -> bool:
        return self.catalog is not None

    def open(self) -> None:
        """Scan modules and build every row of the screen."""
        self.catalog = build_catalog(self.registry, self.resolver)
        filled = self.config.binds.fill_defaults(self.catalog)
        if filled:
            log.debug("Assigned default inputs to %d new binds", filled)

        self.mouse_rows = [
            SettingRow(InputConfig.mouse_sensitivity, bind_field(self.config, "mouse_sensitivity")),
            SettingRow(InputConfig.mouse_y_axis_inverted, bind_field(self.config, "mouse_y_axis_inverted")),
        ]
        self.bind_sections = [
            BindSection(category, [self._bind_row(bind_id, bind) for bind_id, bind in rows])
            for category, rows in iter_sections(self.catalog)
        ]
        self.controller_sections = build_controller_rows(self.driver, self.config.controllers)
        log.info(
            "Input settings opened: %d sections, %d controllers",
            len(self.bind_sections),
            len(self.controller_sections),
        )

    def _bind_row(self, bind_id: QualifiedBindId, bind: BindDescriptor) -> BindRow:
        slots = [InputConfigBinding(self.config.binds, bind_id, slot) for slot in range(BIND_SLOTS)]
        return BindRow(bind_id, bind, slots)

    def reset(self) -> None:
        """Restore mouse settings and binds to defaults."""
        if self.catalog is None:
            raise SessionClosedError("session is not open")
        self.config.reset(self.catalog)
        log.info("Input settings restored to defaults")

    def close(self) -> None:
        """Apply binds to the dispatcher, save, and drop the catalog."""
        if self.catalog is None:
            raise SessionClosedError("session is not open")
        self.config.binds.apply_binds(self.dispatcher)
        if self.store is not None:
            self.store.save(self.config)
        self.catalog = None
        self.mouse_rows = []
        self.bind_sections = []
        self.controller_sections = []
