"""Ordering of binds within a category section."""

from __future__ import annotations

from typing import Iterator

from constants import LEADING_CATEGORIES
from model.bind_id import QualifiedBindId
from model.catalog import BindCategory, BindDescriptor, ResolvedBindCatalog

BindRow = tuple[QualifiedBindId, BindDescriptor]


def order_section(category: BindCategory | None, catalog: ResolvedBindCatalog) -> list[BindRow]:
    """Rows for one category: designer ordering first, then the rest.

    Ordering entries that don't parse or don't match a bind are skipped.
    Binds of this category the ordering doesn't mention ("extension
    binds") follow, sorted by description and then by bind id.
    """
    if category is None:
        return []

    rows: list[BindRow] = []
    processed: set[QualifiedBindId] = set()

    for entry in category.ordering:
        bind_id = QualifiedBindId.parse(entry)
        if not bind_id.is_valid or bind_id in processed:
            continue
        bind = catalog.binds.get(bind_id)
        if bind is None:
            continue
        rows.append((bind_id, bind))
        processed.add(bind_id)

    extensions = [
        (bind_id, bind)
        for bind_id, bind in catalog.binds_in(category.id)
        if bind_id not in processed
    ]
    extensions.sort(key=lambda row: (row[1].description, row[0]))
    return rows + extensions


def iter_sections(catalog: ResolvedBindCatalog) -> Iterator[tuple[BindCategory, list[BindRow]]]:
    """Yield (category, rows) for every section to render.

    The engine's leading categories come first in fixed order; the
    remaining categories follow in catalog order.
    """
    remaining = dict(catalog.categories)
    leading = [remaining.pop(key, None) for key in LEADING_CATEGORIES]
    for category in [*leading, *remaining.values()]:
        if category is not None:
            yield category, order_section(category, catalog)
