"""Toolkit-neutral application state for Palette Plot."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from paletteplot import defaults
from paletteplot.colorspace.catalog import CatalogEntry, entries_for_space


def default_selection(catalog: Sequence[CatalogEntry]) -> tuple[str, ...]:
    """Entry ids charted at startup: every dimension of the default space."""
    return tuple(e.id for e in entries_for_space(catalog, defaults.DEFAULT_SPACE))


@dataclass
class AppState:
    """Central application state shared across views."""

    # Sole source of truth for the colors; replaced, never mutated in place.
    palette: tuple[str, ...] = defaults.INITIAL_PALETTE

    # Catalog entry ids currently charted, in catalog order.
    selection: tuple[str, ...] = ()

    # Reference strip showing the initial palette above the live one.
    show_reference: bool = False

    # Fixed at startup.
    catalog: tuple[CatalogEntry, ...] = field(default_factory=tuple)

    @classmethod
    def initial(cls, catalog: Sequence[CatalogEntry]) -> "AppState":
        """Startup state: default palette, default-space dimensions selected."""
        catalog = tuple(catalog)
        return cls(catalog=catalog, selection=default_selection(catalog))

    def selected_entries(self) -> list[CatalogEntry]:
        by_id = {e.id: e for e in self.catalog}
        return [by_id[i] for i in self.selection if i in by_id]
