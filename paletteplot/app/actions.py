"""High-level mutations routed through the StateManager, reused across UIs."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from paletteplot import defaults
from paletteplot import palette as P
from paletteplot.app.core import default_selection
from paletteplot.app.pointer import PointerSample, pointer_to_edit
from paletteplot.app.state_manager import StateKey, StateManager
from paletteplot.colorspace.catalog import CatalogEntry

logger = logging.getLogger(__name__)


def set_coordinate(manager: StateManager, entry: CatalogEntry, index: int, value: float) -> None:
    """Rewrite one color's coordinate in ``entry``'s (space, dimension)."""
    manager.update_palette(lambda prev: P.set_coordinate(prev, index, entry, value))


def drag_to(manager: StateManager, entry: CatalogEntry, sample: PointerSample) -> tuple[int, float]:
    """Apply a pointer sample from ``entry``'s chart to the palette.

    Returns the edited ``(index, value)``, or ``(-1, entry.min)`` for an
    empty palette. The index is resolved against the palette being edited.
    """
    edit = [-1, entry.min]

    def apply(prev):
        if not prev:
            return prev
        idx, value = pointer_to_edit(sample, len(prev), entry.min, entry.max)
        edit[:] = [idx, value]
        return P.set_coordinate(prev, idx, entry, value)

    manager.update_palette(apply)
    return edit[0], edit[1]


def spread_linearly(manager: StateManager, entry: CatalogEntry) -> None:
    """Interpolate ``entry`` between the first and last palette colors."""
    manager.update_palette(lambda prev: P.spread_linearly(prev, entry))


def set_palette_from_text(manager: StateManager, text: str) -> tuple[str, ...]:
    """Replace the palette with bulk-edited JSON text.

    Raises:
        PaletteParseError: On invalid input; the palette is left unchanged.
    """
    palette = P.parse_palette_text(text)
    manager.update(StateKey.PALETTE, palette)
    logger.info("Palette replaced from text (%d colors)", len(palette))
    return palette


def serialize_palette(manager: StateManager) -> str:
    """Current palette as JSON text."""
    return P.serialize_palette(manager.get(StateKey.PALETTE))


def reset_palette(manager: StateManager) -> None:
    """Restore the initial palette."""
    manager.update(StateKey.PALETTE, defaults.INITIAL_PALETTE)


def select_dimensions(
    manager: StateManager,
    catalog: Sequence[CatalogEntry],
    ids: Iterable[str],
) -> tuple[str, ...]:
    """Set the charted dimensions. Unknown ids are dropped; catalog order is kept."""
    wanted = set(ids)
    selection = tuple(e.id for e in catalog if e.id in wanted)
    manager.update(StateKey.SELECTION, selection)
    return selection


def select_default_dimensions(manager: StateManager, catalog: Sequence[CatalogEntry]) -> tuple[str, ...]:
    selection = default_selection(catalog)
    manager.update(StateKey.SELECTION, selection)
    return selection


def toggle_reference(manager: StateManager) -> bool:
    """Flip the initial-palette reference strip; returns the new flag."""
    with manager.lock:
        show = not manager.get(StateKey.SHOW_REFERENCE)
        manager.update(StateKey.SHOW_REFERENCE, show)
    return show
