"""Dimension selector: per-space checkbox groups over the catalog."""

from __future__ import annotations

from itertools import groupby
from typing import TYPE_CHECKING, Optional

from paletteplot import defaults
from paletteplot.app import actions
from paletteplot.app.state_manager import StateKey
from paletteplot.ui.dpg import theme

if TYPE_CHECKING:
    from paletteplot.ui.dpg.app import PalettePlotApp

try:
    import dearpygui.dearpygui as dpg
except ImportError:
    dpg = None  # type: ignore


class DimensionSelector:
    """Multi-select over every catalog entry; the checked set is the selection."""

    def __init__(self, app: "PalettePlotApp"):
        self.app = app
        self.header_id: Optional[int] = None
        self.checkbox_ids: dict[str, int] = {}  # entry id -> checkbox

        app.state_manager.subscribe(StateKey.SELECTION, self._on_selection_changed)

    def build(self, parent) -> None:
        if dpg is None:
            return
        selected = set(self.app.state_manager.get(StateKey.SELECTION))
        with dpg.collapsing_header(
            label=self._header_label(len(selected)),
            default_open=False,
            parent=parent,
        ) as header:
            self.header_id = header
            with dpg.group(horizontal=True):
                dpg.add_button(label=f"Only {defaults.DEFAULT_SPACE}", callback=self.on_default_clicked)
                dpg.add_button(label="Clear", callback=self.on_clear_clicked)
                dpg.add_text(f"{len(self.app.catalog)} dimensions available", color=theme.SUBTLE)
            for space_id, group in groupby(self.app.catalog, key=lambda e: e.space_id):
                entries = list(group)
                with dpg.tree_node(
                    label=f"{entries[0].space_name} ({space_id})",
                    default_open=(space_id == defaults.DEFAULT_SPACE),
                ):
                    with dpg.group(horizontal=True):
                        for entry in entries:
                            self.checkbox_ids[entry.id] = dpg.add_checkbox(
                                label=entry.dimension,
                                default_value=entry.id in selected,
                                callback=self.on_checkbox_changed,
                                user_data=entry.id,
                            )

    def checked_ids(self) -> list[str]:
        if dpg is None:
            return []
        return [eid for eid, cb in self.checkbox_ids.items() if dpg.get_value(cb)]

    def _header_label(self, count: int) -> str:
        return f"Dimensions ({count} selected)"

    def _on_selection_changed(self, key, value) -> None:
        if dpg is None:
            return
        selected = set(value)
        for eid, cb in self.checkbox_ids.items():
            if bool(dpg.get_value(cb)) != (eid in selected):
                dpg.set_value(cb, eid in selected)
        if self.header_id is not None:
            dpg.configure_item(self.header_id, label=self._header_label(len(selected)))

    def on_checkbox_changed(self, sender=None, app_data=None, user_data=None) -> None:
        actions.select_dimensions(self.app.state_manager, self.app.catalog, self.checked_ids())

    def on_default_clicked(self, sender=None, app_data=None) -> None:
        actions.select_default_dimensions(self.app.state_manager, self.app.catalog)

    def on_clear_clicked(self, sender=None, app_data=None) -> None:
        actions.select_dimensions(self.app.state_manager, self.app.catalog, ())
