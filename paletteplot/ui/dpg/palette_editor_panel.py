"""Palette editor panel: swatch strips, reference toggle, bulk JSON editing."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Sequence

from paletteplot import defaults
from paletteplot.app import actions
from paletteplot.app.state_manager import StateKey
from paletteplot.colorspace import to_rgba255
from paletteplot.errors import PaletteParseError
from paletteplot.ui.dpg import theme

if TYPE_CHECKING:
    from paletteplot.ui.dpg.app import PalettePlotApp

try:
    import dearpygui.dearpygui as dpg
except ImportError:
    dpg = None  # type: ignore

logger = logging.getLogger(__name__)


class PaletteEditorPanel:
    """Controller for the swatch strips, the JSON text field and the alert modal."""

    def __init__(self, app: "PalettePlotApp"):
        """Initialize controller with reference to main app.

        Args:
            app: The main PalettePlotApp instance
        """
        self.app = app

        self.reference_drawlist_id: Optional[int] = None
        self.swatch_drawlist_id: Optional[int] = None
        self.reference_button_id: Optional[int] = None
        self.text_input_id: Optional[int] = None
        self.alert_modal_id: Optional[int] = None
        self.alert_text_id: Optional[int] = None

        self.swatch_width: int = defaults.CHART_MIN_WIDTH

        app.state_manager.subscribe(StateKey.PALETTE, self._on_palette_changed)
        app.state_manager.subscribe(StateKey.SHOW_REFERENCE, self._on_show_reference_changed)

    # ------------------------------------------------------------------
    # Build
    # ------------------------------------------------------------------

    def build_reference_button(self, parent) -> None:
        if dpg is None:
            return
        self.reference_button_id = dpg.add_button(
            label="Show initial colors",
            callback=self.on_toggle_reference_clicked,
            parent=parent,
        )

    def build_swatches(self, parent) -> None:
        """Build the reference strip (hidden by default) and the live strip."""
        if dpg is None:
            return
        self.reference_drawlist_id = dpg.add_drawlist(
            width=self.swatch_width,
            height=defaults.SWATCH_HEIGHT,
            show=False,
            parent=parent,
        )
        self.swatch_drawlist_id = dpg.add_drawlist(
            width=self.swatch_width,
            height=defaults.SWATCH_HEIGHT,
            parent=parent,
        )
        self._draw_strip(self.reference_drawlist_id, defaults.INITIAL_PALETTE)

    def build_text_editor(self, parent) -> None:
        """Build the bulk JSON text field and its hint line."""
        if dpg is None:
            return
        with dpg.group(horizontal=True, parent=parent):
            dpg.add_text("Note: you can copy-paste D3 color schemes in", color=theme.SUBTLE)
            dpg.add_text(defaults.D3_SCHEMES_URL, color=theme.LINK)
        self.text_input_id = dpg.add_input_text(
            default_value=actions.serialize_palette(self.app.state_manager),
            multiline=True,
            on_enter=True,
            width=-1,
            height=defaults.TEXT_FIELD_HEIGHT,
            callback=self.on_text_submitted,
            parent=parent,
        )
        with dpg.group(horizontal=True, parent=parent):
            dpg.add_button(label="Apply", width=90, callback=self.on_apply_clicked)
            dpg.add_button(label="Reset", width=90, callback=self.on_reset_clicked)
            dpg.add_text("Enter applies the edit", color=theme.SUBTLE)

    def build_alert_modal(self) -> None:
        if dpg is None:
            return
        with dpg.window(
            label="Invalid palette",
            modal=True,
            show=False,
            no_collapse=True,
            width=440,
            autosize=True,
        ) as modal:
            self.alert_modal_id = modal
            self.alert_text_id = dpg.add_text("", color=theme.ERROR, wrap=400)
            dpg.add_spacer(height=6)
            dpg.add_button(label="OK", width=90, callback=self.on_alert_dismissed)

    # ------------------------------------------------------------------
    # Refresh
    # ------------------------------------------------------------------

    def refresh(self, width: Optional[int] = None) -> None:
        """Redraw swatch strips from current state."""
        if dpg is None or self.swatch_drawlist_id is None:
            return
        if width is not None:
            width = max(int(width), defaults.CHART_MIN_WIDTH)
            if width != self.swatch_width:
                self.swatch_width = width
                dpg.configure_item(self.swatch_drawlist_id, width=width)
                dpg.configure_item(self.reference_drawlist_id, width=width)
                self._draw_strip(self.reference_drawlist_id, defaults.INITIAL_PALETTE)
        self._draw_strip(self.swatch_drawlist_id, self.app.state_manager.get(StateKey.PALETTE))

    def _draw_strip(self, drawlist_id: Optional[int], palette: Sequence[str]) -> None:
        if dpg is None or drawlist_id is None:
            return
        dpg.delete_item(drawlist_id, children_only=True)
        if not palette:
            return
        step = self.swatch_width / len(palette)
        for i, text in enumerate(palette):
            dpg.draw_rectangle(
                (i * step, 0),
                ((i + 1) * step, defaults.SWATCH_HEIGHT),
                color=(0, 0, 0, 0),
                fill=to_rgba255(text),
                parent=drawlist_id,
            )

    def is_alert_open(self) -> bool:
        if dpg is None or self.alert_modal_id is None:
            return False
        return bool(dpg.is_item_shown(self.alert_modal_id))

    def show_alert(self, message: str) -> None:
        if dpg is None or self.alert_modal_id is None:
            return
        dpg.set_value(self.alert_text_id, message)
        dpg.configure_item(self.alert_modal_id, show=True)

    # ------------------------------------------------------------------
    # Subscribers
    # ------------------------------------------------------------------

    def _on_palette_changed(self, key, value) -> None:
        if dpg is not None and self.text_input_id is not None:
            dpg.set_value(self.text_input_id, actions.serialize_palette(self.app.state_manager))

    def _on_show_reference_changed(self, key, value) -> None:
        if dpg is None:
            return
        if self.reference_drawlist_id is not None:
            dpg.configure_item(self.reference_drawlist_id, show=bool(value))
        if self.reference_button_id is not None:
            label = "Hide initial colors" if value else "Show initial colors"
            dpg.configure_item(self.reference_button_id, label=label)

    # ------------------------------------------------------------------
    # Callbacks
    # ------------------------------------------------------------------

    def on_text_submitted(self, sender=None, app_data=None) -> None:
        self.apply_text(app_data if isinstance(app_data, str) else dpg.get_value(self.text_input_id))

    def on_apply_clicked(self, sender=None, app_data=None) -> None:
        self.apply_text(dpg.get_value(self.text_input_id))

    def apply_text(self, text: str) -> None:
        """Commit bulk-edited text, or alert and restore the field."""
        try:
            actions.set_palette_from_text(self.app.state_manager, text)
        except PaletteParseError as e:
            logger.warning("Rejected palette text: %s", e)
            if dpg is not None and self.text_input_id is not None:
                dpg.set_value(self.text_input_id, actions.serialize_palette(self.app.state_manager))
            self.show_alert(f"Invalid JSON palette: {e}")

    def on_reset_clicked(self, sender=None, app_data=None) -> None:
        actions.reset_palette(self.app.state_manager)

    def on_toggle_reference_clicked(self, sender=None, app_data=None) -> None:
        actions.toggle_reference(self.app.state_manager)

    def on_alert_dismissed(self, sender=None, app_data=None) -> None:
        if dpg is not None and self.alert_modal_id is not None:
            dpg.configure_item(self.alert_modal_id, show=False)
