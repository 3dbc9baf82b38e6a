"""Dear PyGui application for Palette Plot."""

from __future__ import annotations

import logging
import os
import threading
from typing import Optional, Sequence

from paletteplot import defaults
from paletteplot.app.core import AppState
from paletteplot.app.state_manager import StateManager
from paletteplot.colorspace import CatalogEntry, ProjectedPoint, default_catalog, project
from paletteplot.ui.dpg.chart_view import ChartView
from paletteplot.ui.dpg.dimension_selector import DimensionSelector
from paletteplot.ui.dpg.palette_editor_panel import PaletteEditorPanel
from paletteplot.ui.dpg.theme import apply_theme

try:
    import dearpygui.dearpygui as dpg  # type: ignore
except ImportError:
    dpg = None

logger = logging.getLogger(__name__)


class PalettePlotApp:
    """Main window: header controls, swatches, one chart per selected dimension, text editor."""

    def __init__(self, catalog: Optional[Sequence[CatalogEntry]] = None):
        self.catalog: tuple[CatalogEntry, ...] = tuple(catalog) if catalog is not None else default_catalog()
        self.state = AppState.initial(self.catalog)
        self.state_lock = threading.RLock()
        self.state_manager = StateManager(self.state, self.state_lock)

        self.editor_panel = PaletteEditorPanel(self)
        self.dimension_selector = DimensionSelector(self)
        self.charts: list[ChartView] = []

        self.primary_window_id: Optional[int] = None
        self.charts_container_id: Optional[int] = None
        self.viewport_created: bool = False

        self.mouse_down_last: bool = False
        self.projection: tuple[ProjectedPoint, ...] = ()
        self._content_width: int = defaults.CHART_MIN_WIDTH

    def require_backend(self) -> None:
        if dpg is None:
            raise RuntimeError("Dear PyGui is not installed. Install with: pip install dearpygui")

    # ------------------------------------------------------------------
    # Build
    # ------------------------------------------------------------------

    def build(self) -> None:
        self.require_backend()
        dpg.create_context()
        apply_theme()

        with dpg.window(label="Color palette plot", tag="primary_window") as window:
            self.primary_window_id = window

            with dpg.group(horizontal=True) as header:
                dpg.add_text("Color palette plot")
                self.editor_panel.build_reference_button(header)
            self.dimension_selector.build(window)
            dpg.add_separator()

            self.editor_panel.build_swatches(window)
            dpg.add_spacer(height=6)

            self.charts_container_id = dpg.add_child_window(
                height=-(defaults.TEXT_FIELD_HEIGHT + 80),
                border=False,
            )

            dpg.add_separator()
            self.editor_panel.build_text_editor(window)

        self.editor_panel.build_alert_modal()

        dpg.create_viewport(
            title="Color palette plot",
            width=defaults.VIEWPORT_WIDTH,
            height=defaults.VIEWPORT_HEIGHT,
        )
        dpg.set_viewport_resize_callback(self.on_viewport_resize)
        dpg.set_primary_window("primary_window", True)
        self.viewport_created = True

        self.rebuild_charts()
        self.state_manager.request_refresh()

    def rebuild_charts(self) -> None:
        """Recreate one ChartView per selected entry."""
        if dpg is None or self.charts_container_id is None:
            return
        for chart in self.charts:
            chart.destroy()
        with self.state_lock:
            entries = self.state.selected_entries()
        self.charts = [ChartView(self, entry) for entry in entries]
        for chart in self.charts:
            chart.build(self.charts_container_id)
        logger.debug("Built %d chart views", len(self.charts))

    # ------------------------------------------------------------------
    # Refresh
    # ------------------------------------------------------------------

    def refresh(self, rebuild: bool = False) -> None:
        """Recompute the projection and redraw every view."""
        if rebuild:
            self.rebuild_charts()
        with self.state_lock:
            palette = self.state.palette
        self.projection = project(palette, self.catalog)
        self._content_width = self._measure_content_width()
        self.editor_panel.refresh(self._content_width)
        for chart in self.charts:
            chart.redraw(self.projection, self._content_width)

    def _measure_content_width(self) -> int:
        if dpg is None:
            return defaults.CHART_MIN_WIDTH
        viewport_width = dpg.get_viewport_client_width()
        # Window padding on both sides plus room for the scrollbar.
        return max(int(viewport_width) - 48, defaults.CHART_MIN_WIDTH)

    def on_viewport_resize(self, sender=None, app_data=None) -> None:
        self.state_manager.request_refresh()

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def process_mouse(self) -> None:
        """Dispatch this frame's primary-button state to every chart."""
        mouse_down = dpg.is_mouse_button_down(dpg.mvMouseButton_Left)
        pressed = mouse_down and not self.mouse_down_last
        self.mouse_down_last = mouse_down

        if self.editor_panel.is_alert_open():
            for chart in self.charts:
                chart.dragging = False
            return

        pointer = tuple(dpg.get_mouse_pos(local=False))
        for chart in self.charts:
            chart.process_pointer(pointer, mouse_down, pressed)

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def render(self) -> None:
        """Run Dear PyGui event loop."""
        self.require_backend()
        if not self.viewport_created:
            self.build()

        dpg.setup_dearpygui()
        dpg.show_viewport()

        try:
            while dpg.is_dearpygui_running():
                self.process_mouse()
                if self.state_manager.needs_refresh():
                    self.refresh(self.state_manager.consume_refresh())
                dpg.render_dearpygui_frame()
        finally:
            dpg.destroy_context()


def configure_logging() -> None:
    level = os.environ.get(defaults.LOG_LEVEL_ENV, defaults.DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def run() -> None:
    """Launch Palette Plot Dear PyGui application."""
    configure_logging()
    PalettePlotApp().render()
