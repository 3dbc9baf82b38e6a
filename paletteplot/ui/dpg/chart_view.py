"""Line chart of one catalog entry with drag-to-edit."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Optional, Sequence

from paletteplot import defaults
from paletteplot.app import actions
from paletteplot.app.pointer import (
    PlotArea,
    index_to_offset,
    nearest_index,
    normalize_pointer,
    value_to_offset,
)
from paletteplot.colorspace import to_rgba255
from paletteplot.colorspace.catalog import CatalogEntry
from paletteplot.colorspace.projection import ProjectedPoint, series
from paletteplot.ui.dpg import theme

if TYPE_CHECKING:
    from paletteplot.ui.dpg.app import PalettePlotApp

try:
    import dearpygui.dearpygui as dpg  # type: ignore
except ImportError:
    dpg = None


def _format_tick(value: float) -> str:
    return f"{value:.3g}"


class ChartView:
    """Draws ``(palette index, coordinate)`` points for one entry and turns
    primary-button drags inside the plot into coordinate edits."""

    def __init__(self, app: "PalettePlotApp", entry: CatalogEntry):
        self.app = app
        self.entry = entry

        self.group_id: Optional[int] = None
        self.drawlist_id: Optional[int] = None
        self.readout_text_id: Optional[int] = None

        self.width: int = defaults.CHART_MIN_WIDTH
        self.height: int = defaults.CHART_HEIGHT

        # Drag state: a drag belongs to the chart it started in.
        self.dragging: bool = False
        self.active_index: int = -1
        self._last_pointer: Optional[tuple[float, float]] = None

        self._points: Sequence[ProjectedPoint] = ()

    # ------------------------------------------------------------------
    # Build / teardown
    # ------------------------------------------------------------------

    def build(self, parent) -> None:
        if dpg is None:
            return
        with dpg.group(parent=parent) as group:
            self.group_id = group
            with dpg.group(horizontal=True):
                dpg.add_text(self.entry.label, color=theme.TITLE)
                dpg.add_button(
                    label="spread linearly",
                    small=True,
                    callback=self.on_spread_clicked,
                )
                self.readout_text_id = dpg.add_text("", color=theme.SUBTLE)
            self.drawlist_id = dpg.add_drawlist(width=self.width, height=self.height)
            dpg.add_spacer(height=4)

    def destroy(self) -> None:
        if dpg is not None and self.group_id is not None and dpg.does_item_exist(self.group_id):
            dpg.delete_item(self.group_id)
        self.group_id = None
        self.drawlist_id = None
        self.readout_text_id = None

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def local_plot_area(self) -> PlotArea:
        """Plotted region in drawlist coordinates (axes margins excluded)."""
        return PlotArea.inset(
            (0.0, 0.0),
            (float(self.width), float(self.height)),
            left=defaults.CHART_MARGIN_LEFT,
            top=defaults.CHART_MARGIN_TOP,
            right=defaults.CHART_MARGIN_RIGHT,
            bottom=defaults.CHART_MARGIN_BOTTOM,
        )

    def screen_plot_area(self) -> Optional[PlotArea]:
        """Plotted region in screen coordinates, from the drawlist's bounding box."""
        if dpg is None or self.drawlist_id is None or not dpg.does_item_exist(self.drawlist_id):
            return None
        rect_min = dpg.get_item_rect_min(self.drawlist_id)
        if rect_min is None:
            return None
        return self.local_plot_area().shifted(rect_min[0], rect_min[1])

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def redraw(self, points: Sequence[ProjectedPoint], width: Optional[int] = None) -> None:
        """Redraw the chart from a fresh projection."""
        if dpg is None or self.drawlist_id is None:
            return
        self._points = points
        if width is not None:
            width = max(int(width), defaults.CHART_MIN_WIDTH)
            if width != self.width:
                self.width = width
                dpg.configure_item(self.drawlist_id, width=self.width)

        dpg.delete_item(self.drawlist_id, children_only=True)
        area = self.local_plot_area()
        lo, hi = self.entry.min, self.entry.max

        dpg.draw_rectangle(
            (area.left, area.top), (area.right, area.bottom),
            color=theme.CHART_FRAME, fill=theme.CHART_BG, parent=self.drawlist_id,
        )

        # Horizontal grid with tick labels
        for i in range(defaults.CHART_Y_TICKS + 1):
            value = lo + (hi - lo) * i / defaults.CHART_Y_TICKS
            y = area.top + value_to_offset(value, area.height, lo, hi)
            if 0 < i < defaults.CHART_Y_TICKS:
                dpg.draw_line(
                    (area.left, y), (area.right, y),
                    color=theme.CHART_GRID, thickness=1.0, parent=self.drawlist_id,
                )
            dpg.draw_text(
                (4.0, y - 7.0), _format_tick(value),
                color=theme.CHART_TICK_TEXT, size=13, parent=self.drawlist_id,
            )

        values = series(points, self.entry.id)
        count = len(values)
        coords: list[Optional[tuple[float, float]]] = []
        for idx, value in enumerate(values):
            x = area.left + index_to_offset(idx, area.width, count)
            if count <= 12 or idx % max(count // 12, 1) == 0:
                dpg.draw_text(
                    (x - 3.0, area.bottom + 4.0), str(idx),
                    color=theme.CHART_TICK_TEXT, size=12, parent=self.drawlist_id,
                )
            if math.isnan(value):
                coords.append(None)
            else:
                coords.append((x, area.top + value_to_offset(float(value), area.height, lo, hi)))

        # Undefined readings leave a gap in the line.
        for a, b in zip(coords, coords[1:]):
            if a is not None and b is not None:
                dpg.draw_line(a, b, color=theme.CHART_LINE, thickness=2.0, parent=self.drawlist_id)

        for idx, (point, xy) in enumerate(zip(points, coords)):
            if xy is None:
                continue
            outline = theme.POINT_OUTLINE_ACTIVE if idx == self.active_index else theme.POINT_OUTLINE
            dpg.draw_circle(
                xy, defaults.POINT_RADIUS,
                color=outline, fill=to_rgba255(point.color_text),
                thickness=defaults.POINT_BORDER, parent=self.drawlist_id,
            )

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def process_pointer(self, pointer: tuple[float, float], mouse_down: bool, pressed: bool) -> bool:
        """Handle one frame of mouse state. Returns True if the palette was edited.

        Edits happen only while the primary button is held after a press
        inside this chart's plot area; hovering only updates the readout.
        """
        area = self.screen_plot_area()
        if area is None:
            self.dragging = False
            return False

        if pressed and area.contains(*pointer):
            self.dragging = True
        if not mouse_down:
            self.dragging = False
            self.active_index = -1
            self._last_pointer = None

        if self.dragging:
            if not pressed and pointer == self._last_pointer:
                return False
            self._last_pointer = pointer
            sample = normalize_pointer(pointer, area)
            idx, value = actions.drag_to(self.app.state_manager, self.entry, sample)
            self.active_index = idx
            self._set_readout(f"#{idx}  {value:.4g}")
            return True

        if area.contains(*pointer) and self._points:
            sample = normalize_pointer(pointer, area)
            idx = nearest_index(sample.offset_x, sample.width, len(self._points))
            point = self._points[idx]
            value = point.values.get(self.entry.id, float("nan"))
            self._set_readout(f"#{idx} {point.color_text}  {value:.4g}")
        return False

    def _set_readout(self, text: str) -> None:
        if dpg is not None and self.readout_text_id is not None:
            dpg.set_value(self.readout_text_id, text)

    def on_spread_clicked(self, sender=None, app_data=None) -> None:
        actions.spread_linearly(self.app.state_manager, self.entry)
