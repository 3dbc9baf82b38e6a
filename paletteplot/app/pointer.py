"""Pointer normalization and pointer <-> value mapping for chart views.

Toolkit-neutral. The UI layer passes absolute pointer coordinates and the
plotted area's bounding box; everything downstream works with offsets
relative to that box.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class PlotArea:
    """Bounding box of the plotted region (y grows downward)."""
    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x <= self.right and self.top <= y <= self.bottom

    def shifted(self, dx: float, dy: float) -> "PlotArea":
        return PlotArea(self.left + dx, self.top + dy, self.width, self.height)

    @classmethod
    def inset(
        cls,
        rect_min: Sequence[float],
        rect_max: Sequence[float],
        *,
        left: float = 0.0,
        top: float = 0.0,
        right: float = 0.0,
        bottom: float = 0.0,
    ) -> "PlotArea":
        """Plot area inside an item rect after subtracting axis margins."""
        width = max(float(rect_max[0] - rect_min[0]) - left - right, 1.0)
        height = max(float(rect_max[1] - rect_min[1]) - top - bottom, 1.0)
        return cls(float(rect_min[0]) + left, float(rect_min[1]) + top, width, height)


@dataclass(frozen=True)
class PointerSample:
    """Pointer position relative to a plot area's top-left corner."""
    offset_x: float
    offset_y: float
    width: float
    height: float


def normalize_pointer(pointer: Sequence[float], area: PlotArea) -> PointerSample:
    """Express an absolute pointer position relative to ``area``.

    Offsets come from the bounding box alone (``pointer - box.top``) so no
    toolkit-specific local-offset field is trusted.
    """
    return PointerSample(
        offset_x=float(pointer[0]) - area.left,
        offset_y=float(pointer[1]) - area.top,
        width=area.width,
        height=area.height,
    )


def offset_to_value(offset_y: float, height: float, lo: float, hi: float) -> float:
    """Map a vertical offset to a value in ``[lo, hi]``.

    Offset 0 (top) maps to ``hi`` and ``height`` (bottom) maps to ``lo``;
    offsets outside the plot are clamped.
    """
    if height <= 0:
        return hi
    clamped = min(max(offset_y, 0.0), height)
    return (1.0 - clamped / height) * (hi - lo) + lo


def value_to_offset(value: float, height: float, lo: float, hi: float) -> float:
    """Inverse of offset_to_value, clamped to the plot height."""
    if hi == lo:
        return height
    offset = (1.0 - (value - lo) / (hi - lo)) * height
    return min(max(offset, 0.0), height)


def index_to_offset(index: int, width: float, count: int) -> float:
    """Horizontal offset of point ``index`` among ``count`` evenly spaced points."""
    if count <= 1:
        return width / 2.0
    return index * width / (count - 1)


def nearest_index(offset_x: float, width: float, count: int) -> int:
    """Index of the point closest to a horizontal offset."""
    if count <= 1 or width <= 0:
        return 0
    idx = int(round(offset_x / width * (count - 1)))
    return min(max(idx, 0), count - 1)


def pointer_to_edit(sample: PointerSample, count: int, lo: float, hi: float) -> tuple[int, float]:
    """Resolve a pointer sample to ``(palette index, new coordinate value)``."""
    idx = nearest_index(sample.offset_x, sample.width, count)
    return idx, offset_to_value(sample.offset_y, sample.height, lo, hi)
