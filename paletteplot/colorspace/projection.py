"""Per-index coordinate values of a palette in every catalog dimension."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Sequence

import numpy as np

from paletteplot.colorspace import backend as B
from paletteplot.colorspace.catalog import CatalogEntry
from paletteplot.errors import UndefinedCoordinateError


@dataclass(frozen=True)
class ProjectedPoint:
    """One palette color decomposed into every catalog dimension.

    ``values`` maps catalog entry id -> coordinate; NaN marks an undefined
    reading, drawn as a gap.
    """
    index: int
    color_text: str
    values: Mapping[str, float]


def _read_or_nan(color, entry: CatalogEntry) -> float:
    try:
        return B.read(color, entry.space_id, entry.dimension)
    except UndefinedCoordinateError:
        return float("nan")


def project(palette: Sequence[str], catalog: Sequence[CatalogEntry]) -> tuple[ProjectedPoint, ...]:
    """Decompose every palette color along every catalog entry.

    Pure: neither argument is mutated and equal inputs give equal output.
    """
    points = []
    for index, text in enumerate(palette):
        color = B.parse(text)
        values = {entry.id: _read_or_nan(color, entry) for entry in catalog}
        points.append(ProjectedPoint(index, text, MappingProxyType(values)))
    return tuple(points)


def series(projection: Sequence[ProjectedPoint], entry_id: str) -> np.ndarray:
    """Values of one catalog entry across the palette, in index order."""
    return np.array(
        [p.values.get(entry_id, np.nan) for p in projection],
        dtype=np.float64,
    )
