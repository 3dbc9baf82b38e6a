"""Pure palette transforms.

A palette is an immutable tuple of color strings. Every function here
returns a new tuple and leaves its input alone.
"""

from __future__ import annotations

import json
import logging
import math
from typing import Sequence

import numpy as np

from paletteplot.colorspace import backend as B
from paletteplot.colorspace.catalog import CatalogEntry
from paletteplot.errors import PaletteParseError

logger = logging.getLogger(__name__)

Palette = tuple[str, ...]


def set_coordinate(palette: Sequence[str], index: int, entry: CatalogEntry, value: float) -> Palette:
    """Rewrite one coordinate of one color.

    Only ``palette[index]`` is re-serialized; every other string is passed
    through untouched.
    """
    if not 0 <= index < len(palette):
        raise IndexError(f"Palette index {index} out of range for {len(palette)} colors")
    color = B.write(B.parse(palette[index]), entry.space_id, entry.dimension, value)
    updated = list(palette)
    updated[index] = B.serialize(color)
    return tuple(updated)


def spread_linearly(palette: Sequence[str], entry: CatalogEntry) -> Palette:
    """Interpolate ``entry`` linearly between the first and last colors.

    ``value_i = first + i * (last - first) / (n - 1)``. Palettes with fewer
    than two colors, or whose first or last reading is undefined, are
    returned unchanged.
    """
    n = len(palette)
    if n < 2:
        return tuple(palette)
    colors = [B.parse(text) for text in palette]
    first = B.read(colors[0], entry.space_id, entry.dimension)
    last = B.read(colors[-1], entry.space_id, entry.dimension)
    if math.isnan(first) or math.isnan(last):
        logger.debug("Not spreading %s: endpoint reading is undefined", entry.id)
        return tuple(palette)
    values = first + np.arange(n) * ((last - first) / (n - 1))
    return tuple(
        B.serialize(B.write(color, entry.space_id, entry.dimension, float(v)))
        for color, v in zip(colors, values)
    )


def parse_palette_text(text: str) -> Palette:
    """Parse bulk-edited text into a palette.

    The text must be a JSON array whose elements are all valid colors. The
    strings are kept exactly as written.

    Raises:
        PaletteParseError: On invalid JSON, a non-array, or the first element
            that is not a valid color.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise PaletteParseError(f"Invalid JSON: {e}") from e
    if not isinstance(data, list):
        raise PaletteParseError("Not an array", value=data)
    for item in data:
        B.parse(item)
    return tuple(data)


def serialize_palette(palette: Sequence[str]) -> str:
    """Render a palette as a JSON array of color strings."""
    return json.dumps(list(palette))
