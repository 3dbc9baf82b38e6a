"""Color library adapter.

All color-space math is delegated to coloraide. This module narrows it to
the handful of calls the rest of Palette Plot needs, addressing coordinates
by explicit ``(space_id, dimension)`` key pairs.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from coloraide import Color

from paletteplot import defaults
from paletteplot.errors import PaletteParseError, UndefinedCoordinateError

_ALPHA = "alpha"


@dataclass(frozen=True)
class DimensionMeta:
    """Reference range of one coordinate axis."""
    min: float = defaults.FALLBACK_RANGE[0]
    max: float = defaults.FALLBACK_RANGE[1]

    @property
    def span(self) -> float:
        return self.max - self.min


@dataclass(frozen=True)
class SpaceInfo:
    """A color space and its ordered dimensions."""
    id: str
    name: str
    coords: dict[str, DimensionMeta] = field(default_factory=dict)


def parse(text: str) -> Color:
    """Parse any CSS color string coloraide understands.

    Raises:
        PaletteParseError: If ``text`` is not a string or not a valid color.
    """
    if not isinstance(text, str):
        raise PaletteParseError(f"Invalid color: {text!r}", value=text)
    try:
        return Color(text)
    except (ValueError, TypeError) as e:
        raise PaletteParseError(f"Invalid color: {text}", value=text) from e


def read(color: Color, space_id: str, dimension: str) -> float:
    """Return ``color``'s coordinate along ``dimension`` of ``space_id``.

    NaN is a valid reading (e.g. the hue of an achromatic color).

    Raises:
        UndefinedCoordinateError: If the space or dimension is unknown or the
            conversion fails.
    """
    try:
        value = color.get(f"{space_id}.{dimension}")
    except (ValueError, KeyError, TypeError, ArithmeticError) as e:
        raise UndefinedCoordinateError(f"Cannot read {space_id}.{dimension}: {e}") from e
    if value is None:
        raise UndefinedCoordinateError(f"{space_id}.{dimension} is undefined")
    return float(value)


def write(color: Color, space_id: str, dimension: str, value: float) -> Color:
    """Return a copy of ``color`` with one coordinate replaced.

    The input color is untouched. All other coordinates of the space keep
    the values they had before the write.
    """
    try:
        return color.clone().set(f"{space_id}.{dimension}", float(value))
    except (ValueError, KeyError, TypeError) as e:
        raise UndefinedCoordinateError(f"Cannot write {space_id}.{dimension}: {e}") from e


def serialize(color: Color) -> str:
    """Serialize to sRGB hex, gamut-fitted, collapsed to 3/4 digits when lossless."""
    return color.convert(defaults.SERIALIZE_SPACE).to_string(hex=True, compress=True)


def normalize(text: str) -> str:
    """Canonical textual form of a color string."""
    return serialize(parse(text))


def to_rgba255(text: str) -> tuple[int, int, int, int]:
    """Convert a color string to 0-255 RGBA for drawing."""
    srgb = parse(text).convert("srgb")
    srgb.fit()
    r, g, b = (0.0 if math.isnan(v) else v for v in srgb[:3])
    alpha = srgb[-1]
    if math.isnan(alpha):
        alpha = 1.0
    return (round(r * 255), round(g * 255), round(b * 255), round(alpha * 255))


def _dimension_meta(channel) -> DimensionMeta:
    low: Optional[float] = getattr(channel, "low", None)
    high: Optional[float] = getattr(channel, "high", None)
    if low is None or high is None or not high > low:
        return DimensionMeta()
    return DimensionMeta(float(low), float(high))


def list_spaces() -> dict[str, SpaceInfo]:
    """Every space registered with the color library, keyed by id."""
    spaces: dict[str, SpaceInfo] = {}
    for space_id, space in Color.CS_MAP.items():
        coords = {
            str(channel): _dimension_meta(channel)
            for channel in space.CHANNELS
            if str(channel) != _ALPHA
        }
        name = defaults.SPACE_DISPLAY_NAMES.get(space_id, space_id)
        spaces[space_id] = SpaceInfo(space_id, name, coords)
    return spaces
