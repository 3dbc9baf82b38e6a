"""Catalog of chartable (space, dimension) pairs."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Mapping, Optional

from coloraide import Color

from paletteplot import defaults
from paletteplot.colorspace import backend as B
from paletteplot.colorspace.backend import DimensionMeta, SpaceInfo
from paletteplot.errors import CatalogValidationError, UndefinedCoordinateError

logger = logging.getLogger(__name__)


def entry_id(space_id: str, dimension: str) -> str:
    """Stable identifier for a (space, dimension) pair, e.g. ``"oklch/l"``."""
    return f"{space_id}/{dimension}"


@dataclass(frozen=True)
class CatalogEntry:
    """One (space, dimension) pair available for charting."""
    id: str
    label: str
    space_id: str
    space_name: str
    dimension: str
    meta: DimensionMeta

    @property
    def min(self) -> float:
        return self.meta.min

    @property
    def max(self) -> float:
        return self.meta.max


def _candidates(spaces: Mapping[str, SpaceInfo]) -> Iterable[CatalogEntry]:
    for space_id, space in spaces.items():
        for dimension, meta in space.coords.items():
            yield CatalogEntry(
                id=entry_id(space_id, dimension),
                label=f"{space.name} - {dimension}",
                space_id=space_id,
                space_name=space.name,
                dimension=dimension,
                meta=meta,
            )


def validate_entry(entry: CatalogEntry, spaces: Mapping[str, SpaceInfo], test_color: Color) -> None:
    """Raise CatalogValidationError unless ``entry`` is readable on ``test_color``."""
    space = spaces.get(entry.space_id)
    if space is None or entry.dimension not in space.coords:
        raise CatalogValidationError(entry.space_id, entry.dimension, "not declared by space")
    try:
        B.read(test_color, entry.space_id, entry.dimension)
    except UndefinedCoordinateError as e:
        raise CatalogValidationError(entry.space_id, entry.dimension, str(e)) from e


def build_catalog(
    spaces: Optional[Mapping[str, SpaceInfo]] = None,
    *,
    test_color: str = defaults.TEST_COLOR,
) -> tuple[CatalogEntry, ...]:
    """Enumerate and validate every (space, dimension) pair.

    Args:
        spaces: Space metadata to enumerate; defaults to every space the
            color library registers.
        test_color: Neutral color each entry must be readable on.

    Returns:
        Validated entries in space-then-dimension order. Entries that fail
        validation are logged and left out.
    """
    if spaces is None:
        spaces = B.list_spaces()
    color = B.parse(test_color)

    entries: list[CatalogEntry] = []
    seen: set[str] = set()
    for candidate in _candidates(spaces):
        if candidate.id in seen:
            continue
        try:
            validate_entry(candidate, spaces, color)
        except CatalogValidationError as e:
            logger.warning("Skipping catalog entry %s: %s", candidate.id, e)
            continue
        seen.add(candidate.id)
        entries.append(candidate)

    logger.debug("Catalog built with %d entries across %d spaces", len(entries), len(spaces))
    return tuple(entries)


@lru_cache(maxsize=1)
def default_catalog() -> tuple[CatalogEntry, ...]:
    """Catalog over the color library's spaces, built once per session."""
    return build_catalog()


def entries_for_space(catalog: Iterable[CatalogEntry], space_id: str) -> tuple[CatalogEntry, ...]:
    return tuple(e for e in catalog if e.space_id == space_id)


def entry_by_id(catalog: Iterable[CatalogEntry], id_: str) -> Optional[CatalogEntry]:
    for e in catalog:
        if e.id == id_:
            return e
    return None
