"""Color-space catalog and palette projection.

This module provides:
- A thin adapter over coloraide addressing coordinates by (space, dimension)
- The validated catalog of chartable (space, dimension) pairs
- Projection of a palette onto every catalog entry

Example:
    from paletteplot.colorspace import default_catalog, project, series

    catalog = default_catalog()
    points = project(["#440154", "#fde725"], catalog)
    lightness = series(points, "oklch/l")
"""

from .backend import (
    DimensionMeta,
    SpaceInfo,
    parse,
    read,
    write,
    serialize,
    normalize,
    to_rgba255,
    list_spaces,
)

from .catalog import (
    CatalogEntry,
    build_catalog,
    default_catalog,
    entries_for_space,
    entry_by_id,
    entry_id,
)

from .projection import ProjectedPoint, project, series

__all__ = [
    # Color library adapter
    'DimensionMeta',
    'SpaceInfo',
    'parse',
    'read',
    'write',
    'serialize',
    'normalize',
    'to_rgba255',
    'list_spaces',
    # Catalog
    'CatalogEntry',
    'build_catalog',
    'default_catalog',
    'entries_for_space',
    'entry_by_id',
    'entry_id',
    # Projection
    'ProjectedPoint',
    'project',
    'series',
]
