"""Tests for the (space, dimension) catalog."""

import logging

import pytest

from paletteplot.colorspace import (
    DimensionMeta,
    SpaceInfo,
    build_catalog,
    default_catalog,
    entries_for_space,
    entry_by_id,
    parse,
    read,
)


@pytest.fixture(scope="module")
def catalog():
    return default_catalog()


class TestDefaultCatalog:
    """Catalog built from the color library's registered spaces."""

    def test_not_empty(self, catalog):
        assert len(catalog) > 0

    def test_every_entry_readable_on_black(self, catalog):
        black = parse("#000")
        for entry in catalog:
            assert isinstance(read(black, entry.space_id, entry.dimension), float)

    def test_ids_unique(self, catalog):
        ids = [e.id for e in catalog]
        assert len(ids) == len(set(ids))

    def test_oklch_entries(self, catalog):
        oklch = entries_for_space(catalog, "oklch")
        assert [e.id for e in oklch] == ["oklch/l", "oklch/c", "oklch/h"]

    def test_label(self, catalog):
        entry = entry_by_id(catalog, "oklch/l")
        assert entry is not None
        assert entry.label == "OKLCh - l"
        assert (entry.min, entry.max) == (0.0, 1.0)

    def test_srgb_entries(self, catalog):
        ids = {e.id for e in entries_for_space(catalog, "srgb")}
        assert ids == {"srgb/r", "srgb/g", "srgb/b"}

    def test_cached(self):
        assert default_catalog() is default_catalog()

    def test_entry_by_id_missing(self, catalog):
        assert entry_by_id(catalog, "oklch/zz") is None


class TestValidation:
    """Entries the library cannot read are excluded and logged."""

    @pytest.fixture
    def spaces(self):
        return {
            "oklch": SpaceInfo("oklch", "OKLCh", {
                "l": DimensionMeta(0.0, 1.0),
                "zz": DimensionMeta(),
            }),
            "no-such-space": SpaceInfo("no-such-space", "Nope", {"x": DimensionMeta()}),
        }

    def test_unreadable_excluded(self, spaces):
        catalog = build_catalog(spaces)
        assert [e.id for e in catalog] == ["oklch/l"]

    def test_rejections_logged_once_each(self, spaces, caplog):
        with caplog.at_level(logging.WARNING, logger="paletteplot.colorspace.catalog"):
            build_catalog(spaces)
        messages = [r.getMessage() for r in caplog.records]
        assert sum("oklch/zz" in m for m in messages) == 1
        assert sum("no-such-space/x" in m for m in messages) == 1
        assert not any("oklch/l" in m for m in messages)

    def test_fallback_range_kept(self, spaces):
        spaces["oklch"].coords["c"] = DimensionMeta()
        catalog = build_catalog(spaces)
        entry = entry_by_id(catalog, "oklch/c")
        assert entry is not None
        assert (entry.min, entry.max) == (0.0, 1.0)

    def test_custom_test_color(self, spaces):
        catalog = build_catalog(spaces, test_color="#fff")
        assert [e.id for e in catalog] == ["oklch/l"]

    def test_empty(self):
        assert build_catalog({}) == ()
