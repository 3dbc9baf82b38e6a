"""Tests for palette projection."""

import math

import numpy as np
import pytest

from paletteplot import defaults
from paletteplot.colorspace import (
    CatalogEntry,
    DimensionMeta,
    default_catalog,
    parse,
    project,
    read,
    series,
)


@pytest.fixture(scope="module")
def catalog():
    return default_catalog()


class TestProject:

    def test_one_record_per_color(self, catalog):
        palette = list(defaults.INITIAL_PALETTE)
        points = project(palette, catalog)
        assert [p.index for p in points] == list(range(len(palette)))
        assert [p.color_text for p in points] == palette

    def test_every_entry_present(self, catalog):
        points = project(["#440154"], catalog)
        assert set(points[0].values) == {e.id for e in catalog}

    def test_values_match_backend(self, catalog):
        points = project(["#440154", "#fde725"], catalog)
        expected = read(parse("#fde725"), "oklch", "l")
        assert points[1].values["oklch/l"] == pytest.approx(expected)

    def test_empty_palette(self, catalog):
        assert project([], catalog) == ()

    def test_keeps_original_text(self, catalog):
        points = project(["#FFF"], catalog)
        assert points[0].color_text == "#FFF"


class TestPurity:

    def test_inputs_not_mutated(self, catalog):
        palette = ["#440154", "#21918c", "#fde725"]
        snapshot = list(palette)
        catalog_snapshot = tuple(catalog)
        project(palette, catalog)
        assert palette == snapshot
        assert tuple(catalog) == catalog_snapshot

    def test_repeatable(self, catalog):
        palette = ["#440154", "#000", "#fde725"]
        a = project(palette, catalog)
        b = project(palette, catalog)
        assert [p.color_text for p in a] == [p.color_text for p in b]
        for entry in catalog:
            np.testing.assert_array_equal(series(a, entry.id), series(b, entry.id))

    def test_values_read_only(self, catalog):
        points = project(["#440154"], catalog)
        with pytest.raises(TypeError):
            points[0].values["oklch/l"] = 0.0


class TestSeries:

    def test_index_order(self, catalog):
        points = project(["#000", "#fff"], catalog)
        np.testing.assert_allclose(series(points, "oklch/l"), [0.0, 1.0], atol=1e-4)

    def test_unknown_entry_is_nan(self, catalog):
        points = project(["#000", "#fff"], catalog)
        assert np.isnan(series(points, "nope/x")).all()

    def test_undefined_reading_is_gap(self):
        bogus = CatalogEntry("nope/x", "Nope - x", "nope", "Nope", "x", DimensionMeta())
        points = project(["#440154"], [bogus])
        assert math.isnan(points[0].values["nope/x"])
