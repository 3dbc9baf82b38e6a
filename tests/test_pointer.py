"""Tests for pointer normalization and pointer-to-value mapping."""

import pytest

from paletteplot.app.pointer import (
    PlotArea,
    PointerSample,
    index_to_offset,
    nearest_index,
    normalize_pointer,
    offset_to_value,
    pointer_to_edit,
    value_to_offset,
)


@pytest.fixture
def area():
    return PlotArea(left=100.0, top=50.0, width=200.0, height=100.0)


class TestPlotArea:

    def test_edges(self, area):
        assert area.right == 300.0
        assert area.bottom == 150.0

    def test_contains(self, area):
        assert area.contains(100.0, 50.0)
        assert area.contains(300.0, 150.0)
        assert not area.contains(99.0, 60.0)
        assert not area.contains(150.0, 151.0)

    def test_inset(self):
        area = PlotArea.inset((10, 20), (410, 220), left=50, top=8, right=10, bottom=22)
        assert area == PlotArea(60.0, 28.0, 340.0, 170.0)

    def test_inset_never_collapses(self):
        area = PlotArea.inset((0, 0), (10, 10), left=20, bottom=20)
        assert area.width >= 1.0
        assert area.height >= 1.0

    def test_shifted(self, area):
        assert area.shifted(5, -5) == PlotArea(105.0, 45.0, 200.0, 100.0)


class TestNormalizePointer:

    def test_offsets_from_bounding_box(self, area):
        sample = normalize_pointer((150.0, 75.0), area)
        assert sample == PointerSample(50.0, 25.0, 200.0, 100.0)

    def test_top_edge_is_zero(self, area):
        assert normalize_pointer((120.0, 50.0), area).offset_y == 0.0

    def test_outside_gives_out_of_range_offsets(self, area):
        sample = normalize_pointer((90.0, 10.0), area)
        assert sample.offset_x == -10.0
        assert sample.offset_y == -40.0


class TestOffsetToValue:
    """Top maps to max, bottom to min, clamped outside."""

    def test_top_is_max(self):
        assert offset_to_value(0.0, 100.0, 0.0, 360.0) == 360.0

    def test_bottom_is_min(self):
        assert offset_to_value(100.0, 100.0, 0.0, 360.0) == 0.0

    def test_middle(self):
        assert offset_to_value(50.0, 100.0, -125.0, 125.0) == pytest.approx(0.0)

    def test_negative_offset_clamped(self):
        assert offset_to_value(-30.0, 100.0, 0.0, 1.0) == 1.0

    def test_offset_past_bottom_clamped(self):
        assert offset_to_value(130.0, 100.0, 0.0, 1.0) == 0.0

    @pytest.mark.parametrize("offset", [-1000.0, -1.0, 0.0, 33.3, 99.9, 100.0, 1e6])
    def test_always_in_range(self, offset):
        value = offset_to_value(offset, 100.0, 0.2, 0.8)
        assert 0.2 <= value <= 0.8

    def test_zero_height(self):
        assert offset_to_value(10.0, 0.0, 0.0, 1.0) == 1.0

    def test_inverse(self):
        for value in (0.0, 0.25, 0.5, 1.0):
            offset = value_to_offset(value, 80.0, 0.0, 1.0)
            assert offset_to_value(offset, 80.0, 0.0, 1.0) == pytest.approx(value)

    def test_value_to_offset_clamped(self):
        assert value_to_offset(2.0, 80.0, 0.0, 1.0) == 0.0
        assert value_to_offset(-1.0, 80.0, 0.0, 1.0) == 80.0


class TestNearestIndex:

    def test_endpoints(self):
        assert nearest_index(0.0, 200.0, 11) == 0
        assert nearest_index(200.0, 200.0, 11) == 10

    def test_rounds_to_nearest(self):
        # Points every 20px.
        assert nearest_index(29.0, 200.0, 11) == 1
        assert nearest_index(31.0, 200.0, 11) == 2

    def test_clamped(self):
        assert nearest_index(-50.0, 200.0, 11) == 0
        assert nearest_index(500.0, 200.0, 11) == 10

    def test_single_point(self):
        assert nearest_index(150.0, 200.0, 1) == 0

    def test_index_to_offset_roundtrip(self):
        for idx in range(5):
            assert nearest_index(index_to_offset(idx, 200.0, 5), 200.0, 5) == idx

    def test_single_point_centered(self):
        assert index_to_offset(0, 200.0, 1) == 100.0


class TestPointerToEdit:

    def test_top_left(self):
        sample = PointerSample(0.0, 0.0, 200.0, 100.0)
        assert pointer_to_edit(sample, 2, 0.0, 1.0) == (0, 1.0)

    def test_bottom_right(self):
        sample = PointerSample(200.0, 100.0, 200.0, 100.0)
        assert pointer_to_edit(sample, 2, 0.0, 1.0) == (1, 0.0)
