import itertools

import pytest

from argoslib.panel import (
    Array2D,
    Color,
    FirstPixelPosition,
    Mask,
    Panel,
    PanelScanParams,
    PrimaryScanDirection,
    serialize,
)

ALL_PARAMS = [
    PanelScanParams(first, direction)
    for first, direction in itertools.product(FirstPixelPosition, PrimaryScanDirection)
]


def _coordinate_panel(width, height):
    panel = Panel(width, height)
    for x in range(width):
        for y in range(height):
            panel[x, y] = Color(x, y, 7)
    return panel


def _positions(strip):
    return [(c.r, c.g) for c in strip]


def test_color_defaults_to_black():
    assert Color() == Color(0, 0, 0)


def test_color_truncates_float_channels():
    assert Color(10.9, 20.2, 30.5) == Color(10, 20, 30)


def test_from_hsv_zero_saturation_is_grey():
    assert Color.from_hsv(45, 0, 200) == Color(200, 200, 200)


@pytest.mark.parametrize("hue,channel", [(0, "r"), (60, "g"), (120, "b")])
def test_from_hsv_primary_hue_channel_is_value(hue, channel):
    color = Color.from_hsv(hue, 255, 255)
    assert getattr(color, channel) == 255
    assert max(color.r, color.g, color.b) == 255


@pytest.mark.parametrize("hue", range(0, 180, 7))
def test_from_hsv_channels_bounded_by_value(hue):
    color = Color.from_hsv(hue, 255, 200)
    assert max(color.r, color.g, color.b) == 200
    assert min(color.r, color.g, color.b) >= 0


def test_array_fill_and_dimensions():
    arr = Array2D(3, 2, "a")
    assert arr.width == 3
    assert arr.height == 2
    assert all(value == "a" for _, value in arr)


def test_array_set_and_get():
    arr = Array2D(3, 2, 0)
    arr[2, 1] = 5
    assert arr[2, 1] == 5
    assert arr[1, 1] == 0


def test_array_cells_are_independent():
    arr = Array2D(2, 2, 0)
    arr[0, 0] = 9
    assert arr[1, 0] == 0
    assert arr[0, 1] == 0


@pytest.mark.parametrize("key", [(3, 0), (0, 2), (-1, 0), (0, -1)])
def test_array_out_of_range_raises(key):
    arr = Array2D(3, 2, 0)
    with pytest.raises(IndexError):
        arr[key]
    with pytest.raises(IndexError):
        arr[key] = 1
    assert [value for _, value in arr] == [0] * 6
    assert arr.width == 3
    assert arr.height == 2


def test_empty_width_has_zero_height():
    assert Array2D(0, 5, 0).height == 0


def test_panel_and_mask_defaults():
    assert Panel(2, 2)[1, 1] == Color()
    assert Mask(2, 2)[1, 1] == 0.0


def test_array_equality():
    a = Mask(2, 2, 0.5)
    b = Mask(2, 2, 0.5)
    assert a == b
    b[0, 0] = 1.0
    assert not a == b


@pytest.mark.parametrize("params", ALL_PARAMS)
@pytest.mark.parametrize("size", [(4, 3), (3, 4), (5, 1), (1, 5), (2, 2)])
def test_serialize_is_permutation(params, size):
    width, height = size
    strip = serialize(_coordinate_panel(width, height), params)
    assert len(strip) == width * height
    assert sorted(_positions(strip)) == sorted(itertools.product(range(width), range(height)))


@pytest.mark.parametrize("params", ALL_PARAMS)
@pytest.mark.parametrize("size", [(4, 3), (3, 4), (2, 5)])
def test_serialize_consecutive_pixels_are_adjacent(params, size):
    width, height = size
    positions = _positions(serialize(_coordinate_panel(width, height), params))
    for (x1, y1), (x2, y2) in zip(positions, positions[1:]):
        assert abs(x1 - x2) + abs(y1 - y2) == 1


def test_bottom_left_horizontal_starts_at_origin_and_runs_right():
    params = PanelScanParams(FirstPixelPosition.BOTTOM_LEFT, PrimaryScanDirection.HORIZONTAL)
    positions = _positions(serialize(_coordinate_panel(3, 2), params))
    assert positions[:3] == [(0, 0), (1, 0), (2, 0)]


def test_bottom_left_vertical_starts_at_origin_and_runs_up():
    params = PanelScanParams(FirstPixelPosition.BOTTOM_LEFT, PrimaryScanDirection.VERTICAL)
    positions = _positions(serialize(_coordinate_panel(3, 2), params))
    assert positions[:2] == [(0, 0), (0, 1)]


def test_top_rows_scanned_first_for_top_positions():
    for first in (FirstPixelPosition.TOP_LEFT, FirstPixelPosition.TOP_RIGHT):
        params = PanelScanParams(first, PrimaryScanDirection.HORIZONTAL)
        positions = _positions(serialize(_coordinate_panel(3, 4), params))
        assert all(y == 3 for _, y in positions[:3])


def test_right_columns_scanned_first_for_right_vertical():
    for first in (FirstPixelPosition.TOP_RIGHT, FirstPixelPosition.BOTTOM_RIGHT):
        params = PanelScanParams(first, PrimaryScanDirection.VERTICAL)
        positions = _positions(serialize(_coordinate_panel(3, 4), params))
        assert all(x == 2 for x, _ in positions[:4])


def test_serialize_empty_panel():
    params = PanelScanParams(FirstPixelPosition.BOTTOM_RIGHT, PrimaryScanDirection.VERTICAL)
    assert serialize(Panel(0, 0), params) == []