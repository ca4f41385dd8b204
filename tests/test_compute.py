"""
Escape-time iteration and plane mapping tests.
"""

import pytest

from mandelbrot.compute import (
    escape_count,
    escape_count_xy,
    pixel_to_plane,
    plane_to_pixel,
)
from mandelbrot.config import ExplorerConfig
from mandelbrot.viewport import ViewportState


@pytest.mark.parametrize("max_iter", [1, 5, 10, 64, 500])
def test_origin_never_escapes(max_iter):
    assert escape_count(0j, max_iter) == max_iter


@pytest.mark.parametrize("max_iter", [1, 2, 64])
def test_far_point_escapes_after_one_iteration(max_iter):
    assert escape_count(3 + 0j, max_iter) == 1


def test_escape_counts_match_hand_iteration():
    # -1+1i: -1+i, -1-i, -1+3i (|z| > 2 after the third step)
    assert escape_count(-1 + 1j, 10) == 3
    # 1+0i: 1, 2, 5
    assert escape_count(1 + 0j, 10) == 3
    # 0+2i: |c| == 2 does not escape yet; -4+2i does
    assert escape_count(2j, 10) == 2
    # -2 is a fixed point after one step (z = 2 forever)
    assert escape_count(-2 + 0j, 10) == 10
    # i is periodic
    assert escape_count(1j, 50) == 50


def test_escape_count_xy_matches_complex_form():
    assert escape_count_xy(0.25, 0.5, 64) == escape_count(0.25 + 0.5j, 64)


def test_custom_escape_radius():
    # 3 is inside radius 4 on the first step, 12 is not
    assert escape_count(3 + 0j, 10, 4.0) == 2


@pytest.fixture
def viewport():
    return ViewportState.initial(ExplorerConfig(), 800, 600)


def test_corners_map_to_plane_extents(viewport):
    # 800x600 -> plane 4.0 x 3.0 around the origin
    assert pixel_to_plane(0, 0, viewport) == pytest.approx((-2.0, 1.5))
    assert pixel_to_plane(800, 600, viewport) == pytest.approx((2.0, -1.5))
    assert pixel_to_plane(400, 300, viewport) == pytest.approx((0.0, 0.0))


def test_vertical_axis_is_flipped(viewport):
    _, top = pixel_to_plane(0, 10, viewport)
    _, bottom = pixel_to_plane(0, 500, viewport)
    assert top > bottom


def test_mapping_follows_center(viewport):
    from dataclasses import replace
    moved = replace(viewport, center_x=-0.75, center_y=0.1)
    assert pixel_to_plane(400, 300, moved) == pytest.approx((-0.75, 0.1))


@pytest.mark.parametrize("px,py", [(0, 0), (17, 433), (799, 599), (400, 1)])
def test_pixel_plane_round_trip(viewport, px, py):
    x, y = pixel_to_plane(px, py, viewport)
    assert plane_to_pixel(x, y, viewport) == pytest.approx((px, py))


def test_round_trip_when_zoomed():
    from dataclasses import replace
    vp = ViewportState.initial(ExplorerConfig(), 640, 480)
    vp = replace(vp, center_x=-0.7436, center_y=0.1318,
                 plane_width=4.0 * 0.5 ** 12, plane_height=3.0 * 0.5 ** 12)
    x, y = pixel_to_plane(123, 321, vp)
    assert plane_to_pixel(x, y, vp) == pytest.approx((123, 321), abs=1e-6)
