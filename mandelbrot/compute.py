"""
Mandelbrot computation kernels using Numba JIT compilation.

This module contains the performance-critical, side-effect-free math:
- Pixel <-> complex-plane coordinate mapping
- Escape-time iteration for a single point (z <- z² + c)
- Full-frame computation that fills a frame buffer in one pass

The kernels take plain numbers and numpy arrays so they compile in
nopython mode. ViewportState-aware wrappers are provided for callers
outside the hot loop.
"""

import numpy as np
from numba import jit

from .colormaps import iteration_to_color


@jit(nopython=True, cache=True)
def map_pixel_to_plane(px, py, pixel_width, pixel_height,
                       center_x, center_y, plane_width, plane_height):
    """
    Map a pixel position to complex-plane coordinates.

    Pixel y grows downward while plane y grows upward, so the vertical
    axis is flipped.

    Returns:
        (x, y): Real and imaginary parts of the plane point
    """
    x = (px / pixel_width) * plane_width + (center_x - plane_width / 2.0)
    y = ((py - pixel_height) / (-pixel_height)) * plane_height + \
        (center_y - plane_height / 2.0)
    return x, y


@jit(nopython=True, cache=True)
def map_plane_to_pixel(x, y, pixel_width, pixel_height,
                       center_x, center_y, plane_width, plane_height):
    """Inverse of map_pixel_to_plane. Returns float pixel coordinates."""
    px = (x - (center_x - plane_width / 2.0)) / plane_width * pixel_width
    py = pixel_height - (y - (center_y - plane_height / 2.0)) / plane_height * pixel_height
    return px, py


@jit(nopython=True, cache=True)
def escape_count_xy(cr, ci, max_iter, escape_radius=2.0):
    """
    Escape-time iteration for c = cr + ci·i.

    Starting from z = 0, applies z <- z² + c until |z| exceeds the escape
    radius or max_iter iterations have run. Compares |z|² against
    radius² instead of taking a square root.

    Returns:
        Iteration count in [0, max_iter]; max_iter means the point did
        not escape (treated as inside the set)
    """
    escape_r2 = escape_radius * escape_radius
    zr, zi = 0.0, 0.0
    count = 0
    while zr * zr + zi * zi <= escape_r2 and count < max_iter:
        zr, zi = zr * zr - zi * zi + cr, 2.0 * zr * zi + ci
        count += 1
    return count


@jit(nopython=True, cache=True)
def escape_count(c, max_iter, escape_radius=2.0):
    """Escape-time iteration count for the complex point c."""
    return escape_count_xy(c.real, c.imag, max_iter, escape_radius)


@jit(nopython=True, cache=True)
def compute_frame(pixel_width, pixel_height, center_x, center_y,
                  plane_width, plane_height, max_iter, escape_radius,
                  band_count, positions, colors):
    """
    Compute every cell of a frame buffer.

    For each pixel: map to the plane, count escape iterations, convert
    the count to a color. Cell index is x + y * pixel_width.

    Args:
        pixel_width, pixel_height: Grid dimensions
        center_x, center_y: Plane center of the viewport
        plane_width, plane_height: Viewport extent in plane units
        max_iter: Iteration cap
        escape_radius: Escape threshold on |z|
        band_count: Number of color bands
        positions: (N, 2) int array, modified in place
        colors: (N, 3) uint8 array, modified in place
    """
    for py in range(pixel_height):
        for px in range(pixel_width):
            x, y = map_pixel_to_plane(px, py, pixel_width, pixel_height,
                                      center_x, center_y, plane_width, plane_height)
            count = escape_count_xy(x, y, max_iter, escape_radius)
            r, g, b = iteration_to_color(count, max_iter, band_count)

            idx = px + py * pixel_width
            positions[idx, 0] = px
            positions[idx, 1] = py
            colors[idx, 0] = np.uint8(r)
            colors[idx, 1] = np.uint8(g)
            colors[idx, 2] = np.uint8(b)


def pixel_to_plane(px, py, viewport):
    """
    Map a pixel to plane coordinates for the given ViewportState.

    Args:
        px, py: Pixel coordinates (0, 0 is the top-left corner)
        viewport: ViewportState describing the current view

    Returns:
        (x, y) tuple of floats
    """
    return map_pixel_to_plane(
        float(px), float(py), viewport.pixel_width, viewport.pixel_height,
        viewport.center_x, viewport.center_y,
        viewport.plane_width, viewport.plane_height
    )


def plane_to_pixel(x, y, viewport):
    """Map plane coordinates back to (float) pixel coordinates."""
    return map_plane_to_pixel(
        float(x), float(y), viewport.pixel_width, viewport.pixel_height,
        viewport.center_x, viewport.center_y,
        viewport.plane_width, viewport.plane_height
    )


def warmup_jit(max_iter=10, band_count=5):
    """
    Warm up JIT compilation with a tiny frame.

    Call this once at startup to pre-compile the Numba functions,
    avoiding a delay on the first real refresh.
    """
    positions = np.zeros((16, 2), dtype=np.int32)
    colors = np.zeros((16, 3), dtype=np.uint8)
    compute_frame(4, 4, 0.0, 0.0, 4.0, 4.0, max_iter, 2.0, band_count,
                  positions, colors)
