"""
Iteration-count to color mapping for Mandelbrot visualization.

Uses a fixed gradient split into five equal-width bands over the
iteration range [0, max_iter):

    0: magenta -> blue
    1: blue -> cyan
    2: cyan -> green
    3: green -> yellow
    4: yellow -> red

Points that never escape (count == max_iter) are black. Colors are
stepped per iteration, not smoothly interpolated.
"""

from numba import jit


MAX_RGB = 255
HALF_RGB = 128
NUM_BANDS = 5


@jit(nopython=True, cache=True)
def saturate(value):
    """Clamp an integer channel value to [0, 255]."""
    if value < 0:
        return 0
    if value > MAX_RGB:
        return MAX_RGB
    return value


@jit(nopython=True, cache=True)
def iteration_to_color(count, max_iter, band_count=NUM_BANDS):
    """
    Map an escape iteration count to an RGB triple.

    Args:
        count: Iteration count from escape_count, in [0, max_iter]
        max_iter: Iteration cap used for the computation
        band_count: Number of gradient bands in use (1..5)

    Returns:
        (r, g, b) ints in [0, 255]
    """
    if count >= max_iter:
        return 0, 0, 0

    band_size = max_iter // band_count
    band = count // band_size
    if band > band_count - 1:
        # Leftover counts when max_iter isn't a multiple of band_count
        band = band_count - 1
    offset = count % band_size
    ramp = offset * (MAX_RGB // band_size)

    if band == 0:
        r, g, b = HALF_RGB + ramp, 0, MAX_RGB
    elif band == 1:
        r, g, b = 0, ramp, MAX_RGB
    elif band == 2:
        r, g, b = 0, MAX_RGB, MAX_RGB - ramp
    elif band == 3:
        r, g, b = ramp, MAX_RGB, 0
    else:
        r, g, b = MAX_RGB, MAX_RGB - ramp, 0

    return saturate(r), saturate(g), saturate(b)
