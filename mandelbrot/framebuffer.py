"""
Frame buffer holding one (position, color) sample per device pixel.
"""

from dataclasses import dataclass

import numpy as np

from .errors import ConfigError


@dataclass(frozen=True)
class FrameSnapshot:
    """
    Read-only copy of a frame buffer, handed to the renderer.

    Attributes:
        width, height: Grid dimensions in pixels
        generation: Refresh counter when the snapshot was taken
        positions: (N, 2) int32 pixel positions, N = width * height
        colors: (N, 3) uint8 RGB colors
    """
    width: int
    height: int
    generation: int
    positions: np.ndarray
    colors: np.ndarray

    def as_rgb(self):
        """Colors as a (height, width, 3) image, row-major from the top."""
        return self.colors.reshape(self.height, self.width, 3)

    def color_at(self, x, y):
        return tuple(int(v) for v in self.colors[x + y * self.width])


class FrameBuffer:
    """
    Dense grid of pixel samples, index = x + y * width.

    Storage is only reallocated when the dimensions change; contents are
    overwritten in full by compute.compute_frame.
    """

    def __init__(self, width, height):
        self.width = 0
        self.height = 0
        self.positions = None
        self.colors = None
        self.resize(width, height)

    def __len__(self):
        return self.width * self.height

    def resize(self, width, height):
        """
        Reallocate storage for a new grid size.

        Returns:
            True if storage was reallocated, False if the size was unchanged
        """
        if width <= 0 or height <= 0:
            raise ConfigError(f"Frame buffer needs a positive size, got {width}x{height}")
        if width == self.width and height == self.height:
            return False

        self.width = width
        self.height = height
        self.positions = np.zeros((width * height, 2), dtype=np.int32)
        self.colors = np.zeros((width * height, 3), dtype=np.uint8)
        return True

    def snapshot(self, generation=0):
        positions = self.positions.copy()
        colors = self.colors.copy()
        positions.setflags(write=False)
        colors.setflags(write=False)
        return FrameSnapshot(self.width, self.height, generation, positions, colors)
