"""
Viewport state and the zoom/recenter state machine.

The ViewportController owns the only ViewportState, the frame buffer and
the render state. Input handlers mutate the view through zoom_in(),
zoom_out() and recenter(); the frame loop calls refresh() once per tick,
which recomputes the whole frame only when the view has changed.
"""

import logging
import time
from dataclasses import dataclass, replace
from enum import Enum

from .compute import compute_frame, pixel_to_plane
from .config import ExplorerConfig
from .errors import ConfigError
from .framebuffer import FrameBuffer

logger = logging.getLogger(__name__)


class RenderState(Enum):
    CALCULATING = "calculating"
    DISPLAYING = "displaying"


@dataclass(frozen=True)
class ViewportState:
    """
    Region of the complex plane mapped onto the pixel grid.

    plane_width and plane_height always follow from zoom_level:
        plane_width  = base_width * zoom_factor ** zoom_level
        plane_height = base_height * aspect_ratio * zoom_factor ** zoom_level
    """
    center_x: float
    center_y: float
    plane_width: float
    plane_height: float
    zoom_level: int
    pixel_width: int
    pixel_height: int

    @property
    def aspect_ratio(self):
        return self.pixel_height / self.pixel_width

    @classmethod
    def initial(cls, config, pixel_width, pixel_height):
        """Default view: centered on the origin at zoom level 0."""
        if pixel_width <= 0 or pixel_height <= 0:
            raise ConfigError(
                f"Pixel dimensions must be positive, got {pixel_width}x{pixel_height}"
            )
        aspect_ratio = pixel_height / pixel_width
        return cls(
            center_x=0.0,
            center_y=0.0,
            plane_width=config.base_width,
            plane_height=config.base_height * aspect_ratio,
            zoom_level=0,
            pixel_width=pixel_width,
            pixel_height=pixel_height,
        )


def _format_number(value):
    # Matches default iostream output: 6 significant digits
    return f"{value:g}"


class ViewportController:
    """
    Owns the view, the frame buffer and the CALCULATING/DISPLAYING state.

    Usage:
        controller = ViewportController(config, 800, 450)
        controller.zoom_in()
        controller.recenter(400, 200)

        # Once per frame:
        controller.refresh()
        snapshot = controller.snapshot()
    """

    def __init__(self, config=None, pixel_width=None, pixel_height=None):
        """
        Args:
            config: ExplorerConfig (default settings if None)
            pixel_width, pixel_height: Grid size; falls back to the
                config's pixel_width/pixel_height
        """
        self.config = config or ExplorerConfig()
        if pixel_width is None:
            pixel_width = self.config.pixel_width
        if pixel_height is None:
            pixel_height = self.config.pixel_height
        if pixel_width is None or pixel_height is None:
            raise ConfigError("Pixel dimensions are required")

        self._viewport = ViewportState.initial(self.config, pixel_width, pixel_height)
        self._state = RenderState.CALCULATING
        self._cursor = (0.0, 0.0)
        self.frame = FrameBuffer(pixel_width, pixel_height)
        self.refresh_count = 0

    @property
    def viewport(self):
        return self._viewport

    @property
    def state(self):
        return self._state

    @property
    def needs_refresh(self):
        return self._state is RenderState.CALCULATING

    @property
    def cursor(self):
        return self._cursor

    def _plane_size(self, zoom_level, aspect_ratio):
        scale = self.config.zoom_factor ** zoom_level
        return (self.config.base_width * scale,
                self.config.base_height * aspect_ratio * scale)

    def _set_zoom(self, zoom_level):
        vp = self._viewport
        plane_width, plane_height = self._plane_size(zoom_level, vp.aspect_ratio)
        self._viewport = replace(
            vp, zoom_level=zoom_level,
            plane_width=plane_width, plane_height=plane_height
        )
        self._state = RenderState.CALCULATING

    def zoom_in(self):
        self._set_zoom(self._viewport.zoom_level + 1)

    def zoom_out(self):
        # No lower bound: zoom_level may go negative
        self._set_zoom(self._viewport.zoom_level - 1)

    def recenter(self, px, py):
        """Move the view center to the plane point under pixel (px, py)."""
        center_x, center_y = pixel_to_plane(px, py, self._viewport)
        self._viewport = replace(self._viewport, center_x=center_x, center_y=center_y)
        self._state = RenderState.CALCULATING

    def set_cursor(self, px, py):
        """Track the pointer in plane coordinates. Does not trigger a refresh."""
        self._cursor = pixel_to_plane(px, py, self._viewport)

    def resize(self, pixel_width, pixel_height):
        """
        Change the pixel grid, keeping center and zoom level.

        Library-only: the explorer window is fixed-size, so nothing in the
        app calls this. Embedders that resize their surface call it
        directly.
        """
        if pixel_width <= 0 or pixel_height <= 0:
            raise ConfigError(
                f"Pixel dimensions must be positive, got {pixel_width}x{pixel_height}"
            )
        aspect_ratio = pixel_height / pixel_width
        plane_width, plane_height = self._plane_size(self._viewport.zoom_level, aspect_ratio)
        self._viewport = replace(
            self._viewport,
            pixel_width=pixel_width, pixel_height=pixel_height,
            plane_width=plane_width, plane_height=plane_height,
        )
        self.frame.resize(pixel_width, pixel_height)
        self._state = RenderState.CALCULATING

    def refresh(self):
        """
        Recompute the frame if the view changed since the last refresh.

        Returns:
            True if the frame was recomputed, False if nothing was done
        """
        if self._state is RenderState.DISPLAYING:
            return False

        vp = self._viewport
        start = time.perf_counter()
        compute_frame(
            vp.pixel_width, vp.pixel_height,
            vp.center_x, vp.center_y, vp.plane_width, vp.plane_height,
            self.config.max_iterations, self.config.escape_threshold,
            self.config.color_band_count,
            self.frame.positions, self.frame.colors
        )
        self.refresh_count += 1
        self._state = RenderState.DISPLAYING

        logger.debug(
            "Refresh #%d: %dx%d at zoom %d, center (%g, %g) in %.1f ms",
            self.refresh_count, vp.pixel_width, vp.pixel_height, vp.zoom_level,
            vp.center_x, vp.center_y, (time.perf_counter() - start) * 1000
        )
        return True

    def snapshot(self):
        return self.frame.snapshot(generation=self.refresh_count)

    def hud_lines(self):
        """Overlay text: label, center, cursor and the mouse controls."""
        vp = self._viewport
        cx, cy = self._cursor
        return [
            self.config.hud_label,
            f"Center: ({_format_number(vp.center_x)}, {_format_number(vp.center_y)})",
            f"Cursor: ({_format_number(cx)}, {_format_number(cy)})",
            "Left click to zoom in",
            "Right click to zoom out",
        ]
