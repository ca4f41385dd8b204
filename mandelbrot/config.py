"""
Configuration for the Mandelbrot explorer.

All tunable constants live in one immutable ExplorerConfig value that is
handed to the ViewportController (and the pygame front end) at
construction. Defaults can be overridden from a settings.json file and
from command-line flags.
"""

import json
import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Optional, Tuple

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = os.path.join(os.path.dirname(__file__), 'settings.json')

# Number of gradient segments defined in colormaps.py
MAX_COLOR_BANDS = 5


@dataclass(frozen=True)
class ExplorerConfig:
    """Immutable explorer settings, validated on creation."""

    # Fractal / viewport constants
    max_iterations: int = 64
    base_width: float = 4.0
    base_height: float = 4.0
    zoom_factor: float = 0.5
    escape_threshold: float = 2.0
    color_band_count: int = 5
    window_title: str = "Mandelbrot Set Visualizer"
    hud_label: str = "Mandelbrot Set"

    # Presentation (None = half of the desktop resolution)
    pixel_width: Optional[int] = None
    pixel_height: Optional[int] = None
    font_file: Optional[str] = None
    font_size: int = 16
    text_color: Tuple[int, int, int] = (255, 255, 255)
    music_file: Optional[str] = "music.wav"
    music_volume: float = 0.5
    fps: int = 60

    def __post_init__(self):
        if self.max_iterations <= 0:
            raise ConfigError(f"max_iterations must be positive, got {self.max_iterations}")
        if not 1 <= self.color_band_count <= MAX_COLOR_BANDS:
            raise ConfigError(
                f"color_band_count must be between 1 and {MAX_COLOR_BANDS}, "
                f"got {self.color_band_count}"
            )
        if self.max_iterations < self.color_band_count:
            # band size would be zero in the color mapper
            raise ConfigError(
                f"max_iterations ({self.max_iterations}) must be at least "
                f"color_band_count ({self.color_band_count})"
            )
        if self.base_width <= 0 or self.base_height <= 0:
            raise ConfigError(
                f"base extents must be positive, got {self.base_width}x{self.base_height}"
            )
        if not 0 < self.zoom_factor < 1:
            raise ConfigError(f"zoom_factor must be in (0, 1), got {self.zoom_factor}")
        if self.escape_threshold <= 0:
            raise ConfigError(f"escape_threshold must be positive, got {self.escape_threshold}")
        for name in ('pixel_width', 'pixel_height'):
            value = getattr(self, name)
            if value is not None and value <= 0:
                raise ConfigError(f"{name} must be positive, got {value}")
        if self.font_size <= 0:
            raise ConfigError(f"font_size must be positive, got {self.font_size}")
        if len(self.text_color) != 3 or any(not 0 <= v <= 255 for v in self.text_color):
            raise ConfigError(f"text_color must be an RGB triple, got {self.text_color}")
        if not 0.0 <= self.music_volume <= 1.0:
            raise ConfigError(f"music_volume must be in [0, 1], got {self.music_volume}")
        if self.fps <= 0:
            raise ConfigError(f"fps must be positive, got {self.fps}")

    def with_overrides(self, **overrides):
        """Return a copy with the given (non-None) settings replaced."""
        _check_keys(overrides)
        changes = {k: v for k, v in overrides.items() if v is not None}
        if 'text_color' in changes:
            changes['text_color'] = tuple(changes['text_color'])
        return replace(self, **changes)


def _check_keys(settings):
    known = {f.name for f in fields(ExplorerConfig)}
    unknown = sorted(set(settings) - known)
    if unknown:
        raise ConfigError(f"Unknown setting(s): {', '.join(unknown)}")


def load_settings(path=None):
    """
    Load raw settings from a JSON file.

    Args:
        path: Settings file (default: settings.json next to this module)

    Returns:
        dict of settings, or None if the file is missing or malformed
    """
    settings_path = path or DEFAULT_SETTINGS_PATH
    try:
        with open(settings_path, 'r') as f:
            settings = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        logger.warning("Could not load %s: %s", settings_path, e)
        return None
    if not isinstance(settings, dict):
        logger.warning("Ignoring %s: top level must be an object", settings_path)
        return None
    return settings


def load_config(path=None, **overrides):
    """
    Build an ExplorerConfig from a settings file plus explicit overrides.

    Unknown keys in the file are logged and skipped; unknown override
    keys raise ConfigError. Override values of None are ignored so
    argparse results can be passed straight through.
    """
    config = ExplorerConfig()

    settings = load_settings(path)
    if settings:
        known = {f.name for f in fields(ExplorerConfig)}
        for key in sorted(set(settings) - known):
            logger.warning("Ignoring unknown setting '%s'", key)
        config = config.with_overrides(**{k: v for k, v in settings.items() if k in known})

    return config.with_overrides(**overrides)
