"""
Mandelbrot Set Explorer Package

An interactive Mandelbrot set explorer using Pygame for display and
Numba for JIT-compiled computation.

Quick Start:
    from mandelbrot import run
    run()

Or from command line:
    python -m mandelbrot

Package Structure:
    - compute.py: JIT-compiled plane mapping and escape-time kernels
    - colormaps.py: Five-band iteration-to-color gradient
    - framebuffer.py: Per-pixel (position, color) grid and snapshots
    - viewport.py: Zoom/recenter state machine driving full-frame refreshes
    - config.py: Settings (settings.json + overrides)
    - input.py, display.py, audio.py: Pygame plumbing
    - app.py: Main application and frame loop

Controls:
    - Left click: Zoom in, centered on the click
    - Right click: Zoom out
    - ESC: Quit
"""

from .app import run, ExplorerApp
from .config import ExplorerConfig, load_config
from .viewport import ViewportController, ViewportState, RenderState
from .errors import ExplorerError, ConfigError, ResourceLoadError

__version__ = "1.0.0"
__all__ = [
    "run",
    "ExplorerApp",
    "ExplorerConfig",
    "load_config",
    "ViewportController",
    "ViewportState",
    "RenderState",
    "ExplorerError",
    "ConfigError",
    "ResourceLoadError",
]
