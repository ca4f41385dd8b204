import os

# Headless pygame for font/audio/event tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from mandelbrot.config import ExplorerConfig
from mandelbrot.viewport import ViewportController


@pytest.fixture
def config():
    return ExplorerConfig()


@pytest.fixture
def small_controller():
    """4x4 grid with a small iteration cap, default extents and center."""
    return ViewportController(ExplorerConfig(max_iterations=10), 4, 4)
