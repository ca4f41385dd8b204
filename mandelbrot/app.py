"""
Main application module for the Mandelbrot explorer.

Contains the ExplorerApp class which handles:
- Window setup and the frame loop
- Startup resources (font is required, music is optional)
- Wiring pygame input to the ViewportController
- Presenting the frame buffer and HUD
"""

import logging

import pygame

from .audio import start_music
from .compute import warmup_jit
from .config import ExplorerConfig
from .display import FrameRenderer, load_font
from .input import InputController
from .viewport import ViewportController

logger = logging.getLogger(__name__)


class ExplorerApp:
    """
    Main application class for the Mandelbrot explorer.

    Handles the pygame window, event loop, and coordinates between the
    viewport controller, the input controller and the renderer.
    """

    def __init__(self, config=None):
        """
        Initialize the application.

        Args:
            config: ExplorerConfig (default settings if None)
        """
        self.config = config or ExplorerConfig()

        # Pygame state (initialized in run())
        self.screen = None
        self.clock = None

        # Components
        self.controller = None
        self.input = None
        self.renderer = None

        # Latest frame handed to the renderer
        self.snapshot = None

        self.running = False

    def run(self):
        """Run the application main loop."""
        self._init_pygame()
        try:
            self._init_components()

            self.running = True
            while self.running:
                self.running = self.input.handle_events(pygame.event.get())
                if self.controller.refresh():
                    self.snapshot = self.controller.snapshot()
                self._draw()
                self.clock.tick(self.config.fps)
        finally:
            pygame.quit()

    def _window_size(self):
        """Configured size, or half of the desktop resolution."""
        width, height = self.config.pixel_width, self.config.pixel_height
        if width is None or height is None:
            info = pygame.display.Info()
            width = width or info.current_w // 2
            height = height or info.current_h // 2
        return width, height

    def _init_pygame(self):
        """Initialize pygame and create window."""
        pygame.init()
        width, height = self._window_size()
        logger.info("Opening %dx%d window", width, height)
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(self.config.window_title)
        self.clock = pygame.time.Clock()

    def _init_components(self):
        """Load resources and build the controllers."""
        # Fatal if missing: ResourceLoadError propagates to the caller
        font = load_font(self.config.font_file, self.config.font_size)
        start_music(self.config.music_file, self.config.music_volume)

        width, height = self.screen.get_size()
        self.controller = ViewportController(self.config, width, height)
        self.input = InputController(self.controller)
        self.renderer = FrameRenderer(font, self.config.text_color)

        pygame.display.set_caption("Compiling (first run only)...")
        warmup_jit(self.config.max_iterations, self.config.color_band_count)
        pygame.display.set_caption(self.config.window_title)

    def _draw(self):
        """Draw the current frame."""
        self.renderer.draw(
            self.screen, self.snapshot, self.controller.hud_lines()
        )
        pygame.display.flip()


def run(config=None):
    """
    Run the Mandelbrot explorer.

    Args:
        config: ExplorerConfig (default settings if None)
    """
    app = ExplorerApp(config)
    try:
        app.run()
    except KeyboardInterrupt:
        logger.info("Interrupted")
