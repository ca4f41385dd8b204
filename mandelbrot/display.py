"""
Pygame presentation of the frame buffer and HUD text.

The renderer only reads from the ViewportController: it pulls a frame
snapshot and the HUD lines each tick and blits them to the screen.
"""

import logging

import pygame

from .errors import ResourceLoadError

logger = logging.getLogger(__name__)

HUD_MARGIN = 8
HUD_LINE_SPACING = 2


def load_font(path, size):
    """
    Load the HUD font.

    Args:
        path: TrueType font file, or None for pygame's bundled default
        size: Point size

    Raises:
        ResourceLoadError if the font can't be loaded; the explorer
        can't run without it
    """
    if not pygame.font.get_init():
        pygame.font.init()
    try:
        font = pygame.font.Font(path, size)
    except (pygame.error, OSError) as e:
        raise ResourceLoadError("font", path, e) from e
    logger.info("Loaded font %s at size %d", path or "<default>", size)
    return font


class FrameRenderer:
    """
    Draws frame snapshots and overlay text onto a pygame surface.

    The pygame Surface for the frame is rebuilt only when a snapshot
    with a new generation arrives.
    """

    def __init__(self, font, text_color=(255, 255, 255)):
        self.font = font
        self.text_color = text_color
        self._surface = None
        self._generation = None

    def frame_surface(self, snapshot):
        """Get (and cache) the Surface for a snapshot."""
        if self._surface is None or snapshot.generation != self._generation:
            self._surface = pygame.surfarray.make_surface(
                snapshot.as_rgb().swapaxes(0, 1).copy()
            )
            self._generation = snapshot.generation
        return self._surface

    def draw(self, screen, snapshot, hud_lines):
        """Draw one frame: fractal first, text on top."""
        screen.fill((0, 0, 0))
        screen.blit(self.frame_surface(snapshot), (0, 0))

        y = HUD_MARGIN
        for line in hud_lines:
            text_surface = self.font.render(line, True, self.text_color)
            screen.blit(text_surface, (HUD_MARGIN, y))
            y += text_surface.get_height() + HUD_LINE_SPACING
