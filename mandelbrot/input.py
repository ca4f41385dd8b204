"""
Translate pygame input events into viewport operations.

    Mouse move     -> update the cursor readout
    Left click     -> zoom in, then recenter on the click
    Right click    -> zoom out
    ESC / close    -> quit
"""

import logging

import pygame

logger = logging.getLogger(__name__)

LEFT_BUTTON = 1
RIGHT_BUTTON = 3


class InputController:
    """Routes pygame events to a ViewportController."""

    def __init__(self, controller):
        self.controller = controller
        self.quit_requested = False

    def handle_events(self, events):
        """
        Process a batch of events (e.g. pygame.event.get()).

        Returns:
            False once quitting has been requested, True otherwise
        """
        for event in events:
            self.handle_event(event)
        return not self.quit_requested

    def handle_event(self, event):
        """Process one event. Returns True if the event was recognized."""
        if event.type == pygame.QUIT:
            self.quit_requested = True
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.quit_requested = True
        elif event.type == pygame.MOUSEMOTION:
            self.controller.set_cursor(*event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == LEFT_BUTTON:
            # Order matters: the click is mapped with the already-zoomed extents
            self.controller.zoom_in()
            self.controller.recenter(*event.pos)
            logger.info("Zoom in to level %d around (%g, %g)",
                        self.controller.viewport.zoom_level,
                        self.controller.viewport.center_x,
                        self.controller.viewport.center_y)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == RIGHT_BUTTON:
            self.controller.zoom_out()
            logger.info("Zoom out to level %d", self.controller.viewport.zoom_level)
        else:
            return False
        return True
