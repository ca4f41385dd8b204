"""
Background music playback.

Music is optional: if the mixer or the track can't be loaded the
problem is logged and the explorer runs silently.
"""

import logging

import pygame

from .errors import ResourceLoadError

logger = logging.getLogger(__name__)


def load_music(path, volume=0.5):
    """
    Load a music track into the pygame mixer.

    Raises:
        ResourceLoadError if the mixer can't start or the file can't be read
    """
    try:
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        pygame.mixer.music.load(path)
    except (pygame.error, OSError) as e:
        raise ResourceLoadError("music", path, e) from e
    pygame.mixer.music.set_volume(volume)


def start_music(path, volume=0.5):
    """
    Start looped playback of a track, fire-and-forget.

    Args:
        path: Audio file; None or '' disables music
        volume: Playback volume in [0, 1]

    Returns:
        True if playback started, False otherwise
    """
    if not path:
        logger.info("No music configured")
        return False
    try:
        load_music(path, volume)
    except ResourceLoadError as e:
        logger.warning("%s; continuing without music", e)
        return False

    pygame.mixer.music.play(loops=-1)
    logger.info("Playing %s (volume %.2f)", path, volume)
    return True
