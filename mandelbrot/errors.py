"""
Exception types raised by the Mandelbrot explorer.

Precondition violations (bad configuration, impossible viewport sizes)
raise ConfigError at construction time. Problems loading fonts or
music raise ResourceLoadError.
"""


class ExplorerError(Exception):
    """Base class for all explorer errors."""


class ConfigError(ExplorerError, ValueError):
    """Invalid configuration or viewport parameters."""


class ResourceLoadError(ExplorerError):
    """A font or audio resource could not be loaded."""

    def __init__(self, kind, path, reason):
        self.kind = kind
        self.path = path
        self.reason = reason
        super().__init__(f"Error loading {kind} '{path}': {reason}")
