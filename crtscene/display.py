"""Tracking of the window's framebuffer size."""

from __future__ import annotations

import functools


class DisplayManager:
    """Holds the current display size and whether it changed since the last frame."""

    WIDTH = 1280
    HEIGHT = 720

    def __init__(self) -> None:
        self.width = 0
        self.height = 0
        self.is_window_resized = False

    def initialise(self) -> None:
        """Reset the size to the default window size."""
        self.width = self.WIDTH
        self.height = self.HEIGHT

    def update(self, width: int, height: int) -> None:
        """Record a new size and mark the window as resized."""
        self.width = int(width)
        self.height = int(height)
        self.is_window_resized = True

    def set_is_window_resized(self, is_window_resized: bool) -> None:
        """Set or clear the resized flag."""
        self.is_window_resized = bool(is_window_resized)


@functools.lru_cache(maxsize=1)
def get_display_manager() -> DisplayManager:
    """Return the shared display manager."""
    return DisplayManager()