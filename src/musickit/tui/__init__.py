"""Terminal user interface for the board."""

from .app import MusicKitApp

__all__ = ["MusicKitApp"]
