"""CLI commands for musickit."""

from .audio import audio_group
from .keys import keys
from .play import play

__all__ = ["audio_group", "keys", "play"]
