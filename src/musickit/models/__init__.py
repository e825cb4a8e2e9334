"""Data models for the instrument board."""

from .config import DEFAULT_CONFIG_PATH, DEFAULT_KEYS, AppConfig, SoundDef
from .pad import LETTER_PATTERN, SoundPad

__all__ = [
    "AppConfig",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_KEYS",
    "LETTER_PATTERN",
    "SoundDef",
    "SoundPad",
]
