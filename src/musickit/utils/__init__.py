"""Generic utility modules for musickit.

- observer: thread-safe observer list with per-observer error isolation
- persistence: JSON load/save helpers for Pydantic models
"""

from .observer import ObserverManager
from .persistence import PydanticPersistence

__all__ = ["ObserverManager", "PydanticPersistence"]
