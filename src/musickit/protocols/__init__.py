"""Protocol definitions for board events and observers.

- Events: mapping, editor and sequence events
- Observers: protocols for components that react to these events
- PadVisual: the visual handle the core drives for each pad
"""

from .events import EditorEvent, MappingEvent, SequenceEvent
from .observers import (
    EditorObserver,
    MappingObserver,
    PadVisual,
    SequenceObserver,
    StatusObserver,
)

__all__ = [
    # Events
    "EditorEvent",
    "MappingEvent",
    "SequenceEvent",
    # Observers
    "EditorObserver",
    "MappingObserver",
    "PadVisual",
    "SequenceObserver",
    "StatusObserver",
]
