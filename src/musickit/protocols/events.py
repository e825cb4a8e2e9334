"""Domain events for observer pattern.

This module defines events that can occur on the board:
- Mapping events: a pad's trigger letter changed
- Editor events: the remap editor opened, changed, rejected input or closed
- Sequence events: a programmed sequence started, stepped or finished
"""

from enum import Enum


class MappingEvent(Enum):
    """Events from the sound registry."""

    LETTER_CHANGED = "letter_changed"  # A pad's trigger letter was committed


class EditorEvent(Enum):
    """
    Events from the mapping editor.

    ERROR is a visual sub-state of an open session, not a separate state:
    the session stays open and keeps accepting input.
    """

    OPENED = "opened"                # Edit session opened for a pad
    INPUT_CHANGED = "input_changed"  # Pending letter replaced
    ERROR = "error"                  # Confirm rejected (invalid or duplicate letter)
    CLOSED = "closed"                # Session committed, cancelled or dismissed


class SequenceEvent(Enum):
    """Events from the sequence runner."""

    STARTED = "started"              # Run began; live input is suppressed
    STEP_STARTED = "step_started"    # Pad activated for one step
    STEP_FINISHED = "step_finished"  # Step window elapsed, pad deactivated
    STEP_SKIPPED = "step_skipped"    # Letter no longer mapped at run time
    FINISHED = "finished"            # Run ended (always fired, even on failure)
