"""Observer protocol definitions for board events.

This module contains observer protocols for the domain:
- Mapping observers: React to trigger letter changes
- Editor observers: React to the remap editor's state changes
- Sequence observers: React to sequence playback progress
- Status observers: Receive status line text
- Pad visuals: The activate/deactivate toggle and letter label of a pad
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from musickit.exceptions import MappingError
    from musickit.models import SoundPad

from .events import EditorEvent, MappingEvent, SequenceEvent


@runtime_checkable
class MappingObserver(Protocol):
    """
    Observer that receives trigger letter changes from the sound registry.

    Any component caching letter-derived state (held keys, status text,
    sequence field rules) must observe these events.
    """

    def on_mapping_event(self, event: MappingEvent, pad: "SoundPad", old_letter: str) -> None:
        """
        Handle a mapping change.

        Args:
            event: The type of mapping event
            pad: The pad whose letter changed (already updated)
            old_letter: The letter the pad held before the change
        """
        ...


@runtime_checkable
class EditorObserver(Protocol):
    """Observer that receives mapping editor state changes."""

    def on_editor_event(
        self,
        event: EditorEvent,
        pad: "SoundPad | None",
        pending: str,
        error: "MappingError | None" = None,
    ) -> None:
        """
        Handle editor state changes.

        Args:
            event: The type of editor event
            pad: Target pad of the session (None once closed)
            pending: Pending (uncommitted) letter, may be empty
            error: The rejection reason for ERROR events
        """
        ...


@runtime_checkable
class SequenceObserver(Protocol):
    """Observer that receives sequence playback progress."""

    def on_sequence_event(self, event: SequenceEvent, letter: str | None = None) -> None:
        """
        Handle sequence events.

        Args:
            event: The type of sequence event
            letter: Letter of the step for STEP_* events, None otherwise

        Note:
            STARTED and FINISHED bracket every run; UIs should disable the
            play control and the sequence input between them.
        """
        ...


@runtime_checkable
class StatusObserver(Protocol):
    """Observer that receives status line text (the UI announcer)."""

    def on_status(self, text: str) -> None:
        """
        Display a status message.

        Args:
            text: Full replacement text for the status line
        """
        ...


@runtime_checkable
class PadVisual(Protocol):
    """
    Visual handle of a single pad.

    Implemented by the TUI pad widget. The core only toggles the active
    state and the displayed trigger letter.
    """

    def set_active(self, active: bool) -> None:
        """Show or clear the pad's active (sounding) state."""
        ...

    def show_letter(self, letter: str) -> None:
        """Display a new trigger letter on the pad."""
        ...
