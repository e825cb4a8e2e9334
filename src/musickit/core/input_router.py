"""Input router for the pointer and keyboard channels."""

import logging

from musickit.models import SoundPad
from musickit.protocols import MappingEvent

from .board_state import BoardState
from .letters import normalize_letter
from .playback import PlaybackPort
from .registry import SoundRegistry

logger = logging.getLogger(__name__)


class InputRouter:
    """
    Turns pointer and key events into pad activations.

    Pointer and keyboard holds are tracked separately in the shared
    BoardState, but both are gated by the same busy flag. Releases are
    never gated, so a pad can always be deactivated.

    Implements MappingObserver: any committed mapping change clears the
    held keys, since a held letter may now resolve to another pad or none.
    """

    def __init__(self, registry: SoundRegistry, playback: PlaybackPort, state: BoardState):
        self.registry = registry
        self.playback = playback
        self.state = state

    # =================================================================
    # Pointer channel
    # =================================================================

    def pointer_down(self, pad: SoundPad) -> bool:
        """
        Handle a pointer press on a pad.

        Returns:
            True if the pad was activated and triggered
        """
        if self.state.busy:
            return False
        if self.state.is_pointer_held(pad.note_id):
            # Duplicate press without a release in between
            return False

        self.state.pointer_held[pad.note_id] = True
        self._set_active(pad, True)
        self.playback.trigger(pad)
        logger.debug(f"Pointer down: {pad}")
        return True

    def pointer_up(self, pad: SoundPad) -> None:
        """Handle pointer release (or the pointer leaving the pad)."""
        self.state.pointer_held[pad.note_id] = False
        self._set_active(pad, False)

    pointer_leave = pointer_up

    # =================================================================
    # Keyboard channel
    # =================================================================

    def key_down(self, raw: str) -> bool:
        """
        Handle a key press.

        Args:
            raw: Key text; anything but a single letter is ignored

        Returns:
            True if a pad was activated and triggered. Repeats of a held
            key return False, which suppresses OS key-repeat.
        """
        if self.state.busy:
            return False

        letter = normalize_letter(raw)
        if not letter or letter in self.state.held_keys:
            return False

        pad = self.registry.get_by_letter(letter)
        if pad is None:
            return False

        self.state.held_keys.add(letter)
        self._set_active(pad, True)
        self.playback.trigger(pad)
        logger.debug(f"Key down: {letter} -> {pad.note_id}")
        return True

    def key_up(self, raw: str) -> None:
        """Handle a key release, regardless of the busy flag."""
        letter = normalize_letter(raw)
        if not letter:
            return
        self.state.held_keys.discard(letter)
        visual = self.registry.get_element(letter)
        if visual is not None:
            visual.set_active(False)

    # =================================================================
    # MappingObserver Protocol
    # =================================================================

    def on_mapping_event(self, event: MappingEvent, pad: SoundPad, old_letter: str) -> None:
        if event != MappingEvent.LETTER_CHANGED:
            return
        # key_up can no longer find this pad through its old letter
        if old_letter in self.state.held_keys and not self.state.is_pointer_held(pad.note_id):
            self._set_active(pad, False)
        self.state.clear_held_keys()

    def _set_active(self, pad: SoundPad, active: bool) -> None:
        visual = self.registry.get_visual(pad)
        if visual is not None:
            visual.set_active(active)
