"""Model of the sequence text field."""

import logging

from musickit.models import SoundPad
from musickit.protocols import MappingEvent

from .board_state import BoardState
from .letters import filter_sequence, normalize_letter
from .registry import SoundRegistry

logger = logging.getLogger(__name__)

# Max sequence length = SEQUENCE_HEADROOM x number of pads
SEQUENCE_HEADROOM = 2


class SequenceField:
    """
    Holds the typed sequence and its input rules.

    Only letters currently mapped to a pad are accepted, up to
    `max_length` characters. `accepts_insert` is the pre-check a UI runs
    before inserting typed text, so a rejected character never appears in
    the field, even briefly.

    Implements MappingObserver to refresh its rules after a remap. The
    current value is re-filtered too, so letters that lost their pad drop
    out of it.
    """

    def __init__(self, registry: SoundRegistry, state: BoardState):
        self.registry = registry
        self.state = state
        self.value = ""
        self.max_length = self._compute_max_length()

    def _compute_max_length(self) -> int:
        return SEQUENCE_HEADROOM * len(self.registry)

    def allowed_letters(self) -> set[str]:
        return set(self.registry.letters())

    def normalize(self, raw: str) -> str:
        """
        Keep mapped letters only (case folded), in order, repeats allowed,
        truncated to max_length.
        """
        return filter_sequence(raw, self.allowed_letters(), self.max_length)

    def accepts_insert(self, text: str) -> bool:
        """
        Pre-check a single typed insertion before it reaches the field.

        Rejects text that is not exactly one mapped letter, or that would
        push the value past max_length.
        """
        letter = normalize_letter(text)
        if not letter or letter not in self.allowed_letters():
            return False
        return len(self.value) + 1 <= self.max_length

    def set_text(self, raw: str) -> str:
        """Store the normalized form of `raw` and return it."""
        self.value = self.normalize(raw)
        return self.value

    def clear(self) -> None:
        self.value = ""

    @property
    def can_play(self) -> bool:
        """The play control is enabled only with content and while idle."""
        return bool(self.value) and not self.state.busy

    def restrict_pattern(self) -> str:
        """Regex matching any acceptable field content (both cases)."""
        letters = "".join(sorted(self.allowed_letters()))
        return f"[{letters}{letters.lower()}]*"

    # =================================================================
    # MappingObserver Protocol
    # =================================================================

    def on_mapping_event(self, event: MappingEvent, pad: SoundPad, old_letter: str) -> None:
        if event == MappingEvent.LETTER_CHANGED:
            self.max_length = self._compute_max_length()
            self.value = self.normalize(self.value)
            logger.debug(f"Sequence rules refreshed: letters={sorted(self.allowed_letters())}")
