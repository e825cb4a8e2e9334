"""Sound registry: the fixed set of pads and their trigger letters."""

import logging
from collections.abc import Iterable

from musickit.exceptions import DuplicateLetterError
from musickit.models import AppConfig, SoundPad
from musickit.protocols import MappingEvent, MappingObserver, PadVisual
from musickit.utils import ObserverManager

logger = logging.getLogger(__name__)


class SoundRegistry:
    """
    Owns the board's pads and the letter -> pad index.

    The pad list is fixed for the lifetime of the process. `set_letter` is
    the only mutator: it updates the pad and the index together, so readers
    never observe a letter that resolves to the wrong pad. Uniqueness is
    the mapping editor's job; the registry only refuses duplicates at
    construction time.

    Visual handles (pad widgets) are bound per note id and looked up by
    letter through `get_element`.
    """

    def __init__(self, pads: Iterable[SoundPad]):
        """
        Initialize the registry.

        Args:
            pads: Pads in display order

        Raises:
            DuplicateLetterError: If two pads share a letter
        """
        self._pads: list[SoundPad] = list(pads)
        self._by_letter: dict[str, SoundPad] = {}
        self._by_note: dict[str, SoundPad] = {}
        self._visuals: dict[str, PadVisual] = {}
        self._observers = ObserverManager[MappingObserver](observer_type_name="mapping")

        for pad in self._pads:
            owner = self._by_letter.get(pad.letter)
            if owner is not None:
                raise DuplicateLetterError(pad.letter, owner.note_id)
            self._by_letter[pad.letter] = pad
            self._by_note[pad.note_id] = pad

        logger.info(f"SoundRegistry initialized with {len(self._pads)} pads")

    @classmethod
    def from_config(cls, config: AppConfig) -> "SoundRegistry":
        """Create the pads from the configured sounds paired with the default keys."""
        return cls(
            SoundPad(note_id=sound.note_id, source=config.sound_path(sound), letter=key)
            for sound, key in zip(config.sounds, config.default_keys)
        )

    # =================================================================
    # Event System
    # =================================================================

    def register_observer(self, observer: MappingObserver) -> None:
        self._observers.register(observer)

    def unregister_observer(self, observer: MappingObserver) -> None:
        self._observers.unregister(observer)

    # =================================================================
    # Lookups
    # =================================================================

    @property
    def pads(self) -> list[SoundPad]:
        """Pads in display order (copy of the list, pads are shared)."""
        return list(self._pads)

    def __len__(self) -> int:
        return len(self._pads)

    def letters(self) -> list[str]:
        """Current trigger letters in display order."""
        return [pad.letter for pad in self._pads]

    def get_by_letter(self, letter: str) -> SoundPad | None:
        return self._by_letter.get(letter)

    def get_by_note(self, note_id: str) -> SoundPad | None:
        return self._by_note.get(note_id)

    def is_letter_taken(self, letter: str, exclude: SoundPad | None = None) -> bool:
        """Check whether a pad other than `exclude` holds `letter`."""
        owner = self._by_letter.get(letter)
        return owner is not None and owner is not exclude

    def mapping_summary(self) -> tuple[str, str]:
        """Space-joined letters and space-joined note ids, in display order."""
        return (
            " ".join(pad.letter for pad in self._pads),
            " ".join(pad.note_id for pad in self._pads),
        )

    # =================================================================
    # Visual Handles
    # =================================================================

    def bind_visual(self, note_id: str, visual: PadVisual) -> None:
        """
        Bind the visual handle of a pad.

        Raises:
            KeyError: If no pad has this note id
        """
        if note_id not in self._by_note:
            raise KeyError(f"Unknown note id: {note_id}")
        self._visuals[note_id] = visual

    def get_visual(self, pad: SoundPad) -> PadVisual | None:
        return self._visuals.get(pad.note_id)

    def get_element(self, letter: str) -> PadVisual | None:
        """Visual handle of the pad currently bound to `letter`, if any."""
        pad = self._by_letter.get(letter)
        if pad is None:
            return None
        return self._visuals.get(pad.note_id)

    # =================================================================
    # Mutation
    # =================================================================

    def set_letter(self, pad: SoundPad, new_letter: str) -> None:
        """
        Rebind a pad to a new trigger letter.

        The pad and the index are updated together, then the pad's label is
        refreshed and mapping observers are notified.

        Args:
            pad: A pad owned by this registry
            new_letter: The new letter (A-Z); uniqueness is the caller's responsibility

        Raises:
            KeyError: If the pad is not owned by this registry
            pydantic.ValidationError: If new_letter is not a single A-Z letter
        """
        if self._by_note.get(pad.note_id) is not pad:
            raise KeyError(f"Pad {pad.note_id} is not part of this board")

        old_letter = pad.letter
        if new_letter == old_letter:
            return

        pad.letter = new_letter
        if self._by_letter.get(old_letter) is pad:
            del self._by_letter[old_letter]
        self._by_letter[new_letter] = pad

        self.update_key_visual(pad)
        logger.info(f"Key for {pad.note_id} changed from {old_letter} to {new_letter}")
        self._observers.notify("on_mapping_event", MappingEvent.LETTER_CHANGED, pad, old_letter)

    def update_key_visual(self, pad: SoundPad) -> None:
        """Refresh the letter label shown on a pad."""
        visual = self._visuals.get(pad.note_id)
        if visual is not None:
            visual.show_letter(pad.letter)
