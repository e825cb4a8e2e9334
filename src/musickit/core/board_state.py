"""Process-wide input state shared by the pointer, keyboard and sequence channels."""

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class BoardState:
    """
    Coordinator state injected into every input channel.

    Attributes:
        busy: True only while a sequence is running. Live pointer and
            keyboard activation and editor-open are suppressed while set.
        held_keys: Letters currently held on the keyboard channel.
        pointer_held: note_id -> held flag for the pointer channel. Keyed by
            the pad's immutable note id so the table never owns a pad.
    """

    busy: bool = False
    held_keys: set[str] = field(default_factory=set)
    pointer_held: dict[str, bool] = field(default_factory=dict)

    def clear_held_keys(self) -> None:
        """Forget all held keys (their letters may now mean another pad)."""
        if self.held_keys:
            logger.debug(f"Clearing held keys: {sorted(self.held_keys)}")
        self.held_keys.clear()

    def is_pointer_held(self, note_id: str) -> bool:
        return self.pointer_held.get(note_id, False)
