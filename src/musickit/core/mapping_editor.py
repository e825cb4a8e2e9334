"""Mapping editor: the state machine for remapping one pad's trigger letter."""

import logging
from dataclasses import dataclass
from enum import Enum

from musickit.exceptions import DuplicateLetterError, InvalidLetterError, MappingError
from musickit.models import SoundPad
from musickit.protocols import EditorEvent, EditorObserver, PadVisual
from musickit.utils import ObserverManager

from .board_state import BoardState
from .letters import extract_letter, normalize_letter
from .registry import SoundRegistry

logger = logging.getLogger(__name__)


class EditorState(Enum):
    """Control states of the mapping editor."""

    CLOSED = "closed"
    OPEN = "open"


@dataclass
class EditSession:
    """The single open edit: target pad, its visual and the pending letter."""

    pad: SoundPad
    visual: PadVisual | None
    pending: str
    error: bool = False


class MappingEditor:
    """
    Remaps one pad at a time while keeping letters unique.

    Transitions:
        CLOSED --open_edit--> OPEN          (ignored while a sequence runs)
        OPEN   --type_char--> OPEN          (clears the error flag)
        OPEN   --confirm----> CLOSED        (valid and unique letter: committed)
        OPEN   --confirm----> OPEN + error  (invalid or duplicate: retry)
        OPEN   --cancel/dismiss--> CLOSED   (nothing committed)

    The error flag is a visual sub-state of OPEN; input keeps flowing
    while it is set. Each rejected confirm emits EditorEvent.ERROR so the
    UI can replay its pulse even if the flag was already set.
    """

    def __init__(self, registry: SoundRegistry, state: BoardState):
        self.registry = registry
        self.state = state
        self._session: EditSession | None = None
        self._last_error: MappingError | None = None
        self._observers = ObserverManager[EditorObserver](observer_type_name="editor")

    def register_observer(self, observer: EditorObserver) -> None:
        self._observers.register(observer)

    def unregister_observer(self, observer: EditorObserver) -> None:
        self._observers.unregister(observer)

    # =================================================================
    # State
    # =================================================================

    @property
    def session(self) -> EditSession | None:
        return self._session

    @property
    def editor_state(self) -> EditorState:
        return EditorState.OPEN if self._session else EditorState.CLOSED

    @property
    def is_open(self) -> bool:
        return self._session is not None

    @property
    def has_error(self) -> bool:
        return self._session is not None and self._session.error

    @property
    def last_error(self) -> MappingError | None:
        """Reason of the most recent rejected confirm."""
        return self._last_error

    # =================================================================
    # Transitions
    # =================================================================

    def open_edit(self, pad: SoundPad) -> bool:
        """
        Open an edit session for a pad.

        Opening another pad's editor while one is open cancels the current
        session first, then opens the new one.

        Returns:
            True if a session is open for `pad` afterwards
        """
        if self.state.busy:
            logger.debug(f"Edit of {pad.note_id} ignored: sequence running")
            return False

        if self._session is not None:
            if self._session.pad is pad:
                return True
            self.cancel()

        self._session = EditSession(pad=pad, visual=self.registry.get_visual(pad), pending=pad.letter)
        self._last_error = None
        logger.debug(f"Editing key for {pad.note_id} (currently {pad.letter})")
        self._notify(EditorEvent.OPENED)
        return True

    def type_char(self, raw: str) -> str:
        """
        Replace the pending letter with the first letter of `raw`.

        Returns:
            The new pending letter ("" if `raw` had no letter, or if closed)
        """
        if self._session is None:
            return ""
        self._session.pending = extract_letter(raw)
        self._session.error = False
        self._notify(EditorEvent.INPUT_CHANGED)
        return self._session.pending

    def confirm(self) -> bool:
        """
        Commit the pending letter.

        Returns:
            True if committed (or unchanged) and the session closed, False if
            the letter was rejected and the session stays open in error
        """
        session = self._session
        if session is None:
            return False

        try:
            letter = self._validate(session.pad, session.pending)
        except MappingError as e:
            logger.info(e.technical_message)
            session.error = True
            self._last_error = e
            self._notify(EditorEvent.ERROR, error=e)
            return False

        self.registry.set_letter(session.pad, letter)
        self.state.clear_held_keys()
        self._close()
        return True

    def cancel(self) -> None:
        """Discard the pending letter and close without changes."""
        if self._session is None:
            return
        logger.debug(f"Edit of {self._session.pad.note_id} cancelled")
        self._close()

    def dismiss(self) -> None:
        """Close because the user interacted outside the editor (same as cancel)."""
        self.cancel()

    # =================================================================
    # Internals
    # =================================================================

    def _validate(self, pad: SoundPad, pending: str) -> str:
        """
        Raises:
            InvalidLetterError: pending is not a single letter
            DuplicateLetterError: another pad already holds the letter
        """
        letter = normalize_letter(pending)
        if not letter:
            raise InvalidLetterError(pending)
        if self.registry.is_letter_taken(letter, exclude=pad):
            owner = self.registry.get_by_letter(letter)
            raise DuplicateLetterError(letter, owner.note_id)
        return letter

    def _close(self) -> None:
        self._session = None
        self._notify(EditorEvent.CLOSED)

    def _notify(self, event: EditorEvent, error: MappingError | None = None) -> None:
        session = self._session
        pad = session.pad if session else None
        pending = session.pending if session else ""
        self._observers.notify("on_editor_event", event, pad, pending, error)
