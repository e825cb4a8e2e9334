"""Service keeping the board widgets in sync with the board logic."""

import logging
from typing import TYPE_CHECKING

from musickit.exceptions import MappingError
from musickit.models import SoundPad
from musickit.protocols import EditorEvent, MappingEvent, SequenceEvent

from musickit.tui.widgets import EditorBar, SequenceBar, StatusLine

if TYPE_CHECKING:
    from musickit.tui.app import MusicKitApp

logger = logging.getLogger(__name__)


class BoardViewService:
    """
    Updates the TUI from board events.

    Implements multiple observer protocols:
    - MappingObserver: refresh the sequence field rules after a remap
    - EditorObserver: show, update, pulse and hide the editor bar
    - SequenceObserver: lock the sequence controls while a run is active
    - StatusObserver: show announcer text on the status line

    Pad activation and labels do not pass through here: pad widgets are
    bound to the registry as visual handles.
    """

    def __init__(self, app: "MusicKitApp"):
        self.app = app
        logger.info("BoardViewService initialized")

    # =================================================================
    # MappingObserver Protocol
    # =================================================================

    def on_mapping_event(self, event: MappingEvent, pad: SoundPad, old_letter: str) -> None:
        if event == MappingEvent.LETTER_CHANGED:
            self.app.query_one(SequenceBar).refresh_rules()

    # =================================================================
    # EditorObserver Protocol
    # =================================================================

    def on_editor_event(
        self,
        event: EditorEvent,
        pad: SoundPad | None,
        pending: str,
        error: MappingError | None = None,
    ) -> None:
        bar = self.app.query_one(EditorBar)

        if event == EditorEvent.OPENED and pad is not None:
            bar.open(pad.note_id, pending)
        elif event == EditorEvent.INPUT_CHANGED:
            bar.show_pending(pending)
        elif event == EditorEvent.ERROR:
            bar.show_error()
            if error is not None:
                self.app.notify(error.user_message, severity="warning", timeout=3)
        elif event == EditorEvent.CLOSED:
            bar.close()
            # Focus goes back to the board so letter keys play again
            self.app.set_focus(None)

    # =================================================================
    # SequenceObserver Protocol
    # =================================================================

    def on_sequence_event(self, event: SequenceEvent, letter: str | None = None) -> None:
        if event == SequenceEvent.STARTED:
            self.app.query_one(SequenceBar).set_busy(True)
            self.app.screen.add_class("busy")
        elif event == SequenceEvent.FINISHED:
            self.app.query_one(SequenceBar).set_busy(False)
            self.app.screen.remove_class("busy")

    # =================================================================
    # StatusObserver Protocol
    # =================================================================

    def on_status(self, text: str) -> None:
        self.app.query_one(StatusLine).show(text)
