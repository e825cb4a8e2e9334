"""Textual board for the Virtual Music Kit."""

import logging
from functools import partial

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.timer import Timer
from textual.widgets import Footer, Header, Static

from musickit.core import InstrumentBoard, letter_from_key

from .services import BoardViewService
from .widgets import EditorBar, PadWidget, SequenceBar, StatusLine

logger = logging.getLogger(__name__)

DEFAULT_KEY_RELEASE_MS = 600


class MusicKitApp(App):
    """
    Textual UI for an InstrumentBoard.

    This is a pure UI layer: pointer, key, editor and sequence input are
    forwarded to the board's components, and a BoardViewService observes
    them to update the widgets.

    Terminals report key presses (and auto-repeats) but never releases,
    so a key counts as released once no event for it has arrived for
    `key_release_ms`. Auto-repeat keeps re-arming the timer while the key
    is held.
    """

    TITLE = "Virtual Music Kit — Piano"

    CSS = """
    #board {
        height: 1fr;
        padding: 1;
    }

    Screen.busy #board {
        opacity: 85%;
    }

    #copyright {
        height: 1;
        content-align: center middle;
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(self, board: InstrumentBoard, key_release_ms: int = DEFAULT_KEY_RELEASE_MS):
        """
        Initialize the Textual UI.

        Args:
            board: The board to drive (its output is already started)
            key_release_ms: Idle time before a key counts as released
        """
        super().__init__()
        self.board = board
        self.key_release_ms = key_release_ms
        self.board_view = BoardViewService(self)
        self._release_timers: dict[str, Timer] = {}
        logger.info("MusicKitApp created")

    # =================================================================
    # Textual Lifecycle
    # =================================================================

    def compose(self) -> ComposeResult:
        yield Header()
        yield StatusLine()
        yield EditorBar()
        with Horizontal(id="board"):
            for pad in self.board.registry.pads:
                yield PadWidget(pad)
        yield SequenceBar(self.board.field)
        yield Static("© Virtual Music Kit", id="copyright")
        yield Footer()

    def on_mount(self) -> None:
        """Bind pad widgets as visual handles and register the view service."""
        for widget in self.query(PadWidget):
            self.board.registry.bind_visual(widget.note_id, widget)

        self.board.registry.register_observer(self.board_view)
        self.board.editor.register_observer(self.board_view)
        self.board.runner.register_observer(self.board_view)
        self.board.announcer.register_observer(self.board_view)

        self.board.announcer.refresh()
        logger.info("TUI mounted")

    def on_unmount(self) -> None:
        for timer in self._release_timers.values():
            timer.stop()
        self._release_timers.clear()

        self.board.registry.unregister_observer(self.board_view)
        self.board.editor.unregister_observer(self.board_view)
        self.board.runner.unregister_observer(self.board_view)
        self.board.announcer.unregister_observer(self.board_view)
        logger.info("TUI unmounted")

    # =================================================================
    # Keyboard channel
    # =================================================================

    def on_key(self, event: events.Key) -> None:
        """Letter keys that no focused widget consumed play the board."""
        letter = letter_from_key(event.key, event.character)
        if not letter:
            return

        self.board.router.key_down(letter)
        if letter in self.board.state.held_keys:
            self._arm_release(letter)

    def _arm_release(self, letter: str) -> None:
        timer = self._release_timers.pop(letter, None)
        if timer is not None:
            timer.stop()
        self._release_timers[letter] = self.set_timer(
            self.key_release_ms / 1000, partial(self._release_key, letter)
        )

    def _release_key(self, letter: str) -> None:
        self._release_timers.pop(letter, None)
        self.board.router.key_up(letter)

    # =================================================================
    # Pointer channel
    # =================================================================

    def on_mouse_down(self, event: events.MouseDown) -> None:
        """A press anywhere outside the editor bar dismisses the editor."""
        if not self.board.editor.is_open:
            return
        bar = self.query_one(EditorBar)
        if event.widget is not None and (event.widget is bar or bar in event.widget.ancestors):
            return
        self.board.editor.dismiss()

    def on_pad_widget_pointer_down(self, message: PadWidget.PointerDown) -> None:
        self.board.editor.dismiss()
        pad = self.board.registry.get_by_note(message.note_id)
        if pad is not None:
            self.board.router.pointer_down(pad)

    def on_pad_widget_pointer_up(self, message: PadWidget.PointerUp) -> None:
        pad = self.board.registry.get_by_note(message.note_id)
        if pad is not None:
            self.board.router.pointer_up(pad)

    # =================================================================
    # Mapping editor
    # =================================================================

    def on_pad_widget_edit_requested(self, message: PadWidget.EditRequested) -> None:
        pad = self.board.registry.get_by_note(message.note_id)
        if pad is None:
            return
        if not self.board.editor.open_edit(pad):
            self.notify("Cannot change keys while a sequence is playing", severity="warning", timeout=2)

    def on_editor_bar_text_changed(self, message: EditorBar.TextChanged) -> None:
        self.board.editor.type_char(message.text)

    def on_editor_bar_confirmed(self, message: EditorBar.Confirmed) -> None:
        self.board.editor.confirm()

    def on_editor_bar_cancelled(self, message: EditorBar.Cancelled) -> None:
        self.board.editor.cancel()

    def on_editor_bar_dismissed(self, message: EditorBar.Dismissed) -> None:
        self.board.editor.dismiss()

    # =================================================================
    # Sequence
    # =================================================================

    def on_sequence_bar_play_requested(self, message: SequenceBar.PlayRequested) -> None:
        if not self.board.field.can_play:
            return
        self.board.editor.dismiss()
        sequence = self.board.field.value
        self.run_worker(self.board.runner.run(sequence), group="sequence")
