"""Sequence input and play button."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widgets import Button, Input

from musickit.core import SequenceField


class SequenceBar(Horizontal):
    """
    Text field for a letter sequence plus the "Play sequence" button.

    The field only accepts letters currently mapped to a pad, up to the
    field's max length. Rejected keystrokes never reach the field.
    """

    DEFAULT_CSS = """
    SequenceBar {
        height: auto;
        padding: 0 1;
    }

    SequenceBar > #sequence-input {
        width: 1fr;
    }

    SequenceBar > #play-sequence {
        width: auto;
        min-width: 18;
    }
    """

    class PlayRequested(Message):
        """Posted when the play button is pressed or Enter is hit in the field."""

    def __init__(self, field: SequenceField) -> None:
        super().__init__()
        self.field = field
        self._syncing = False

    def compose(self) -> ComposeResult:
        yield Input(
            placeholder="Type a sequence, e.g. ASDFGH",
            id="sequence-input",
            restrict=self.field.restrict_pattern(),
            max_length=self.field.max_length,
        )
        yield Button("Play sequence", id="play-sequence", variant="primary", disabled=True)

    @property
    def input(self) -> Input:
        return self.query_one("#sequence-input", Input)

    @property
    def play_button(self) -> Button:
        return self.query_one("#play-sequence", Button)

    # =================================================================
    # Display updates (called by the view service)
    # =================================================================

    def refresh_rules(self) -> None:
        """Apply the field's current letter set and max length, and its re-filtered value."""
        self.input.restrict = self.field.restrict_pattern()
        self.input.max_length = self.field.max_length
        if self.input.value != self.field.value:
            self._syncing = True
            self.input.value = self.field.value
            self.input.cursor_position = len(self.field.value)
        self.update_play_state()

    def set_busy(self, busy: bool) -> None:
        self.input.disabled = busy
        self.update_play_state()

    def update_play_state(self) -> None:
        self.play_button.disabled = not self.field.can_play

    # =================================================================
    # Input handling
    # =================================================================

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        if self._syncing:
            self._syncing = False
            return
        normalized = self.field.set_text(event.value)
        if event.value != normalized:
            self._syncing = True
            self.input.value = normalized
            self.input.cursor_position = len(normalized)
        self.update_play_state()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        if self.field.can_play:
            self.post_message(self.PlayRequested())

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "play-sequence":
            self.post_message(self.PlayRequested())
