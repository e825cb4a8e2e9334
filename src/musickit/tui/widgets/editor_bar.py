"""Editor bar for changing a pad's trigger letter."""

from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.message import Message
from textual.timer import Timer
from textual.widgets import Input, Label

# Length of the error pulse animation (seconds)
PULSE_SECONDS = 0.3


def typed_text(value: str, previous: str) -> str:
    """
    Work out what the user typed into a one-letter field.

    The field still holds the previous letter when a new one is typed, so
    the new value is either the previous letter plus the new one (in
    either order) or a plain edit. Dropping one copy of the previous
    letter leaves the typed text.
    """
    if previous and len(value) > 1 and previous in value.upper():
        idx = value.upper().index(previous)
        return value[:idx] + value[idx + 1:]
    return value


class EditorInput(Input):
    """Input that reports losing focus, so the editor can be dismissed."""

    class Dismissed(Message):
        """Posted when focus leaves the input."""

    def on_blur(self, event: events.Blur) -> None:
        self.post_message(self.Dismissed())


class EditorBar(Horizontal):
    """
    Bar shown while a pad's key is being edited (presentation only).

    Enter confirms, Escape cancels, moving focus elsewhere dismisses.
    Posts messages; the app drives the mapping editor.
    """

    DEFAULT_CSS = """
    EditorBar {
        height: auto;
        padding: 0 1;
        background: $panel;
        display: none;
    }

    EditorBar.open {
        display: block;
    }

    EditorBar > Label {
        padding: 1 1;
    }

    EditorBar > #editor-label {
        width: 24;
    }

    EditorBar > EditorInput {
        width: 40;
    }

    EditorBar > #editor-hint {
        color: $text-muted;
    }

    EditorBar.error > EditorInput {
        border: tall $error;
    }

    EditorBar.pulse > EditorInput {
        background: $error 30%;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", show=False),
    ]

    class TextChanged(Message):
        """Posted when the user types into the editor."""

        def __init__(self, text: str):
            super().__init__()
            self.text = text

    class Confirmed(Message):
        """Posted when Enter is pressed."""

    class Cancelled(Message):
        """Posted when Escape is pressed."""

    class Dismissed(Message):
        """Posted when the user moves away from the editor."""

    def __init__(self) -> None:
        super().__init__()
        self._pending = ""
        self._syncing = False
        self._pulse_timer: Timer | None = None

    def compose(self) -> ComposeResult:
        yield Label("Change key for:", id="editor-label")
        yield EditorInput(
            placeholder="Press a letter (A–Z), Enter to confirm",
            id="editor-input",
        )
        yield Label("Enter to confirm · Esc to cancel", id="editor-hint")

    @property
    def input(self) -> EditorInput:
        return self.query_one(EditorInput)

    @property
    def is_open(self) -> bool:
        return self.has_class("open")

    # =================================================================
    # Display updates (called by the view service)
    # =================================================================

    def open(self, note_id: str, pending: str) -> None:
        self.query_one("#editor-label", Label).update(f"Change key for: {note_id}")
        self._stop_pulse()
        self.remove_class("error")
        self.add_class("open")
        self.show_pending(pending)
        # The bar is hidden until the "open" class is applied
        self.call_after_refresh(self.input.focus)

    def show_pending(self, pending: str) -> None:
        self._pending = pending
        if self.input.value != pending:
            self._syncing = True
            self.input.value = pending
            self.input.cursor_position = len(pending)
        self.remove_class("error")

    def show_error(self) -> None:
        # A repeated rejection restarts the pulse
        self._stop_pulse()
        self.add_class("error", "pulse")
        self._pulse_timer = self.set_timer(PULSE_SECONDS, self._end_pulse)

    def _stop_pulse(self) -> None:
        if self._pulse_timer is not None:
            self._pulse_timer.stop()
            self._pulse_timer = None
        self.remove_class("pulse")

    def _end_pulse(self) -> None:
        self._pulse_timer = None
        self.remove_class("pulse")

    def close(self) -> None:
        self._stop_pulse()
        self.remove_class("open", "error")
        self._pending = ""
        if self.input.value:
            self._syncing = True
            self.input.value = ""

    # =================================================================
    # Input handling
    # =================================================================

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        if self._syncing:
            self._syncing = False
            return
        if not self.is_open:
            return
        self.post_message(self.TextChanged(typed_text(event.value, self._pending)))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        if self.is_open:
            self.post_message(self.Confirmed())

    def on_editor_input_dismissed(self, event: EditorInput.Dismissed) -> None:
        event.stop()
        if self.is_open:
            self.post_message(self.Dismissed())

    def action_cancel(self) -> None:
        if self.is_open:
            self.post_message(self.Cancelled())
