"""Widget representing a single pad on the board."""

from textual import events
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import Button, Static

from musickit.models import SoundPad


class PadFace(Static):
    """
    Playable surface of a pad: note and key labels.

    Mouse handling lives here rather than on PadWidget, so pressing the
    pad's Edit button never sounds the pad.
    """

    def __init__(self, note_id: str, letter: str) -> None:
        super().__init__(classes="pad-face")
        self.note_id = note_id
        self.letter = letter
        self.render_labels()

    def render_labels(self) -> None:
        self.update(f"[b]{self.note_id}[/b]\n[dim]key[/dim] {self.letter}")

    def on_mouse_down(self, event: events.MouseDown) -> None:
        self.post_message(PadWidget.PointerDown(self.note_id))

    def on_mouse_up(self, event: events.MouseUp) -> None:
        self.post_message(PadWidget.PointerUp(self.note_id))

    def on_leave(self, event: events.Leave) -> None:
        self.post_message(PadWidget.PointerUp(self.note_id))


class PadWidget(Vertical):
    """
    One pad of the board (presentation only).

    Implements the PadVisual protocol for the board logic and posts
    messages for pointer presses and edit requests, so the app decides
    what they mean.
    """

    DEFAULT_CSS = """
    PadWidget {
        width: 1fr;
        height: 100%;
        border: solid $primary;
        background: $surface;
    }

    PadWidget.active {
        background: $success 60%;
        border: solid $success;
    }

    PadWidget > .pad-face {
        height: 1fr;
        content-align: center middle;
        text-align: center;
    }

    PadWidget > .pad-edit {
        width: 100%;
        min-width: 6;
        height: 3;
    }
    """

    class PointerDown(Message):
        """Posted when the pad surface is pressed."""

        def __init__(self, note_id: str):
            super().__init__()
            self.note_id = note_id

    class PointerUp(Message):
        """Posted when the pad surface is released or the pointer leaves it."""

        def __init__(self, note_id: str):
            super().__init__()
            self.note_id = note_id

    class EditRequested(Message):
        """Posted when the pad's Edit button is pressed."""

        def __init__(self, note_id: str):
            super().__init__()
            self.note_id = note_id

    def __init__(self, pad: SoundPad) -> None:
        super().__init__(id=f"pad-{pad.note_id}")
        self.note_id = pad.note_id
        self._face = PadFace(pad.note_id, pad.letter)
        self._active = False

    def compose(self) -> ComposeResult:
        yield self._face
        yield Button("Edit", classes="pad-edit")

    @property
    def letter(self) -> str:
        return self._face.letter

    @property
    def is_active(self) -> bool:
        return self._active

    # =================================================================
    # PadVisual Protocol
    # =================================================================

    def set_active(self, active: bool) -> None:
        if active != self._active:
            self._active = active
            self.set_class(active, "active")

    def show_letter(self, letter: str) -> None:
        self._face.letter = letter
        self._face.render_labels()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(self.EditRequested(self.note_id))
