"""Status line showing the key mapping and change notices."""

from textual.widgets import Static


class StatusLine(Static):
    """One line of status text, e.g. "Keys: A S D F G H J → C4 D4 F4 A4 B4 C5 C6"."""

    DEFAULT_CSS = """
    StatusLine {
        height: 1;
        background: $panel;
        color: $text;
        padding: 0 1;
    }
    """

    def __init__(self) -> None:
        super().__init__(id="status-line")
        self.text = ""

    def show(self, text: str) -> None:
        self.text = text
        self.update(text)
