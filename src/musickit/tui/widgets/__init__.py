"""TUI widgets for the board."""

from .editor_bar import EditorBar, EditorInput
from .pad_widget import PadFace, PadWidget
from .sequence_bar import SequenceBar
from .status_line import StatusLine

__all__ = [
    "EditorBar",
    "EditorInput",
    "PadFace",
    "PadWidget",
    "SequenceBar",
    "StatusLine",
]
