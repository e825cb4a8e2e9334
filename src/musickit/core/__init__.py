"""Board logic: registry, input channels, editor, sequencer and status."""

from .announcer import StatusAnnouncer
from .board import InstrumentBoard
from .board_state import BoardState
from .input_router import InputRouter
from .letters import INVALID, extract_letter, filter_sequence, letter_from_key, normalize_letter
from .mapping_editor import EditorState, EditSession, MappingEditor
from .playback import PlaybackPort, SilentOutput, SoundOutput
from .registry import SoundRegistry
from .sequence_field import SEQUENCE_HEADROOM, SequenceField
from .sequence_runner import SequenceRunner

__all__ = [
    "BoardState",
    "EditSession",
    "EditorState",
    "INVALID",
    "InputRouter",
    "InstrumentBoard",
    "MappingEditor",
    "PlaybackPort",
    "SEQUENCE_HEADROOM",
    "SequenceField",
    "SequenceRunner",
    "SilentOutput",
    "SoundOutput",
    "SoundRegistry",
    "StatusAnnouncer",
    "extract_letter",
    "filter_sequence",
    "letter_from_key",
    "normalize_letter",
]
