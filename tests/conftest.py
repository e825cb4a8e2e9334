"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import Mock

import numpy as np
import pytest
import soundfile as sf

from musickit.core import BoardState, InstrumentBoard, PlaybackPort, SoundOutput, SoundRegistry
from musickit.models import SoundPad

NOTES = ("C4", "D4", "F4", "A4", "B4", "C5", "C6")
KEYS = ("A", "S", "D", "F", "G", "H", "J")


class FakeVisual:
    """PadVisual that records what the board asked it to show."""

    def __init__(self):
        self.active = False
        self.letter = ""
        self.history: list[bool] = []

    def set_active(self, active: bool) -> None:
        self.active = active
        self.history.append(active)

    def show_letter(self, letter: str) -> None:
        self.letter = letter


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_audio_array():
    """Generate sample audio data as NumPy array."""
    sample_rate = 44100
    duration = 0.1
    t = np.linspace(0, duration, int(sample_rate * duration), dtype=np.float32)
    return np.sin(2 * np.pi * 440 * t).astype(np.float32)


@pytest.fixture
def sample_audio_file(temp_dir, sample_audio_array):
    """Create a simple test audio file."""
    file_path = temp_dir / "test.wav"
    sf.write(str(file_path), sample_audio_array, 44100)
    return file_path


@pytest.fixture
def pads(temp_dir):
    """The seven default piano pads (their files do not exist)."""
    return [
        SoundPad(note_id=note, source=temp_dir / f"{note}.wav", letter=key)
        for note, key in zip(NOTES, KEYS)
    ]


@pytest.fixture
def registry(pads):
    """Registry with a FakeVisual bound to every pad."""
    reg = SoundRegistry(pads)
    for pad in pads:
        reg.bind_visual(pad.note_id, FakeVisual())
    return reg


@pytest.fixture
def state():
    return BoardState()


@pytest.fixture
def output():
    """Mock audio output."""
    return Mock(spec=SoundOutput)


@pytest.fixture
def playback(output):
    return PlaybackPort(output)


@pytest.fixture
def board(registry, output):
    """Fully wired board with a mock output and a short step."""
    return InstrumentBoard(registry, output=output, step_ms=20, announce_delay_ms=0)


@pytest.fixture
def visual_of(registry):
    """Look up the FakeVisual of a pad by note id or letter."""

    def lookup(letter_or_note: str) -> FakeVisual:
        pad = registry.get_by_note(letter_or_note) or registry.get_by_letter(letter_or_note)
        return registry.get_visual(pad)

    return lookup
