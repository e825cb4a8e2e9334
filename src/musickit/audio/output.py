"""Sound outputs: the playable-sound capability behind the playback port."""

import logging
from collections.abc import Iterable
from pathlib import Path
from threading import Lock
from typing import Optional

import numpy as np

from musickit.exceptions import PlaybackUnavailableError, SoundFileError
from musickit.models import SoundPad

from .data import Voice
from .device import AudioDevice
from .loader import SampleLoader
from .mixer import AudioMixer

logger = logging.getLogger(__name__)


class SoundDeviceOutput:
    """
    Plays pad sounds through a sounddevice output stream.

    Each note id owns one Voice. `play` rewinds and starts it, `stop`
    silences and rewinds it. Mixing happens on the audio thread; the lock
    protects the voice table against the event loop thread.

    Pads whose file cannot be loaded stay silent: `play` raises
    PlaybackUnavailableError, which the playback port swallows.
    """

    def __init__(
        self,
        sample_rate: int = 44100,
        buffer_size: int = 512,
        num_channels: int = 2,
        device: Optional[int] = None,
    ):
        self.loader = SampleLoader(target_sample_rate=sample_rate)
        self.mixer = AudioMixer(num_channels=num_channels)
        self.device = AudioDevice(
            sample_rate=sample_rate,
            buffer_size=buffer_size,
            num_channels=num_channels,
            device=device,
        )
        self.device.set_callback(self._render)

        self._voices: dict[str, Voice] = {}
        self._lock = Lock()

    def load(self, note_id: str, path: Path) -> bool:
        """
        Decode a sound file for a note.

        Returns:
            True if loaded, False if the file could not be loaded (logged)
        """
        try:
            audio = self.loader.load(path)
        except SoundFileError as e:
            logger.warning(e.technical_message)
            with self._lock:
                self._voices.pop(note_id, None)
            return False

        with self._lock:
            self._voices[note_id] = Voice(audio_data=audio)
        logger.debug(f"Loaded {note_id} from {path} ({audio.duration:.2f}s)")
        return True

    def load_pads(self, pads: Iterable[SoundPad]) -> int:
        """Load the source file of every pad; returns how many loaded."""
        return sum(1 for pad in pads if self.load(pad.note_id, pad.source))

    def start(self) -> None:
        """
        Start the output stream.

        Raises:
            AudioDeviceError: If the device cannot be opened
        """
        self.device.start()

    def close(self) -> None:
        """Stop the output stream."""
        self.device.stop()

    def play(self, note_id: str) -> None:
        """
        Rewind and play a note.

        Raises:
            PlaybackUnavailableError: If the stream is not running or the note has no audio
        """
        if not self.device.is_running:
            raise PlaybackUnavailableError(note_id, "audio output not running")
        with self._lock:
            voice = self._voices.get(note_id)
            if voice is None:
                raise PlaybackUnavailableError(note_id)
            voice.restart()

    def stop(self, note_id: str) -> None:
        """Stop and rewind a note (no-op for unknown notes)."""
        with self._lock:
            voice = self._voices.get(note_id)
            if voice is not None:
                voice.halt()

    def is_playing(self, note_id: str) -> bool:
        with self._lock:
            voice = self._voices.get(note_id)
            return voice is not None and voice.is_playing

    def _render(self, outdata: np.ndarray, frames: int) -> None:
        with self._lock:
            outdata[:] = self.mixer.mix(self._voices.values(), frames)

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

