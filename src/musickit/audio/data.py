"""Audio data structures using dataclasses for performance.

These dataclasses store actual audio data (NumPy arrays) and runtime state.
They are NOT Pydantic models because:
- They contain non-serializable data (NumPy arrays)
- They are touched from the audio callback and need minimal overhead
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np
import numpy.typing as npt


@dataclass(slots=True)
class AudioData:
    """Decoded audio buffer for one sound file."""

    data: npt.NDArray[np.float32]  # Shape (frames,) or (frames, channels)
    sample_rate: int
    num_channels: int
    num_frames: int

    @classmethod
    def from_array(cls, data: npt.NDArray, sample_rate: int) -> "AudioData":
        """
        Create AudioData from a NumPy array.

        Args:
            data: Audio samples, shape (num_frames,) for mono or
                  (num_frames, num_channels) for multi-channel
            sample_rate: Sample rate in Hz

        Raises:
            ValueError: If the array is not 1D or 2D
        """
        if data.ndim == 1:
            num_channels = 1
            num_frames = len(data)
        elif data.ndim == 2:
            num_frames, num_channels = data.shape
        else:
            raise ValueError(f"Audio data must be 1D or 2D, got {data.ndim}D")

        if data.dtype != np.float32:
            data = data.astype(np.float32)

        return cls(data=data, sample_rate=sample_rate, num_channels=num_channels, num_frames=num_frames)

    @property
    def duration(self) -> float:
        """Duration in seconds."""
        return self.num_frames / self.sample_rate


@dataclass(slots=True)
class Voice:
    """
    Playback cursor for one pad.

    A pad has exactly one voice: triggering it again restarts the same
    voice from the beginning instead of layering a second copy.
    """

    audio_data: Optional[AudioData] = None
    position: int = 0
    is_playing: bool = False

    def restart(self) -> None:
        """Rewind to the start and play."""
        self.position = 0
        self.is_playing = self.audio_data is not None

    def halt(self) -> None:
        """Stop and rewind."""
        self.is_playing = False
        self.position = 0

    def get_frames(self, num_frames: int) -> Optional[npt.NDArray[np.float32]]:
        """Return up to num_frames frames from the current position, or None when exhausted."""
        if not self.is_playing or self.audio_data is None:
            return None
        if self.position >= self.audio_data.num_frames:
            self.halt()
            return None
        end = min(self.position + num_frames, self.audio_data.num_frames)
        return self.audio_data.data[self.position:end]

    def advance(self, num_frames: int) -> None:
        """Move the cursor forward; finishing the buffer stops the voice."""
        self.position += num_frames
        if self.audio_data is not None and self.position >= self.audio_data.num_frames:
            self.halt()
