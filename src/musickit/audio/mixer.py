"""Audio mixer for combining the voices of all pads."""

from collections.abc import Iterable

import numpy as np
import numpy.typing as npt

from .data import Voice


class AudioMixer:
    """Mix multiple voices into a single output buffer."""

    def __init__(self, num_channels: int = 2):
        """
        Initialize audio mixer.

        Args:
            num_channels: Number of output channels (1=mono, 2=stereo)
        """
        self.num_channels = num_channels

    def mix(self, voices: Iterable[Voice], num_frames: int) -> npt.NDArray[np.float32]:
        """
        Mix all playing voices and advance their cursors.

        Args:
            voices: Voices to mix
            num_frames: Number of frames to generate

        Returns:
            Mixed buffer of shape (num_frames, num_channels), clipped to [-1, 1]
        """
        output = np.zeros((num_frames, self.num_channels), dtype=np.float32)

        for voice in voices:
            frames = voice.get_frames(num_frames)
            if frames is None:
                continue

            frames = self._match_channels(frames)
            length = len(frames)
            output[:length, :] += frames
            voice.advance(length)

        np.clip(output, -1.0, 1.0, out=output)
        return output

    def _match_channels(self, frames: npt.NDArray[np.float32]) -> npt.NDArray[np.float32]:
        """Convert frames to shape (n, num_channels)."""
        if frames.ndim == 1:
            return np.repeat(frames[:, np.newaxis], self.num_channels, axis=1)

        source_channels = frames.shape[1]
        if source_channels == self.num_channels:
            return frames
        if self.num_channels == 1:
            return np.mean(frames, axis=1, dtype=np.float32)[:, np.newaxis]
        if source_channels == 1:
            return np.repeat(frames, self.num_channels, axis=1)
        if source_channels > self.num_channels:
            return frames[:, : self.num_channels]

        # Fewer source channels than outputs: pad the rest with silence
        padded = np.zeros((len(frames), self.num_channels), dtype=np.float32)
        padded[:, :source_channels] = frames
        return padded
