"""Decoding of pad sound files."""

import logging
from pathlib import Path
from typing import Optional

import numpy as np
import numpy.typing as npt
import soundfile as sf

from musickit.exceptions import SoundFileError

from .data import AudioData

logger = logging.getLogger(__name__)


def resample_linear(data: npt.NDArray[np.float32], orig_sr: int, target_sr: int) -> npt.NDArray[np.float32]:
    """
    Linearly interpolate `data` from `orig_sr` to `target_sr`.

    Works on mono (frames,) and multi-channel (frames, channels) buffers.
    Good enough for short one-shot notes.
    """
    if orig_sr == target_sr:
        return data

    frames = int(len(data) * target_sr / orig_sr)
    x_old = np.linspace(0.0, 1.0, len(data))
    x_new = np.linspace(0.0, 1.0, frames)

    if data.ndim == 1:
        return np.interp(x_new, x_old, data).astype(np.float32)
    return np.column_stack(
        [np.interp(x_new, x_old, data[:, ch]) for ch in range(data.shape[1])]
    ).astype(np.float32)


class SampleLoader:
    """
    Reads a pad's sound file into an AudioData buffer.

    Any format libsndfile understands is accepted (WAV, FLAC, OGG...).
    Every failure surfaces as SoundFileError, so callers handle one type.
    """

    def __init__(self, target_sample_rate: Optional[int] = None):
        """
        Args:
            target_sample_rate: Output stream rate; files at another rate are
                resampled. None keeps each file's own rate.
        """
        self.target_sample_rate = target_sample_rate

    def load(self, path: Path) -> AudioData:
        """
        Decode `path` as float32.

        Raises:
            SoundFileError: If the file is missing, empty or cannot be decoded
        """
        if not path.is_file():
            raise SoundFileError(path, "file not found")

        try:
            data, sample_rate = sf.read(str(path), dtype="float32")
        except (RuntimeError, OSError) as e:  # LibsndfileError is a RuntimeError
            raise SoundFileError(path, str(e)) from e

        if len(data) == 0:
            raise SoundFileError(path, "file is empty")

        target = self.target_sample_rate
        if target and sample_rate != target:
            logger.debug(f"Resampling {path.name}: {sample_rate} Hz -> {target} Hz")
            data = resample_linear(data, sample_rate, target)
            sample_rate = target

        return AudioData.from_array(data, sample_rate)
