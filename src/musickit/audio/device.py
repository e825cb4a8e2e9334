"""Audio output device and stream management."""

import logging
from collections.abc import Callable
from typing import Optional

import numpy as np
import sounddevice as sd

from musickit.exceptions import wrap_audio_device_error

logger = logging.getLogger(__name__)


class AudioDevice:
    """
    Audio output stream lifecycle.

    Owns one sounddevice OutputStream and forwards each block to a single
    render callback. No board-specific logic.
    """

    def __init__(
        self,
        sample_rate: int = 44100,
        buffer_size: int = 512,
        num_channels: int = 2,
        device: Optional[int] = None,
    ):
        """
        Initialize audio device.

        Args:
            sample_rate: Stream sample rate in Hz
            buffer_size: Audio buffer size in frames
            num_channels: Number of output channels (1=mono, 2=stereo)
            device: Output device ID (None for system default)
        """
        self.sample_rate = sample_rate
        self.buffer_size = buffer_size
        self.num_channels = num_channels
        self.device = device

        self._stream: Optional[sd.OutputStream] = None
        self._callback: Optional[Callable[[np.ndarray, int], None]] = None

    def set_callback(self, callback: Callable[[np.ndarray, int], None]) -> None:
        """
        Set the render callback, called with (outdata, frames) for each block.
        """
        self._callback = callback

    def start(self) -> None:
        """
        Open and start the output stream.

        Raises:
            RuntimeError: If no callback was set
            AudioDeviceError: If the stream cannot be opened
        """
        if self._stream is not None:
            return

        if self._callback is None:
            raise RuntimeError("No audio callback set. Call set_callback() first.")

        try:
            self._stream = sd.OutputStream(
                samplerate=self.sample_rate,
                blocksize=self.buffer_size,
                channels=self.num_channels,
                device=self.device,
                dtype=np.float32,
                callback=self._audio_callback,
            )
            self._stream.start()
        except Exception as e:
            self._stream = None
            raise wrap_audio_device_error(e, device_id=self.device) from e

        buffer_ms = self.buffer_size / self.sample_rate * 1000
        logger.info(f"Audio stream started on {self.device_name}")
        logger.info(f"  Buffer size: {self.buffer_size} frames ({buffer_ms:.1f}ms)")
        logger.info(f"  Total latency: {self._stream.latency * 1000:.1f}ms")

    def stop(self) -> None:
        """Stop and close the output stream."""
        if self._stream is None:
            return
        self._stream.stop()
        self._stream.close()
        self._stream = None
        logger.info("Audio stream stopped")

    def _audio_callback(self, outdata: np.ndarray, frames: int, time_info, status) -> None:
        """Internal callback called by sounddevice on the audio thread."""
        if status:
            logger.warning(f"Audio callback status: {status}")

        if self._callback:
            self._callback(outdata, frames)
        else:
            outdata.fill(0)

    @property
    def is_running(self) -> bool:
        """Check if audio stream is running."""
        return self._stream is not None

    @property
    def device_name(self) -> str:
        """Get the name of the current audio device."""
        try:
            if self.device is not None:
                return sd.query_devices(self.device)["name"]
            default_device = sd.default.device[1]  # [input, output]
            if default_device is not None and default_device >= 0:
                return f"{sd.query_devices(default_device)['name']} (default)"
            return "Default Device"
        except Exception:
            return "Unknown Device"

    @staticmethod
    def list_output_devices() -> list[tuple[int, str, str, dict]]:
        """
        List all audio devices with output channels.

        Returns:
            List of tuples (device_id, device_name, host_api_name, device_info)
        """
        hostapis = sd.query_hostapis()
        available = []
        for i, device in enumerate(sd.query_devices()):
            if device["max_output_channels"] > 0:
                hostapi_name = hostapis[device["hostapi"]]["name"]
                available.append((i, device["name"], hostapi_name, device))
        return available

    @staticmethod
    def get_default_device() -> int:
        """Get default output device ID."""
        return sd.default.device[1]

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()
