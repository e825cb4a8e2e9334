"""Audio backend: decoding, mixing and device output for pad sounds."""

from .data import AudioData, Voice
from .device import AudioDevice
from .loader import SampleLoader
from .mixer import AudioMixer
from .output import SoundDeviceOutput

__all__ = [
    "AudioData",
    "AudioDevice",
    "AudioMixer",
    "SampleLoader",
    "SoundDeviceOutput",
    "Voice",
]
