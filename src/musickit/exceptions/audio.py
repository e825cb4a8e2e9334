"""Audio-related exceptions.

This module defines exceptions for audio errors:
- AudioError: Base class for audio errors
- AudioDeviceError: Output device could not be opened
- SoundFileError: A pad's sound file could not be loaded
- PlaybackUnavailableError: A sound cannot be started right now
"""

from pathlib import Path

from .base import MusicKitError


class AudioError(MusicKitError):
    """Audio initialization or playback failed."""

    pass


class AudioDeviceError(AudioError):
    """Audio output device could not be opened."""

    def __init__(self, device_id: int | None = None, original_error: str | None = None):
        """
        Initialize audio device error.

        Args:
            device_id: The device ID that failed (None = system default)
            original_error: The original error message from the audio library
        """
        label = "default audio device" if device_id is None else f"audio device {device_id}"
        tech_msg = f"Failed to open {label}"
        if original_error:
            tech_msg += f": {original_error}"

        super().__init__(
            user_message=f"Could not open the {label}.",
            technical_message=tech_msg,
            recoverable=True,
            recovery_hint=(
                "Run 'musickit audio list' to see available devices, "
                "or set 'audio_device' in your configuration."
            ),
        )
        self.device_id = device_id


class SoundFileError(AudioError):
    """A pad's sound file could not be loaded."""

    def __init__(self, path: Path, reason: str):
        """
        Initialize sound file error.

        Args:
            path: Path of the sound file
            reason: Why loading failed
        """
        super().__init__(
            user_message=f"Sound file could not be loaded: {path.name}",
            technical_message=f"Failed to load {path}: {reason}",
            recoverable=True,
            recovery_hint="Check 'sounds_dir' in your configuration.",
        )
        self.path = path


class PlaybackUnavailableError(AudioError):
    """The environment refused to start a sound."""

    def __init__(self, note_id: str, reason: str = "no audio loaded"):
        """
        Initialize playback unavailable error.

        Args:
            note_id: Note id of the pad that could not play
            reason: Why playback is unavailable
        """
        super().__init__(
            user_message=f"Sound {note_id} is unavailable.",
            technical_message=f"Cannot play {note_id}: {reason}",
            recoverable=True,
        )
        self.note_id = note_id
