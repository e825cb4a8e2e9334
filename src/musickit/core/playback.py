"""
Playback port: the only path from the board logic to audio.

Live input uses fire-and-forget `trigger`; the sequence runner uses
`trigger_timed`, which holds a sound for a fixed step window and then
stops it. Neither ever raises because of audio: a pad that cannot play is
simply silent.
"""

import asyncio
import logging
from typing import Protocol, runtime_checkable

from musickit.models import SoundPad

logger = logging.getLogger(__name__)


@runtime_checkable
class SoundOutput(Protocol):
    """Opaque playable-sound capability, addressed by note id."""

    def play(self, note_id: str) -> None:
        """Rewind the note and start it. May raise if unavailable."""
        ...

    def stop(self, note_id: str) -> None:
        """Stop the note and rewind it."""
        ...


class SilentOutput:
    """Output used when no audio device is wanted (headless runs and tests)."""

    def play(self, note_id: str) -> None:
        logger.debug(f"(silent) play {note_id}")

    def stop(self, note_id: str) -> None:
        logger.debug(f"(silent) stop {note_id}")


class PlaybackPort:
    """Wraps a SoundOutput and absorbs every playback failure."""

    def __init__(self, output: SoundOutput | None = None):
        """
        Initialize the playback port.

        Args:
            output: Audio capability (SilentOutput if None)
        """
        self.output: SoundOutput = output or SilentOutput()

    def trigger(self, pad: SoundPad) -> None:
        """Rewind and play a pad's sound, one-shot."""
        self._start(pad)

    async def trigger_timed(self, pad: SoundPad, duration_ms: int) -> None:
        """
        Play a pad for a fixed window, then stop and rewind it.

        The window is not tied to the sound's real length: a longer sound
        is cut off, a shorter one leaves silence until the window ends.

        Args:
            pad: Pad to play
            duration_ms: Step window in milliseconds
        """
        self._start(pad)
        await asyncio.sleep(duration_ms / 1000)
        self._stop(pad)

    def _start(self, pad: SoundPad) -> None:
        try:
            self.output.play(pad.note_id)
        except Exception as e:
            logger.debug(f"Playback unavailable for {pad.note_id}: {e}")

    def _stop(self, pad: SoundPad) -> None:
        try:
            self.output.stop(pad.note_id)
        except Exception as e:
            logger.debug(f"Stop failed for {pad.note_id}: {e}")
