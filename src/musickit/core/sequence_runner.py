"""Sequence runner: plays a typed letter sequence one timed step at a time."""

import logging

from musickit.protocols import SequenceEvent, SequenceObserver
from musickit.utils import ObserverManager

from .board_state import BoardState
from .letters import filter_sequence
from .playback import PlaybackPort
from .registry import SoundRegistry
from .sequence_field import SEQUENCE_HEADROOM

logger = logging.getLogger(__name__)

DEFAULT_STEP_MS = 350


class SequenceRunner:
    """
    Runs a sequence of trigger letters as strictly serial timed steps.

    While a run is in progress the shared busy flag is set, which
    suppresses live pointer and keyboard activation and opening the
    mapping editor. The flag is cleared in a finally block, so it can
    never stay set after a run, whatever happens inside a step.

    Letters are resolved against the registry at step time: a letter that
    lost its pad after the run started is skipped.

    Usage:
        runner = SequenceRunner(registry, playback, state)
        await runner.run("ASDF")
    """

    def __init__(
        self,
        registry: SoundRegistry,
        playback: PlaybackPort,
        state: BoardState,
        step_ms: int = DEFAULT_STEP_MS,
    ):
        self.registry = registry
        self.playback = playback
        self.state = state
        self.step_ms = step_ms
        self._running = False
        self._observers = ObserverManager[SequenceObserver](observer_type_name="sequence")

    def register_observer(self, observer: SequenceObserver) -> None:
        self._observers.register(observer)

    def unregister_observer(self, observer: SequenceObserver) -> None:
        self._observers.unregister(observer)

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def max_length(self) -> int:
        return SEQUENCE_HEADROOM * len(self.registry)

    def normalize(self, raw: str) -> str:
        """
        Keep only currently mapped letters (case folded), preserving order
        and repeats, truncated to twice the pad count.

        Example:
            >>> runner.normalize("asdfgh123asdfgh123")
            'ASDFGHASDFGH'
        """
        return filter_sequence(raw, set(self.registry.letters()), self.max_length)

    async def run(self, sequence: str) -> None:
        """
        Play a sequence.

        No-op if the sequence is empty or a run is already in progress.

        Args:
            sequence: Letters to play, one step each
        """
        if not sequence or self._running:
            return

        self._running = True
        self.state.busy = True
        logger.info(f"Sequence started: {sequence} ({len(sequence)} steps, {self.step_ms}ms each)")
        self._observers.notify("on_sequence_event", SequenceEvent.STARTED)

        try:
            for letter in sequence:
                await self._step(letter)
        except Exception as e:
            logger.error(f"Sequence aborted: {e}", exc_info=True)
        finally:
            self.state.busy = False
            self._running = False
            logger.info("Sequence finished")
            self._observers.notify("on_sequence_event", SequenceEvent.FINISHED)

    async def _step(self, letter: str) -> None:
        pad = self.registry.get_by_letter(letter)
        if pad is None:
            logger.debug(f"Step skipped: {letter} is not mapped")
            self._observers.notify("on_sequence_event", SequenceEvent.STEP_SKIPPED, letter)
            return

        visual = self.registry.get_visual(pad)
        if visual is not None:
            visual.set_active(True)
        self._observers.notify("on_sequence_event", SequenceEvent.STEP_STARTED, letter)
        try:
            await self.playback.trigger_timed(pad, self.step_ms)
        finally:
            if visual is not None:
                visual.set_active(False)
        self._observers.notify("on_sequence_event", SequenceEvent.STEP_FINISHED, letter)
