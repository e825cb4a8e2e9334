"""
Instrument board: wires the board components together.

The board owns no UI. The Textual app and the headless CLI both build one
with `InstrumentBoard.from_config` and then talk to its components.
"""

import logging

from musickit.models import AppConfig

from .announcer import StatusAnnouncer
from .board_state import BoardState
from .input_router import InputRouter
from .mapping_editor import MappingEditor
from .playback import PlaybackPort, SoundOutput
from .registry import SoundRegistry
from .sequence_field import SequenceField
from .sequence_runner import SequenceRunner

logger = logging.getLogger(__name__)


class InstrumentBoard:
    """
    Top-level container for one board.

    Architecture:
        InstrumentBoard (this class)
        ├── State: BoardState (busy flag, held keys, pointer-held map)
        ├── Registry: SoundRegistry (pads, letter index, visual handles)
        ├── Playback: PlaybackPort (wraps a SoundOutput)
        ├── Channels: InputRouter, SequenceRunner
        ├── Editing: MappingEditor, SequenceField
        └── Status: StatusAnnouncer

    Mapping observers are registered here, so every letter change reaches
    the input router, the sequence field and the announcer.
    """

    def __init__(
        self,
        registry: SoundRegistry,
        output: SoundOutput | None = None,
        step_ms: int = 350,
        announce_delay_ms: int = 10,
    ):
        self.state = BoardState()
        self.registry = registry
        self.playback = PlaybackPort(output)

        self.router = InputRouter(self.registry, self.playback, self.state)
        self.editor = MappingEditor(self.registry, self.state)
        self.field = SequenceField(self.registry, self.state)
        self.runner = SequenceRunner(self.registry, self.playback, self.state, step_ms=step_ms)
        self.announcer = StatusAnnouncer(self.registry, delay_ms=announce_delay_ms)

        self.registry.register_observer(self.router)
        self.registry.register_observer(self.field)
        self.registry.register_observer(self.announcer)

        logger.info(f"InstrumentBoard ready with {len(self.registry)} pads")

    @classmethod
    def from_config(cls, config: AppConfig, output: SoundOutput | None = None) -> "InstrumentBoard":
        """Build a board from the application configuration."""
        return cls(
            SoundRegistry.from_config(config),
            output=output,
            step_ms=config.step_ms,
            announce_delay_ms=config.announce_delay_ms,
        )

    @property
    def busy(self) -> bool:
        return self.state.busy

    async def play_sequence(self, raw: str) -> str:
        """
        Normalize `raw` and run it.

        Returns:
            The normalized sequence that was played ("" if nothing ran)
        """
        sequence = self.runner.normalize(raw)
        if sequence:
            # An open edit session must not commit while the board is busy
            self.editor.dismiss()
        await self.runner.run(sequence)
        return sequence
