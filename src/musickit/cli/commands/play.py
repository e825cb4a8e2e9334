"""Headless sequence playback."""

import asyncio
import logging

import click

from musickit.cli.context import echo_error, load_config, open_output
from musickit.core import InstrumentBoard
from musickit.exceptions import AudioError
from musickit.protocols import SequenceEvent

logger = logging.getLogger(__name__)


class StepPrinter:
    """SequenceObserver that echoes each step to the terminal."""

    def on_sequence_event(self, event: SequenceEvent, letter: str | None = None) -> None:
        if event == SequenceEvent.STEP_STARTED:
            click.echo(f"  {letter}", nl=False)
        elif event == SequenceEvent.STEP_SKIPPED:
            click.echo(f"  ({letter} skipped)", nl=False)
        elif event == SequenceEvent.FINISHED:
            click.echo()


@click.command(name="play")
@click.argument("sequence")
@click.option(
    "--step-ms",
    type=click.IntRange(min=1),
    default=None,
    help="Step duration in milliseconds (default: from config)",
)
@click.option("--silent", is_flag=True, help="Run without opening an audio device")
@click.pass_context
def play(ctx, sequence: str, step_ms: int | None, silent: bool):
    """
    Play SEQUENCE, one pad per letter.

    Only letters mapped to a pad are kept (case-insensitive), up to twice
    the number of pads.

    \b
    Examples:
      musickit play asdfgh
      musickit play "a s d f" --step-ms 200
    """
    config = load_config(ctx)
    if step_ms is not None:
        config = config.model_copy(update={"step_ms": step_ms})

    board = InstrumentBoard.from_config(config)
    normalized = board.runner.normalize(sequence)
    if not normalized:
        click.echo(f"Nothing to play: no mapped letters in '{sequence}'.")
        click.echo(board.announcer.mapping_text())
        return

    if normalized != sequence.upper():
        click.echo(f"Playing {normalized} (unmapped characters and overflow dropped)")
    else:
        click.echo(f"Playing {normalized}")

    obj = ctx.find_root().obj or {}
    output = None
    if not (silent or obj.get("silent")):
        try:
            output = open_output(config, board.registry.pads)
        except AudioError as e:
            logger.error(f"Audio output unavailable: {e.technical_message}")
            echo_error(e, obj.get("log_path"))
            ctx.exit(1)
        board.playback.output = output

    board.runner.register_observer(StepPrinter())
    try:
        asyncio.run(board.runner.run(normalized))
    finally:
        if output is not None:
            output.close()
