"""Shared helpers for CLI commands: config loading, error display and audio output."""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

import click

from musickit.exceptions import MusicKitError, format_error_for_display
from musickit.models import AppConfig, SoundPad

if TYPE_CHECKING:
    from musickit.audio import SoundDeviceOutput

logger = logging.getLogger(__name__)


def echo_error(error: Exception, log_path: Path | None = None) -> None:
    """Show a clean error message (and recovery hint) without a traceback."""
    user_message, recovery_hint = format_error_for_display(error)

    click.echo("\n" + "=" * 70, err=True)
    click.echo(f"ERROR: {user_message}", err=True)
    click.echo("=" * 70, err=True)

    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)

    if log_path is not None:
        click.echo(f"\nFor details, check the log file: {log_path}", err=True)


def load_config(ctx: click.Context) -> AppConfig:
    """
    Load the configuration selected by the global --config option.

    Exits with status 1 after printing the error if the file is invalid.
    """
    obj = ctx.find_root().obj or {}
    config_path: Path | None = obj.get("config_path")
    try:
        return AppConfig.load_or_default(config_path)
    except MusicKitError as e:
        logger.error(f"Failed to load config: {e.technical_message}")
        echo_error(e, obj.get("log_path"))
        ctx.exit(1)


def open_output(config: AppConfig, pads: Iterable[SoundPad]) -> "SoundDeviceOutput":
    """
    Create the audio output, load every pad's sound and start the stream.

    Pads whose file cannot be loaded stay silent (logged by the output).

    Raises:
        AudioDeviceError: If the output device cannot be opened
    """
    # sounddevice loads PortAudio on import
    from musickit.audio import SoundDeviceOutput

    pads = list(pads)
    output = SoundDeviceOutput(
        sample_rate=config.sample_rate,
        buffer_size=config.buffer_size,
        device=config.audio_device,
    )
    loaded = output.load_pads(pads)
    logger.info(f"Loaded {loaded}/{len(pads)} sounds")
    if loaded < len(pads):
        click.echo(f"Warning: only {loaded} of {len(pads)} sounds loaded", err=True)
    output.start()
    return output
