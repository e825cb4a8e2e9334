"""Show the key mapping."""

import click

from musickit.cli.context import load_config
from musickit.core import SoundRegistry, StatusAnnouncer


@click.command(name="keys")
@click.option("--detailed", is_flag=True, help="Show one line per pad with its sound file")
@click.pass_context
def keys(ctx, detailed: bool):
    """Print the startup key mapping."""
    config = load_config(ctx)
    registry = SoundRegistry.from_config(config)

    click.echo(StatusAnnouncer(registry).mapping_text())

    if detailed:
        click.echo()
        for pad in registry.pads:
            status = "" if pad.source.exists() else "  (missing)"
            click.echo(f"  {pad.letter}  {pad.note_id:<4} {pad.source}{status}")
