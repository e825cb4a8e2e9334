"""Audio command implementations."""

import click


@click.group(name="audio")
def audio_group():
    """Audio device commands."""
    pass


def _display_device_details(info: dict, indent: str = "    ") -> None:
    """Display device details with specified indentation."""
    click.echo(f"{indent}Channels: {info['max_output_channels']} out")
    click.echo(f"{indent}Sample Rate: {info['default_samplerate']} Hz")
    if "default_low_output_latency" in info:
        latency_ms = info["default_low_output_latency"] * 1000
        click.echo(f"{indent}Latency: {latency_ms:.1f} ms")


@audio_group.command(name="list")
@click.option("--detailed", is_flag=True, help="Show detailed device information")
def list_audio(detailed: bool):
    """List available audio output devices."""
    # sounddevice loads PortAudio on import
    from musickit.audio import AudioDevice

    devices = AudioDevice.list_output_devices()
    if not devices:
        click.echo("No audio output devices found.")
        return

    default_device_id = AudioDevice.get_default_device()
    click.echo("Available audio output devices:\n")
    for device_id, name, host_api, info in devices:
        marker = "  [Default]" if device_id == default_device_id else ""
        click.echo(f"[{device_id}] {name}{marker}")
        click.echo(f"    Host API: {host_api}")
        if detailed:
            _display_device_details(info)
    click.echo("\nSet 'audio_device' in the config file to choose a device.")
