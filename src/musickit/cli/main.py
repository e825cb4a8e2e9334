"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from musickit import __version__

from .commands import audio_group, keys, play

logger = logging.getLogger(__name__)


def resolve_log_path(debug: bool, log_file: Optional[Path]) -> Path:
    """Log file used for a given combination of --debug and --log-file."""
    if log_file:
        return log_file
    if debug:
        return Path.cwd() / "musickit-debug.log"
    return Path.home() / ".musickit" / "logs" / "musickit.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> Path:
    """
    Configure logging for the application.

    The TUI owns stdout, so logs always go to a rotating file.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging in the current directory
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)

    Returns:
        Path of the log file
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Explicit log level wins for custom log files
    if log_file:
        level = getattr(logging, log_level.upper())

    log_path = resolve_log_path(debug, log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Keeps last 5 files, max 10MB each
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


@click.group(invoke_without_command=True)
@click.pass_context
@click.version_option(version=__version__, prog_name="musickit")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: ~/.musickit/config.json)",
)
@click.option(
    "--silent",
    is_flag=True,
    help="Start the board without opening an audio device",
)
@click.option(
    "-v", "--verbose",
    count=True,
    help="Increase verbosity (-v: INFO, -vv: DEBUG)",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug mode (DEBUG level, logs to ./musickit-debug.log)",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Custom log file path",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="INFO",
    help="Log level for file logging (default: INFO)",
)
def cli(
    ctx,
    config_path: Optional[Path],
    silent: bool,
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str,
):
    """
    Virtual Music Kit - a seven-pad piano for the terminal.

    Press the letter keys to play, click a pad's Edit button to change its
    key, or type a sequence and press "Play sequence".

    \b
    Examples:
      # Open the board
      musickit

      # Open the board without audio
      musickit --silent

      # Show the key mapping
      musickit keys

      # Play a sequence without the board
      musickit play asdfgh

      # Enable debug logging
      musickit --debug

      # List audio devices
      musickit audio list
    """
    log_path = setup_logging(verbose, debug, log_file, log_level)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["log_path"] = log_path
    ctx.obj["silent"] = silent

    # If a subcommand was invoked, don't run the app
    if ctx.invoked_subcommand is not None:
        return

    # Lazy imports to keep subcommands light
    from musickit.cli.context import echo_error, load_config, open_output
    from musickit.core import InstrumentBoard
    from musickit.exceptions import ErrorContext, format_error_for_display
    from musickit.tui import MusicKitApp

    logger.info("Starting Virtual Music Kit")

    config_obj = load_config(ctx)

    output = None
    try:
        board = InstrumentBoard.from_config(config_obj)

        if not silent:
            # Without audio the board stays playable, just silent
            with ErrorContext("start audio output", logger_instance=logger, re_raise=False) as audio_ctx:
                output = open_output(config_obj, board.registry.pads)
                board.playback.output = output
            if audio_ctx.error is not None:
                message, _ = format_error_for_display(audio_ctx.error)
                click.echo(f"Warning: {message} Starting without audio.", err=True)

        app = MusicKitApp(board, key_release_ms=config_obj.key_release_ms)
        app.run()

    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
        click.echo("\nShutting down...", err=True)
    except click.Abort:
        raise
    except Exception as e:
        logger.exception("Error running application")
        echo_error(e, log_path)
        click.echo("For logging options, run: musickit --help", err=True)
        sys.exit(1)
    finally:
        if output is not None:
            output.close()


cli.add_command(audio_group)
cli.add_command(keys)
cli.add_command(play)

if __name__ == "__main__":
    cli()
