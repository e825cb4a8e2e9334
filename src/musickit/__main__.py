"""Allow `python -m musickit`."""

from musickit.cli.main import cli

if __name__ == "__main__":
    cli()
