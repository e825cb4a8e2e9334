"""Command line interface for musickit."""

from .main import cli

__all__ = ["cli"]
