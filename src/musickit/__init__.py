"""Virtual Music Kit: a playable piano board for the terminal."""

__version__ = "0.1.0"

from .core import InstrumentBoard
from .models import AppConfig

__all__ = ["AppConfig", "InstrumentBoard", "__version__"]
