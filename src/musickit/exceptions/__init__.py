"""
Custom exception hierarchy for Music Kit.

## Exception Hierarchy

```
MusicKitError (base)
├── MappingError
│   ├── InvalidLetterError
│   └── DuplicateLetterError
├── AudioError
│   ├── AudioDeviceError
│   ├── SoundFileError
│   └── PlaybackUnavailableError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All custom exceptions carry a `user_message`, a `technical_message` for
the log, a `recoverable` flag and an optional `recovery_hint`.

Mapping errors never leave the mapping editor: they drive the editor's
error pulse and the session stays open. Playback errors never leave the
playback port: a pad that cannot play is simply silent.
"""

from .audio import AudioDeviceError, AudioError, PlaybackUnavailableError, SoundFileError
from .base import MusicKitError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import (
    ErrorContext,
    format_error_for_display,
    wrap_audio_device_error,
    wrap_pydantic_error,
)
from .mapping import DuplicateLetterError, InvalidLetterError, MappingError

__all__ = [
    # Audio
    "AudioDeviceError",
    "AudioError",
    "PlaybackUnavailableError",
    "SoundFileError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Mapping
    "DuplicateLetterError",
    "InvalidLetterError",
    "MappingError",
    # Base
    "MusicKitError",
    # Handlers
    "ErrorContext",
    "format_error_for_display",
    "wrap_audio_device_error",
    "wrap_pydantic_error",
]
