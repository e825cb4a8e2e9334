"""Errors raised while loading ~/.musickit/config.json.

A broken config file is never replaced with defaults: the user gets the
reason and the file path, and the board does not start.
"""

from typing import Any

from .base import MusicKitError

# JSON mistakes people make when editing the file by hand
_JSON_CHECKLIST = (
    "a comma after the last item of an object or list",
    "a string without double quotes",
    "a brace or bracket that is never closed",
)


class ConfigurationError(MusicKitError):
    """The configuration cannot be used."""


class ConfigFileInvalidError(ConfigurationError):
    """The config file is not valid JSON (or is empty)."""

    def __init__(self, file_path: str, parse_error: str):
        """
        Args:
            file_path: Path of the config file
            parse_error: Parser message, kept for the log
        """
        problem = parse_error.lower()
        if "empty" in problem:
            user_msg = "Configuration file is empty"
            hint = f"Delete {file_path} to start with the default board"
        elif "trailing comma" in problem:
            user_msg = "Configuration file has a trailing comma"
            hint = f"Remove the comma after the last item in {file_path}"
        else:
            user_msg = "Configuration file is not valid JSON"
            checklist = "\n".join(f"  - {item}" for item in _JSON_CHECKLIST)
            hint = f"Look for:\n{checklist}\nin {file_path}"

        super().__init__(
            user_message=user_msg,
            technical_message=f"Cannot parse {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=hint,
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """The config file parses but a value is out of range or inconsistent."""

    # Extra advice for fields that are easy to get wrong
    FIELD_HINTS = {
        "audio_device": "Run 'musickit audio list' to see the device IDs",
        "default_keys": "Use distinct single letters, at least one per sound",
        "sounds": "Each sound needs a unique note_id and a file name",
        "step_ms": "Step duration is in milliseconds and must be above 0",
    }

    def __init__(self, field: str, value: Any, error_msg: str, file_path: str | None = None):
        """
        Args:
            field: Dotted location of the bad value ("config" for whole-file checks)
            value: The rejected value
            error_msg: Validator message
            file_path: Config file the value came from
        """
        hint_lines = [f"Fix '{field}' in {file_path or 'your configuration'}"]
        root = field.split(".", 1)[0]
        if root in self.FIELD_HINTS:
            hint_lines.append(self.FIELD_HINTS[root])

        super().__init__(
            user_message=f"Invalid configuration value for '{field}': {error_msg}",
            technical_message=f"{field}={value!r} rejected: {error_msg}",
            recoverable=True,
            recovery_hint="\n".join(hint_lines),
        )
        self.field = field
        self.value = value
        self.file_path = file_path
