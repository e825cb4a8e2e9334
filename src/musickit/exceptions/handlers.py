"""
Translation of library errors and shared error plumbing.

pydantic, sounddevice and soundfile failures are turned into
MusicKitError subclasses here, so the CLI and the TUI only ever show a
user message and a hint while the log keeps the details.

| Situation | Helper |
|-----------|--------|
| config.json fails to parse or validate | `wrap_pydantic_error(e, path)` |
| output stream fails to open | `wrap_audio_device_error(e, device_id)` |
| print an error in the CLI | `format_error_for_display(e)` |
| log and carry on (e.g. start the board without audio) | `with ErrorContext("start audio output", re_raise=False)` |
"""

import logging
from typing import Any, Optional

from pydantic import ValidationError

from .audio import AudioDeviceError
from .base import MusicKitError
from .config import ConfigFileInvalidError, ConfigValidationError

logger = logging.getLogger(__name__)


class ErrorContext:
    """
    Logs failures of one named operation, optionally swallowing them.

    The caught exception is kept on `.error` so the caller can still tell
    the user. Only Exception subclasses are handled; KeyboardInterrupt and
    friends always propagate.

    Example:
        ```python
        with ErrorContext("start audio output", re_raise=False) as ctx:
            output.start()
        if ctx.error:
            click.echo(f"Warning: {ctx.error} Starting without audio.")
        ```
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
        re_raise: bool = True,
    ):
        self.operation = operation
        self.logger = logger_instance or logger
        self.re_raise = re_raise
        self.error: Optional[Exception] = None

    def __enter__(self) -> "ErrorContext":
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False
        if not issubclass(exc_type, Exception):
            return False

        self.error = exc_val
        if isinstance(exc_val, MusicKitError):
            # Already explained, no traceback needed
            self.logger.error(f"Failed to {self.operation}: {exc_val.technical_message}")
        else:
            self.logger.error(f"Failed to {self.operation}: {exc_val}", exc_info=True)
        return not self.re_raise


def _location(err: dict[str, Any]) -> str:
    return ".".join(str(part) for part in err.get("loc", ())) or "config"


def wrap_pydantic_error(error: Exception, file_path: str) -> MusicKitError:
    """
    Turn a pydantic failure on `file_path` into a ConfigurationError.

    Syntax errors become ConfigFileInvalidError; value errors become a
    ConfigValidationError naming the field (or "multiple fields").
    """
    text = str(error)

    if "json_invalid" in text or "Invalid JSON" in text:
        # "... Invalid JSON: <parser message> [type=json_invalid, ..."
        detail = text.split("Invalid JSON:", 1)[-1].split("[type=", 1)[0].strip()
        return ConfigFileInvalidError(file_path, detail or text)

    errors = error.errors() if isinstance(error, ValidationError) else []
    if len(errors) == 1:
        err = errors[0]
        return ConfigValidationError(
            field=_location(err),
            value=err.get("input"),
            error_msg=err.get("msg", "validation failed"),
            file_path=file_path,
        )
    if errors:
        lines = [f"  - {_location(err)}: {err.get('msg', 'validation failed')}" for err in errors]
        return ConfigValidationError(
            field="multiple fields",
            value=None,
            error_msg=f"{len(errors)} validation errors:\n" + "\n".join(lines),
            file_path=file_path,
        )

    return ConfigValidationError(field="config", value=None, error_msg=text, file_path=file_path)


def wrap_audio_device_error(error: Exception, device_id: Optional[int] = None) -> MusicKitError:
    """Wrap a PortAudio/sounddevice failure (own errors pass through unchanged)."""
    if isinstance(error, MusicKitError):
        return error
    return AudioDeviceError(device_id=device_id, original_error=str(error))


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Text the CLI shows for `error`.

    Returns:
        (message, recovery hint or None). Foreign exceptions are shown as
        "<Type>: <message>" without a hint.
    """
    if isinstance(error, MusicKitError):
        return error.user_message, error.recovery_hint
    return f"{type(error).__name__}: {error}", None
